"""
Copyright 2026 light-map-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Constants used throughout the light map computation.

These live in their own module so that the geometry helpers, the shape
decomposition and the light map can share them without circular imports.
"""

# Angular perturbation (radians) applied on each side of a sampled angle.
# Changing it changes the resolved silhouette at polygon vertices.
COLLIDE_EPSILON = 1e-10

# Circles are tessellated with at least this many segments
MIN_CIRCLE_QUALITY = 6
DEFAULT_CIRCLE_QUALITY = 8

# The light must sit at least this far inside the room
ROOM_SAFETY_MARGIN = 1.0

# Rectangles are registered stretched by (top, right, bottom, left)
RECT_STRETCH = (0, 1, 1, 0)

DEFAULT_ROOM_SIZE = (640, 480)

# Inner radius of a star relative to its outer radius
STAR_INNER_OUTER_RATIO = 0.38

# Light positions sampled around the cursor for a soft light
SOFT_LIGHT_OFFSETS = ((-1, 0), (1, 0), (0, 1), (0, -1))
