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

Light Map Shapely
=================

2D visibility (shadow casting) for a point light inside a rectangular room
with opaque obstacles. The light map produces a fan of triangles covering
exactly the area visible from the light.

Main modules:
- core: Geometry value types, obstacle decomposition, LightMap, SVG output
- analysis: Shapely-based fan queries, soft light sampling, CSV export
- examples: Demonstration scenes

Quick start:
    from light_map_shapely import LightMap, Rect, Circle, Point

    light_map = LightMap(Rect(40, 40, 1200, 640))
    light_map.add_object(Circle(Point(1000, 500), 80), 12)
    triangles = light_map.calculate_light_triangles(Point(300, 300))
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.geometry import Point, Line, Rect, Triangle, Quad, Circle, Polygon
from .core.light_map import LightMap

__all__ = [
    'LightMap',
    'Point', 'Line', 'Rect', 'Triangle', 'Quad', 'Circle', 'Polygon',
    '__version__',
]
