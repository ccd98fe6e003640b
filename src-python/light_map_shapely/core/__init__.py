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


from .geometry import geometry, Geometry, Point, Line, Rect, Triangle, Quad, Circle, Polygon
from . import constants
from .shapes import decompose_to_segments, create_star
from .light_map import LightMap
from .svg_renderer import LightMapSVGRenderer

__all__ = [
    'geometry', 'Geometry', 'Point', 'Line', 'Rect', 'Triangle', 'Quad', 'Circle', 'Polygon',
    'constants',
    'decompose_to_segments', 'create_star',
    'LightMap',
    'LightMapSVGRenderer',
]
