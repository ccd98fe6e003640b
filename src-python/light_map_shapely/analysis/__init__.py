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

===============================================================================
Analysis Utilities
===============================================================================
Helpers built on top of LightMap results:

- Light fan union, area and sensor tests (Shapely)
- Soft light sampling around a light position
- CSV export of collide points and light triangles
===============================================================================
"""

from .fan_queries import (
    light_fan_to_polygon,
    lit_area,
    fan_area,
    is_shape_lit,
    calculate_soft_light_triangles,
    collide_points_to_array,
)
from .saving import (
    save_collide_points_csv,
    save_light_triangles_csv,
)

__all__ = [
    'light_fan_to_polygon',
    'lit_area',
    'fan_area',
    'is_shape_lit',
    'calculate_soft_light_triangles',
    'collide_points_to_array',
    'save_collide_points_csv',
    'save_light_triangles_csv',
]
