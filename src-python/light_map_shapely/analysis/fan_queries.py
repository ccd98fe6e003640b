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
Light Fan Queries
===============================================================================
Geometric questions about light fans produced by LightMap:

- Union of the fan as a Shapely geometry and its area
- Whether a shape is touched by the light (sensor test)
- Soft light sampling from several offset light positions
- Conversion of collide points to NumPy arrays

These utilities leverage the Shapely library for polygon operations.
===============================================================================
"""

from typing import Iterable, List, Sequence, Tuple

import numpy as np
from shapely.geometry import GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from ..core.constants import SOFT_LIGHT_OFFSETS
from ..core.geometry import Point, Triangle
from ..core.light_map import LightMap, CollidePoints


def light_fan_to_polygon(triangles: Iterable[Triangle]) -> BaseGeometry:
    """
    Merge a light fan into a single Shapely geometry.

    Degenerate (zero-area) wedges are skipped. An empty fan gives an empty
    GeometryCollection.

    Args:
        triangles: Light triangles, typically from calculate_light_triangles().

    Returns:
        Shapely Polygon (or MultiPolygon for fans with pinched wedges).
    """
    polygons = [t.to_shapely() for t in triangles if t.area > 0.0]
    if not polygons:
        return GeometryCollection()
    return unary_union(polygons)


def lit_area(triangles: Iterable[Triangle]) -> float:
    """Area of the union of the light triangles."""
    return light_fan_to_polygon(triangles).area


def fan_area(triangles: Sequence[Triangle]) -> float:
    """
    Sum of the individual triangle areas.

    For a well-formed fan the wedges do not overlap, so this matches
    lit_area() up to floating point error.
    """
    if not triangles:
        return 0.0
    pts = np.array(
        [[[t.p0.x, t.p0.y], [t.p1.x, t.p1.y], [t.p2.x, t.p2.y]] for t in triangles],
        dtype=float,
    )
    a = pts[:, 1] - pts[:, 0]
    b = pts[:, 2] - pts[:, 0]
    return float(np.sum(np.abs(a[:, 0] * b[:, 1] - a[:, 1] * b[:, 0])) * 0.5)


def is_shape_lit(triangles: Iterable[Triangle], shape) -> bool:
    """
    Test whether any light triangle touches the given shape.

    Args:
        triangles: Light triangles.
        shape: Any obstacle shape with to_shapely() (Circle, Rect, Triangle,
            Quad, Polygon), a Point, or a Shapely geometry.

    Returns:
        True if at least one triangle intersects the shape.
    """
    if isinstance(shape, BaseGeometry):
        target = shape
    elif hasattr(shape, 'to_shapely'):
        target = shape.to_shapely()
    else:
        raise TypeError(f"Cannot test lighting of {type(shape).__name__}")

    for triangle in triangles:
        if triangle.to_shapely().intersects(target):
            return True
    return False


def calculate_soft_light_triangles(
    light_map: LightMap,
    light_pos: Point,
    offsets: Sequence[Tuple[float, float]] = SOFT_LIGHT_OFFSETS,
) -> List[List[Triangle]]:
    """
    Compute one light fan per offset light position.

    Drawing the fans on top of each other with partial opacity gives a
    softened shadow edge around obstacle silhouettes.

    Args:
        light_map: The light map to query.
        light_pos: Central light position.
        offsets: (dx, dy) offsets applied to light_pos.

    Returns:
        List of fans, in the order of offsets. A fan is empty when its
        offset position falls outside the room.
    """
    return [
        light_map.calculate_light_triangles(light_pos.moved_by(dx, dy))
        for dx, dy in offsets
    ]


def collide_points_to_array(collide_points: CollidePoints) -> np.ndarray:
    """
    Convert collide point pairs to an array of shape (n, 2, 2).

    Index [i, 0] is the left hit of pair i and [i, 1] its right hit, each as
    (x, y).
    """
    if not collide_points:
        return np.empty((0, 2, 2), dtype=float)
    return np.array(
        [[[left.x, left.y], [right.x, right.y]] for left, right in collide_points],
        dtype=float,
    )

