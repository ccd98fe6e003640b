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


import math
from typing import List

from shapely.geometry import Polygon as ShapelyPolygon

from .constants import (
    DEFAULT_CIRCLE_QUALITY,
    MIN_CIRCLE_QUALITY,
    RECT_STRETCH,
    STAR_INNER_OUTER_RATIO,
)
from .geometry import geometry, Point, Line, Rect, Triangle, Quad, Circle, Polygon


SUPPORTED_SHAPES = (Triangle, Rect, Quad, Circle, Polygon, ShapelyPolygon, Line)


def decompose_to_segments(shape, quality: int = DEFAULT_CIRCLE_QUALITY) -> List[Line]:
    """
    Convert an obstacle shape into the closed loop of segments that bounds it.

    Rules per shape:
    - Triangle: p0->p1, p1->p2, p2->p0
    - Rect: stretched by RECT_STRETCH, then top, right, bottom, left
    - Quad: p0->p1, p1->p2, p2->p3, p3->p0
    - Circle: max(quality, MIN_CIRCLE_QUALITY) chords evenly spaced by angle
    - Polygon (or Shapely Polygon): consecutive vertices of the outer ring
    - Line: a two-vertex ring, begin->end then end->begin, so that both
      endpoints are sampled

    Degenerate shapes are not rejected; zero-length segments are emitted as-is.

    Args:
        shape: One of SUPPORTED_SHAPES.
        quality: Tessellation quality, only used for circles.

    Returns:
        List of Line segments in registration order.

    Raises:
        TypeError: If the shape type is not supported.
    """
    if isinstance(shape, Triangle):
        return [
            Line(shape.p0, shape.p1),
            Line(shape.p1, shape.p2),
            Line(shape.p2, shape.p0),
        ]

    if isinstance(shape, Rect):
        s_rect = shape.stretched(*RECT_STRETCH)
        return [s_rect.top, s_rect.right, s_rect.bottom, s_rect.left]

    if isinstance(shape, Quad):
        p = shape.points
        return [Line(p[i], p[(i + 1) % 4]) for i in range(4)]

    if isinstance(shape, Circle):
        quality = max(quality, MIN_CIRCLE_QUALITY)
        da = 2 * math.pi / quality
        return [
            Line(geometry.circular(shape.r, da * i),
                 geometry.circular(shape.r, da * (i + 1))).moved_by(shape.center.x, shape.center.y)
            for i in range(quality)
        ]

    if isinstance(shape, ShapelyPolygon):
        shape = Polygon.from_shapely(shape)

    if isinstance(shape, Polygon):
        outer = shape.outer
        return [Line(outer[i], outer[(i + 1) % len(outer)]) for i in range(len(outer))]

    if isinstance(shape, Line):
        return [shape, Line(shape.end, shape.begin)]

    raise TypeError(
        f"Unsupported obstacle shape {type(shape).__name__}. "
        f"Supported: {', '.join(t.__name__ for t in SUPPORTED_SHAPES)}"
    )


def create_star(r: float, angle: float = 0.0, center: Point = Point(0.0, 0.0),
                inner_outer_ratio: float = STAR_INNER_OUTER_RATIO) -> Polygon:
    """
    Build a five-pointed star.

    Vertices alternate between the outer radius and the inner radius
    (r * inner_outer_ratio), starting with an outer tip at `angle`
    (clockwise from screen-up).
    """
    outer = []
    for k in range(10):
        radius = r if k % 2 == 0 else r * inner_outer_ratio
        offset = geometry.circular(radius, angle + k * math.pi / 5)
        outer.append(Point(center.x + offset.x, center.y + offset.y))
    return Polygon(tuple(outer))
