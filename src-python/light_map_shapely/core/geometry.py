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
from dataclasses import dataclass
from typing import List, Optional, Tuple

from shapely.geometry import Point as ShapelyPoint, LineString
from shapely.geometry import Polygon as ShapelyPolygon


@dataclass(frozen=True)
class Point:
    """
    A point in 2D space (screen coordinates, y grows downward).
    Can be converted to/from Shapely Point objects.
    """
    x: float
    y: float

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def moved_by(self, dx: float, dy: float) -> 'Point':
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Line:
    """
    A line segment between two points.

    Used for occluding edges as well as for rays: a ray is simply a segment
    that starts at the light and ends at the maximum cast distance.
    """
    begin: Point
    end: Point

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.begin.x, self.begin.y), (self.end.x, self.end.y)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'Line':
        """Create Line from Shapely LineString."""
        coords = list(sl.coords)
        return cls(Point(coords[0][0], coords[0][1]), Point(coords[1][0], coords[1][1]))

    def moved_by(self, dx: float, dy: float) -> 'Line':
        return Line(self.begin.moved_by(dx, dy), self.end.moved_by(dx, dy))

    def is_finite(self) -> bool:
        return self.begin.is_finite() and self.end.is_finite()


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle defined by its top-left corner and size.

    Sides are oriented clockwise on screen: top runs left to right, right runs
    downward, bottom runs right to left and left runs upward.
    """
    x: float
    y: float
    w: float
    h: float

    def stretched(self, top: float, right: Optional[float] = None,
                  bottom: Optional[float] = None, left: Optional[float] = None) -> 'Rect':
        """
        Grow each side outward by the given amount (negative values shrink).

        With a single argument every side moves by the same amount.

        Args:
            top: Amount the top edge moves up.
            right: Amount the right edge moves right.
            bottom: Amount the bottom edge moves down.
            left: Amount the left edge moves left.

        Returns:
            A new Rect.
        """
        if right is None and bottom is None and left is None:
            right = bottom = left = top
        right = 0.0 if right is None else right
        bottom = 0.0 if bottom is None else bottom
        left = 0.0 if left is None else left
        return Rect(self.x - left, self.y - top, self.w + left + right, self.h + top + bottom)

    def contains(self, p: Point) -> bool:
        """Half-open containment test (left/top edges inside, right/bottom outside)."""
        return (self.x <= p.x < self.x + self.w) and (self.y <= p.y < self.y + self.h)

    @property
    def top(self) -> Line:
        return Line(Point(self.x, self.y), Point(self.x + self.w, self.y))

    @property
    def right(self) -> Line:
        return Line(Point(self.x + self.w, self.y), Point(self.x + self.w, self.y + self.h))

    @property
    def bottom(self) -> Line:
        return Line(Point(self.x + self.w, self.y + self.h), Point(self.x, self.y + self.h))

    @property
    def left(self) -> Line:
        return Line(Point(self.x, self.y + self.h), Point(self.x, self.y))

    @property
    def area(self) -> float:
        return self.w * self.h

    def corners(self) -> List[Point]:
        """Corners in side order: top-left, top-right, bottom-right, bottom-left."""
        return [self.top.begin, self.right.begin, self.bottom.begin, self.left.begin]

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([(p.x, p.y) for p in self.corners()])


@dataclass(frozen=True)
class Triangle:
    """A triangle given by three vertices."""
    p0: Point
    p1: Point
    p2: Point

    @property
    def area(self) -> float:
        return abs(Geometry.cross(
            Point(self.p1.x - self.p0.x, self.p1.y - self.p0.y),
            Point(self.p2.x - self.p0.x, self.p2.y - self.p0.y),
        )) * 0.5

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([(self.p0.x, self.p0.y), (self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])


@dataclass(frozen=True)
class Quad:
    """A quadrilateral given by four vertices in order."""
    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def points(self) -> Tuple[Point, Point, Point, Point]:
        return (self.p0, self.p1, self.p2, self.p3)

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([(p.x, p.y) for p in self.points])


@dataclass(frozen=True)
class Circle:
    """A circle with a center point and a numeric radius."""
    center: Point
    r: float

    def to_shapely(self) -> ShapelyPolygon:
        """Convert to Shapely Point with buffer (approximation of circle)."""
        return self.center.to_shapely().buffer(self.r)


@dataclass(frozen=True)
class Polygon:
    """
    A simple polygon described by its outer ring.

    The ring is open: the last vertex connects back to the first one
    implicitly, as in the vertex list of a Shapely exterior without its
    repeated closing coordinate.
    """
    outer: Tuple[Point, ...]

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([(p.x, p.y) for p in self.outer])

    @classmethod
    def from_shapely(cls, sp: ShapelyPolygon) -> 'Polygon':
        """Create Polygon from the exterior ring of a Shapely Polygon."""
        coords = list(sp.exterior.coords)
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords = coords[:-1]
        return cls(tuple(Point(x, y) for x, y in coords))


class Geometry:
    """
    Basic geometric figures and operations on the value types above.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        return Point(x, y)

    @staticmethod
    def line(p1: Point, p2: Point) -> Line:
        return Line(p1, p2)

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """
        Calculate the cross product, where the two points are treated as vectors.

        Args:
            p1: First point (as vector)
            p2: Second point (as vector)

        Returns:
            Cross product (z-component in 2D)
        """
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def segments_intersection(s1: Line, s2: Line) -> Optional[Point]:
        """
        Calculate the intersection point of two segments.

        Both segments are parametrised over [0, 1]; the intersection is
        reported only when both parameters fall inside that range (endpoints
        included). Parallel, collinear and zero-length segments never
        intersect, and neither does anything with a non-finite coordinate.

        Args:
            s1: First segment (typically the ray)
            s2: Second segment

        Returns:
            Intersection point on s1, or None
        """
        if not (s1.is_finite() and s2.is_finite()):
            return None

        rx = s1.end.x - s1.begin.x
        ry = s1.end.y - s1.begin.y
        sx = s2.end.x - s2.begin.x
        sy = s2.end.y - s2.begin.y

        denominator = rx * sy - ry * sx
        if denominator == 0.0:
            return None

        qx = s2.begin.x - s1.begin.x
        qy = s2.begin.y - s1.begin.y

        t = (qx * sy - qy * sx) / denominator
        u = (qx * ry - qy * rx) / denominator

        if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
            return Point(s1.begin.x + rx * t, s1.begin.y + ry * t)
        return None

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        """
        Calculate the squared distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Squared distance between points
        """
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def angle_to(origin: Point, target: Point) -> float:
        """Angle of the vector origin->target, as returned by atan2 (radians)."""
        return math.atan2(target.y - origin.y, target.x - origin.x)

    @staticmethod
    def rotate_vec(p1: Point, angle: float) -> Point:
        """
        Rotate the given point as if it were a vector by the given angle in radians.

        Args:
            p1: Point (as vector)
            angle: Rotation angle in radians

        Returns:
            Rotated vector
        """
        return Point(
            p1.x * math.cos(angle) - p1.y * math.sin(angle),
            p1.x * math.sin(angle) + p1.y * math.cos(angle)
        )

    @staticmethod
    def circular(r: float, theta: float) -> Point:
        """
        Polar offset measured clockwise from screen-up.

        theta = 0 points to (0, -r), theta = pi/2 points to (r, 0).
        """
        return Point(r * math.sin(theta), -r * math.cos(theta))

    @staticmethod
    def ray(origin: Point, angle: float, length: float) -> Line:
        """Segment from origin in direction `angle` (radians) with the given length."""
        direction = Geometry.rotate_vec(Point(1.0, 0.0), angle)
        return Line(origin, Point(origin.x + direction.x * length, origin.y + direction.y * length))


# Create a singleton instance for convenience
geometry = Geometry()
