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
from typing import List, Tuple

from .constants import (
    COLLIDE_EPSILON,
    DEFAULT_CIRCLE_QUALITY,
    DEFAULT_ROOM_SIZE,
    ROOM_SAFETY_MARGIN,
)
from .geometry import geometry, Point, Line, Rect, Triangle
from .shapes import decompose_to_segments


CollidePoints = List[Tuple[Point, Point]]


class LightMap:
    """
    Occluding segments of a room and the visibility queries over them.

    The room boundary is registered at construction; obstacles are added at
    setup time with add_object(). Queries (calculate_collide_points,
    calculate_light_triangles) are pure functions of the registered segments
    and the light position. The registry only grows and must not be mutated
    while a query is running.

    Attributes:
        verbose (int): Verbosity level
            0 = silent
            1 = per-query summary and registration info
            2 = per-ray detail
        epsilon (float): Angular perturbation of the two rays cast per angle
        max_distance_formula (str): How the maximum ray length is derived
            from the room size. Options:
            - 'legacy': 2 * sqrt(w*w + h + h), the historical formula
            - 'diagonal': 2 * sqrt(w*w + h*h)
    """

    VALID_MAX_DISTANCE_FORMULAS = ('legacy', 'diagonal')

    def __init__(self, room: Rect = Rect(0, 0, *DEFAULT_ROOM_SIZE), verbose: int = 0) -> None:
        self._room: Rect = room
        self._segments: List[Line] = []
        self._epsilon: float = COLLIDE_EPSILON
        self._max_distance_formula: str = 'legacy'
        self.verbose = verbose
        self.add_object(room)

    @property
    def verbose(self) -> int:
        return self._verbose

    @verbose.setter
    def verbose(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"verbose must be a non-negative integer, got {value}")
        self._verbose = value

    @property
    def epsilon(self) -> float:
        """Get the angular perturbation in radians."""
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value <= 0):
            raise ValueError(f"epsilon must be a positive finite number, got {value}")
        self._epsilon = float(value)

    @property
    def max_distance_formula(self) -> str:
        return self._max_distance_formula

    @max_distance_formula.setter
    def max_distance_formula(self, value: str) -> None:
        if value not in self.VALID_MAX_DISTANCE_FORMULAS:
            raise ValueError(
                f"Invalid max_distance_formula '{value}'. "
                f"Valid options: {self.VALID_MAX_DISTANCE_FORMULAS}"
            )
        self._max_distance_formula = value

    @property
    def segments(self) -> Tuple[Line, ...]:
        """All registered segments in insertion order."""
        return tuple(self._segments)

    @property
    def max_distance(self) -> float:
        """
        Length of every cast ray.

        The 'legacy' formula is linear in the room height. It is kept as the
        default so that hit resolution matches previously produced light maps.
        """
        w = self._room.w
        h = self._room.h
        if self._max_distance_formula == 'diagonal':
            return 2.0 * math.sqrt(w * w + h * h)
        return 2.0 * math.sqrt(w * w + h + h)

    def add_object(self, shape, quality: int = DEFAULT_CIRCLE_QUALITY) -> int:
        """
        Register an obstacle.

        Args:
            shape: Triangle, Rect, Quad, Circle, Polygon, Shapely Polygon or Line.
            quality: Tessellation quality for circles (clamped to at least 6).

        Returns:
            int: Number of segments appended.

        Raises:
            TypeError: If the shape type is not supported.
        """
        new_segments = decompose_to_segments(shape, quality)
        self._segments.extend(new_segments)
        if self.verbose >= 1:
            print(f"LightMap: added {type(shape).__name__} "
                  f"({len(new_segments)} segments, {len(self._segments)} total)")
        return len(new_segments)

    def add_room(self, rect: Rect) -> int:
        """Register an additional room boundary. get_room() is unaffected."""
        return self.add_object(rect)

    def get_room(self) -> Rect:
        """The room as supplied at construction, before stretching."""
        return self._room

    def calculate_collide_points(self, light_pos: Point) -> CollidePoints:
        """
        Compute the nearest hits around the light, one pair per sampled angle.

        One angle is sampled per registered segment (towards its begin point),
        sorted ascending without deduplication. For each angle two rays are
        cast at angle - epsilon and angle + epsilon; each resolves to the
        closest segment hit, or to its own far end when nothing is hit.

        Args:
            light_pos: Position of the light.

        Returns:
            List of (left_hit, right_hit) pairs in ascending angle order, or
            an empty list when the light is not strictly inside the room
            (ROOM_SAFETY_MARGIN from every wall).
        """
        if not (light_pos.is_finite()
                and self._room.stretched(-ROOM_SAFETY_MARGIN).contains(light_pos)):
            if self.verbose >= 1:
                print(f"LightMap: light ({light_pos.x}, {light_pos.y}) outside room, no collide points")
            return []

        angles = [
            geometry.angle_to(light_pos, line.begin)
            for line in self._segments
            if line.begin.is_finite()
        ]
        angles.sort()

        max_distance = self.max_distance
        collide_points: CollidePoints = []

        for angle in angles:
            left_ray = geometry.ray(light_pos, angle - self._epsilon, max_distance)
            right_ray = geometry.ray(light_pos, angle + self._epsilon, max_distance)
            left_hit = self._nearest_hit(left_ray)
            right_hit = self._nearest_hit(right_ray)

            if self.verbose >= 2:
                print(f"  angle={angle:.6f} left=({left_hit.x:.4f}, {left_hit.y:.4f}) "
                      f"right=({right_hit.x:.4f}, {right_hit.y:.4f})")

            collide_points.append((left_hit, right_hit))

        if self.verbose >= 1:
            print(f"LightMap: {len(angles)} angles, {len(collide_points)} collide point pairs")

        return collide_points

    def _nearest_hit(self, ray: Line) -> Point:
        """Closest intersection along the ray; earlier segments win ties."""
        nearest = ray.end
        nearest_distance_squared = geometry.distance_squared(ray.begin, nearest)

        for line in self._segments:
            p = geometry.segments_intersection(ray, line)
            if p is None:
                continue
            distance_squared = geometry.distance_squared(ray.begin, p)
            if distance_squared < nearest_distance_squared:
                nearest = p
                nearest_distance_squared = distance_squared

        return nearest

    def calculate_light_triangles(self, light_pos: Point) -> List[Triangle]:
        """
        Build the visibility fan anchored at the light.

        Triangle i spans from the right hit of pair i to the left hit of pair
        i + 1, wrapping around so that the last triangle closes the fan.

        Returns:
            List of Triangle with p0 == light_pos; empty when there are no
            collide points.
        """
        collide_points = self.calculate_collide_points(light_pos)
        n = len(collide_points)

        return [
            Triangle(light_pos, collide_points[i][1], collide_points[(i + 1) % n][0])
            for i in range(n)
        ]

    def __repr__(self) -> str:
        return f"LightMap(room={self._room}, segments={len(self._segments)})"
