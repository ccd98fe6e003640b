"""
===============================================================================
GEOMETRY AND SHAPE DECOMPOSITION TESTS
===============================================================================

1. GEOMETRY PRIMITIVES
   - Segment/segment intersection (crossing, touching, parallel, degenerate)
   - Rect stretching and half-open containment
   - Polar offsets and vector rotation

2. SHAPE DECOMPOSITION
   - Segment counts and closed loops for every obstacle kind
   - Stretched rectangle corners
   - Circle quality clamping
   - Star polygon vertices

Run with:
    python developer_tests/test_geometry.py

Or with pytest:
    pytest developer_tests/test_geometry.py -v
===============================================================================
"""

import sys
import math
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from shapely.geometry import Polygon as ShapelyPolygon

from light_map_shapely.core.geometry import (
    geometry, Point, Line, Rect, Triangle, Quad, Circle, Polygon,
)
from light_map_shapely.core.shapes import decompose_to_segments, create_star


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_point_close(actual, expected, tol=TOLERANCE, msg=""):
    assert_close(actual.x, expected.x, tol, f"{msg} (x)")
    assert_close(actual.y, expected.y, tol, f"{msg} (y)")


def assert_closed_loop(segments):
    n = len(segments)
    for i in range(n):
        assert_point_close(segments[i].end, segments[(i + 1) % n].begin,
                           msg=f"segment {i} end vs next begin")


# =============================================================================
# GEOMETRY PRIMITIVES
# =============================================================================

def test_segments_crossing():
    p = geometry.segments_intersection(
        Line(Point(0, 0), Point(10, 0)),
        Line(Point(5, -5), Point(5, 5)),
    )
    assert p is not None
    assert_point_close(p, Point(5, 0), msg="crossing point")


def test_segments_touching_at_endpoint():
    p = geometry.segments_intersection(
        Line(Point(0, 0), Point(10, 0)),
        Line(Point(10, -1), Point(10, 1)),
    )
    assert p is not None
    assert_point_close(p, Point(10, 0), msg="endpoint touch")


def test_segments_not_reaching():
    assert geometry.segments_intersection(
        Line(Point(0, 0), Point(1, 0)),
        Line(Point(5, -5), Point(5, 5)),
    ) is None
    assert geometry.segments_intersection(
        Line(Point(0, 0), Point(10, 0)),
        Line(Point(5, 1), Point(5, 5)),
    ) is None


def test_parallel_and_degenerate_segments():
    ray = Line(Point(0, 0), Point(10, 0))
    assert geometry.segments_intersection(ray, Line(Point(0, 1), Point(10, 1))) is None
    # Collinear overlap is treated as no intersection
    assert geometry.segments_intersection(ray, Line(Point(2, 0), Point(8, 0))) is None
    # Zero-length segment on the ray
    assert geometry.segments_intersection(ray, Line(Point(5, 0), Point(5, 0))) is None


def test_non_finite_segments_never_intersect():
    ray = Line(Point(0, 0), Point(10, 0))
    assert geometry.segments_intersection(ray, Line(Point(5, float('nan')), Point(5, 5))) is None
    assert geometry.segments_intersection(ray, Line(Point(5, -5), Point(float('inf'), 5))) is None


def test_rect_stretched():
    rect = Rect(10, 20, 30, 40)
    assert rect.stretched(0, 1, 1, 0) == Rect(10, 20, 31, 41)
    assert rect.stretched(-1) == Rect(11, 21, 28, 38)
    assert rect.stretched(2, 0, 0, 3) == Rect(7, 18, 33, 42)


def test_rect_contains_half_open():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains(Point(0, 0))
    assert rect.contains(Point(9.99, 5))
    assert not rect.contains(Point(10, 5))
    assert not rect.contains(Point(5, 10))
    assert not rect.contains(Point(-0.01, 5))


def test_rect_sides_clockwise():
    rect = Rect(0, 0, 4, 2)
    assert rect.top == Line(Point(0, 0), Point(4, 0))
    assert rect.right == Line(Point(4, 0), Point(4, 2))
    assert rect.bottom == Line(Point(4, 2), Point(0, 2))
    assert rect.left == Line(Point(0, 2), Point(0, 0))


def test_circular_offsets():
    assert_point_close(geometry.circular(1, 0), Point(0, -1), msg="theta=0")
    assert_point_close(geometry.circular(2, math.pi / 2), Point(2, 0), msg="theta=pi/2")
    assert_point_close(geometry.circular(1, math.pi), Point(0, 1), msg="theta=pi")


def test_ray_direction():
    ray = geometry.ray(Point(1, 1), math.pi / 2, 10)
    assert ray.begin == Point(1, 1)
    assert_point_close(ray.end, Point(1, 11), msg="ray end")
    assert_close(geometry.angle_to(Point(0, 0), Point(0, 5)), math.pi / 2)


def test_triangle_area():
    t = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    assert_close(t.area, 6.0)
    assert_close(t.to_shapely().area, 6.0)


# =============================================================================
# SHAPE DECOMPOSITION
# =============================================================================

def test_rect_decomposition_stretched_corners():
    segments = decompose_to_segments(Rect(0, 0, 10, 20))
    assert len(segments) == 4
    assert_closed_loop(segments)
    assert [s.begin for s in segments] == [
        Point(0, 0), Point(11, 0), Point(11, 21), Point(0, 21),
    ]


def test_triangle_decomposition():
    t = Triangle(Point(0, 0), Point(5, 0), Point(0, 5))
    segments = decompose_to_segments(t)
    assert segments == [
        Line(t.p0, t.p1), Line(t.p1, t.p2), Line(t.p2, t.p0),
    ]


def test_quad_decomposition():
    q = Quad(Point(0, 0), Point(5, 1), Point(6, 6), Point(-1, 5))
    segments = decompose_to_segments(q)
    assert len(segments) == 4
    assert_closed_loop(segments)
    assert [s.begin for s in segments] == list(q.points)


def test_circle_decomposition():
    c = Circle(Point(100, 50), 10)
    segments = decompose_to_segments(c, 12)
    assert len(segments) == 12
    assert_closed_loop(segments)
    assert_point_close(segments[0].begin, Point(100, 40), msg="first vertex above center")
    for s in segments:
        assert_close(geometry.distance(s.begin, c.center), 10.0, 1e-9, "vertex radius")


def test_circle_quality_clamped():
    c = Circle(Point(0, 0), 5)
    assert len(decompose_to_segments(c, 3)) == 6
    assert len(decompose_to_segments(c, 0)) == 6
    assert len(decompose_to_segments(c)) == 8


def test_polygon_decomposition():
    outer = (Point(0, 0), Point(4, 0), Point(5, 3), Point(2, 5), Point(-1, 3))
    segments = decompose_to_segments(Polygon(outer))
    assert len(segments) == 5
    assert_closed_loop(segments)
    assert segments[-1] == Line(outer[-1], outer[0])


def test_shapely_polygon_decomposition():
    square = ShapelyPolygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    segments = decompose_to_segments(square)
    assert len(segments) == 4
    assert_closed_loop(segments)
    assert segments[0].begin == Point(0, 0)


def test_line_decomposition_is_two_way():
    wall = Line(Point(1, 2), Point(3, 4))
    segments = decompose_to_segments(wall)
    assert segments == [wall, Line(wall.end, wall.begin)]


def test_unsupported_shape():
    try:
        decompose_to_segments((0, 0, 10, 10))
    except TypeError as e:
        assert 'tuple' in str(e)
    else:
        raise AssertionError("expected TypeError for a tuple")


def test_create_star():
    star = create_star(60, 0, Point(940, 180))
    assert len(star.outer) == 10
    assert_point_close(star.outer[0], Point(940, 120), msg="first tip")
    for k, p in enumerate(star.outer):
        expected = 60 if k % 2 == 0 else 60 * 0.38
        assert_close(geometry.distance(p, Point(940, 180)), expected, 1e-9, f"vertex {k} radius")
    assert star.to_shapely().is_valid


# =============================================================================
# MAIN
# =============================================================================

def run_all_tests():
    tests = [
        ("Segments crossing", test_segments_crossing),
        ("Segments touching at endpoint", test_segments_touching_at_endpoint),
        ("Segments not reaching", test_segments_not_reaching),
        ("Parallel and degenerate", test_parallel_and_degenerate_segments),
        ("Non-finite segments", test_non_finite_segments_never_intersect),
        ("Rect.stretched()", test_rect_stretched),
        ("Rect.contains()", test_rect_contains_half_open),
        ("Rect sides", test_rect_sides_clockwise),
        ("circular()", test_circular_offsets),
        ("ray()", test_ray_direction),
        ("Triangle area", test_triangle_area),
        ("Rect decomposition", test_rect_decomposition_stretched_corners),
        ("Triangle decomposition", test_triangle_decomposition),
        ("Quad decomposition", test_quad_decomposition),
        ("Circle decomposition", test_circle_decomposition),
        ("Circle quality clamp", test_circle_quality_clamped),
        ("Polygon decomposition", test_polygon_decomposition),
        ("Shapely Polygon decomposition", test_shapely_polygon_decomposition),
        ("Line decomposition", test_line_decomposition_is_two_way),
        ("Unsupported shape", test_unsupported_shape),
        ("create_star()", test_create_star),
    ]

    passed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)

    if errors:
        print("\nFailed tests:")
        for name, error in errors:
            print(f"  - {name}: {error}")
        return False

    print("\nAll tests passed!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
