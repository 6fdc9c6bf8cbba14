"""
Tests for vectormath.polygon.convex_hull
========================================
"""

import math

import pytest

from vectormath.core.vector import Vector
from vectormath.errors import ShapeMismatchError
from vectormath.polygon.convex_hull import convex_hull


@pytest.fixture
def triangle():
    return [Vector(-1, -1), Vector(0, 1), Vector(1, -1)]


def _signed_area(points):
    n = len(points)
    return 0.5 * sum(points[i][0] * points[(i + 1) % n][1] - points[(i + 1) % n][0] * points[i][1]
                     for i in range(n))


def _contains_same_object(pool, item):
    return any(p is item for p in pool)


def test_triangle_is_kept(triangle):
    assert len(convex_hull(triangle)) == 3


def test_random_triangles_are_kept(rng):
    for _ in range(100):
        data = [Vector.from_sequence(rng.random(2)) for _ in range(3)]
        assert len(convex_hull(data)) == 3


def test_fewer_than_three_points_echoed():
    for data in ([], [Vector(1, 2)], [Vector(2, -1), Vector(1, 4)]):
        assert convex_hull(data) is data


def test_inner_point_removed(triangle):
    hull = convex_hull(triangle + [Vector(0.01, 0)])
    assert len(hull) == 3
    for p in hull:
        assert _contains_same_object(triangle, p)


def test_outer_point_kept(triangle):
    assert len(convex_hull(triangle + [Vector(1, 1)])) == 4


def test_hull_is_counter_clockwise(triangle):
    hull = convex_hull(triangle + [Vector(1, 1)])
    assert hull == [[-1, -1], [1, -1], [1, 1], [0, 1]]
    assert _signed_area(hull) > 0


def test_points_on_circle_all_kept():
    data = [Vector(math.cos(i / 101 * 2 * math.pi), math.sin(i / 101 * 2 * math.pi))
            for i in range(100)]
    assert len(convex_hull(data)) == 100


def test_points_on_circle_with_inner_noise(rng):
    data = []
    for i in range(100):
        data.append(Vector(math.cos(i / 101 * 2 * math.pi), math.sin(i / 101 * 2 * math.pi)))
        angle = rng.random() * 2 * math.pi
        distance = rng.random() * 0.5
        data.append(Vector(distance * math.cos(angle), distance * math.sin(angle)))
    assert len(convex_hull(data)) == 100


def test_bounding_rectangle(triangle, rng):
    data = triangle + [Vector(-1, 2), Vector(1, 2)]
    for _ in range(100):
        data.append(Vector(rng.random() * 0.99, rng.random() * 1.99))
    assert len(convex_hull(data)) == 4


def test_collinear_boundary_points_removed():
    square_with_midpoints = [
        Vector(0, 0), Vector(1, 0), Vector(2, 0), Vector(2, 1),
        Vector(2, 2), Vector(1, 2), Vector(0, 2), Vector(0, 1),
    ]
    hull = convex_hull(square_with_midpoints)
    assert hull == [[0, 0], [2, 0], [2, 2], [0, 2]]


def test_input_order_untouched(triangle):
    data = [triangle[2], triangle[0], triangle[1]]
    before = list(data)
    convex_hull(data)
    assert all(a is b for a, b in zip(data, before))


def test_requires_2d_points():
    with pytest.raises(ShapeMismatchError):
        convex_hull([Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0)])


def test_rejects_3d_points_with_repeats():
    p = Vector(1, 1, 1)
    with pytest.raises(ShapeMismatchError, match="Vectors must be 2-dimensional"):
        convex_hull([p, p, p])


def test_rejects_1d_points():
    with pytest.raises(ShapeMismatchError, match="Vectors must be 2-dimensional"):
        convex_hull([Vector(0), Vector(1), Vector(2)])


def test_coincident_points_collapse():
    p = Vector(1, 1)
    hull = convex_hull([p, Vector(1, 1), p])
    assert hull == [[1, 1]]
    assert hull[0] is p


def test_two_distinct_positions():
    a, b = Vector(2, 0), Vector(0, 0)
    hull = convex_hull([a, b, Vector(2, 0), Vector(0, 0)])
    assert [h.tolist() for h in hull] == [[0, 0], [2, 0]]


def test_duplicates_do_not_survive_in_hull(triangle):
    hull = convex_hull(list(triangle) + [triangle[0].copy(), triangle[1].copy()])
    assert len(hull) == 3
