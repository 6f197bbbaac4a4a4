import random

import pytest

from contestkit.int_geometry import (
    IntPoint,
    are_lines_parallel,
    are_lines_same,
    area,
    convex_hull,
    cross,
    dist_to_line,
    dist_to_line_segment,
    distance,
    dot,
    line_intersection,
    on_segment,
    point_in_polygon,
    point_on_polygon,
    segment_intersection,
    segments_intersect,
    signed_area,
)

P = IntPoint
SQUARE = [P(0, 0), P(5, 0), P(5, 5), P(0, 5)]


def test_point_arithmetic_and_order():
    assert P(1, 2) + P(3, 4) == P(4, 6)
    assert P(3, 4) - P(1, 2) == P(2, 2)
    assert sorted([P(5, 1), P(0, 2), P(2, 1)]) == [P(2, 1), P(5, 1), P(0, 2)]


def test_cross_and_dot_invariants():
    p, q = P(3, -7), P(2, 9)
    assert cross(p, q) == -cross(q, p)
    assert cross(p, p) == 0
    assert dot(p, q) == dot(q, p)
    assert distance(p, q) ** 2 == pytest.approx(dot(p - q, p - q))


def test_lines_same_and_parallel():
    assert are_lines_same(P(0, 0), P(1, 1), P(2, 2), P(3, 3))
    assert not are_lines_same(P(0, 0), P(1, 1), P(0, 1), P(1, 2))
    assert are_lines_parallel(P(0, 0), P(1, 1), P(0, 1), P(1, 2))
    assert not are_lines_parallel(P(0, 0), P(1, 1), P(0, 1), P(1, 0))


def test_line_intersection():
    assert line_intersection(P(0, 0), P(2, 2), P(0, 2), P(2, 0)) == (1.0, 1.0)
    with pytest.raises(ValueError):
        line_intersection(P(0, 0), P(1, 1), P(0, 1), P(1, 2))


def test_on_segment():
    assert on_segment(P(0, 0), P(2, 2), P(1, 1))
    assert not on_segment(P(0, 0), P(2, 2), P(3, 3))
    assert not on_segment(P(0, 0), P(2, 2), P(1, 0))


def test_segments_intersect():
    assert segments_intersect(P(0, 0), P(2, 2), P(0, 2), P(2, 0))
    assert segments_intersect(P(0, 0), P(2, 2), P(2, 2), P(3, 0))
    assert not segments_intersect(P(0, 0), P(1, 1), P(0, 1), P(1, 2))
    assert not segments_intersect(P(0, 0), P(1, 0), P(2, 0), P(3, 0))


def test_segment_intersection():
    assert segment_intersection(P(0, 0), P(2, 2), P(0, 2), P(2, 0)) == line_intersection(
        P(0, 0), P(2, 2), P(0, 2), P(2, 0)
    )
    assert segment_intersection(P(0, 0), P(1, 1), P(3, 0), P(4, -1)) is None
    with pytest.raises(ValueError):
        segment_intersection(P(0, 0), P(2, 0), P(1, 0), P(3, 0))


def test_dist_to_line():
    dist, foot = dist_to_line(P(0, 5), P(-1, 0), P(1, 0))
    assert dist == pytest.approx(5.0)
    assert foot == pytest.approx((0.0, 0.0))
    with pytest.raises(ValueError):
        dist_to_line(P(0, 5), P(1, 1), P(1, 1))


def test_dist_to_line_segment_clamps_to_endpoints():
    dist, foot = dist_to_line_segment(P(5, 0), P(0, 0), P(2, 0))
    assert foot == (2.0, 0.0)
    assert dist == pytest.approx(distance(P(5, 0), P(2, 0)))
    dist, foot = dist_to_line_segment(P(-4, 3), P(0, 0), P(2, 0))
    assert foot == (0.0, 0.0)
    assert dist == pytest.approx(distance(P(-4, 3), P(0, 0)))


def test_point_in_polygon():
    results = [point_in_polygon(SQUARE, q) for q in (P(2, 2), P(2, 0), P(0, 2), P(5, 2), P(2, 5))]
    assert results == [True, True, True, False, False]


def test_point_on_polygon():
    results = [point_on_polygon(SQUARE, q) for q in (P(2, 2), P(2, 0), P(0, 2), P(5, 2), P(2, 5))]
    assert results == [False, True, True, True, True]


def test_area():
    square = [P(0, 0), P(2, 0), P(2, 2), P(0, 2)]
    assert area(square) == 4.0
    assert signed_area(square[::-1]) == -signed_area(square)


def test_convex_hull_square_with_interior_point():
    pts = [P(2, 2), P(1, 1), P(0, 2), P(0, 0), P(2, 0)]
    assert convex_hull(pts) == [P(0, 0), P(2, 0), P(2, 2), P(0, 2)]


def test_convex_hull_small_inputs():
    assert convex_hull([]) == []
    assert convex_hull([P(3, 1), P(3, 1)]) == [P(3, 1)]
    assert convex_hull([P(4, 4), P(1, 1)]) == [P(1, 1), P(4, 4)]


def test_convex_hull_invariants():
    rng = random.Random(7)
    pts = [P(rng.randint(-30, 30), rng.randint(-30, 30)) for _ in range(80)]
    hull = convex_hull(pts)
    assert set(hull) <= set(pts)
    assert hull[0] == min(pts)
    assert signed_area(hull) > 0
    for i, p in enumerate(hull):
        q, r = hull[(i + 1) % len(hull)], hull[(i + 2) % len(hull)]
        assert cross(q - p, r - p) > 0
    for q in pts:
        assert point_in_polygon(hull, q) or point_on_polygon(hull, q)