"""Exact plane geometry on integer coordinates, including a convex hull.

Predicates are computed with integer arithmetic; only distances and
intersection points are returned as floats.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key


@dataclass(frozen=True)
class IntPoint:
    """A point or vector with integer coordinates.

    Points order by ``y`` first and then by ``x``.
    """

    x: int
    y: int

    def __add__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IntPoint) -> IntPoint:
        return IntPoint(self.x - other.x, self.y - other.y)

    def __lt__(self, other: IntPoint) -> bool:
        return (self.y, self.x) < (other.y, other.x)


def dot(p: IntPoint, q: IntPoint) -> int:
    """Dot product."""
    return p.x * q.x + p.y * q.y


def cross(p: IntPoint, q: IntPoint) -> int:
    """Z component of the cross product."""
    return p.x * q.y - p.y * q.x


def distance(p: IntPoint, q: IntPoint) -> float:
    """Euclidean distance."""
    return math.sqrt(dot(p - q, p - q))


def are_lines_same(a: IntPoint, b: IntPoint, c: IntPoint, d: IntPoint) -> bool:
    """True if line ``ab`` and line ``cd`` are the same line."""
    return cross(a - c, c - d) == 0 and cross(b - c, c - d) == 0


def are_lines_parallel(a: IntPoint, b: IntPoint, c: IntPoint, d: IntPoint) -> bool:
    """True if line ``ab`` is parallel to line ``cd``."""
    return cross(a - b, c - d) == 0


def line_intersection(
    a: IntPoint, b: IntPoint, c: IntPoint, d: IntPoint
) -> tuple[float, float]:
    """Intersection of line ``ab`` with line ``cd``.

    Raises ValueError when the lines do not cross in a single point.
    """
    a1 = a.y - b.y
    b1 = b.x - a.x
    c1 = cross(a, b)
    a2 = c.y - d.y
    b2 = d.x - c.x
    c2 = cross(c, d)
    det = a1 * b2 - a2 * b1
    if det == 0:
        raise ValueError("lines do not meet in a single point")
    return (b1 * c2 - b2 * c1) / det, (c1 * a2 - c2 * a1) / det


def on_segment(a: IntPoint, b: IntPoint, c: IntPoint) -> bool:
    """True if ``c`` lies on the segment from ``a`` to ``b``."""
    return (
        cross(a - c, b - c) == 0
        and min(a.x, b.x) <= c.x <= max(a.x, b.x)
        and min(a.y, b.y) <= c.y <= max(a.y, b.y)
    )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def segments_intersect(p1: IntPoint, p2: IntPoint, p3: IntPoint, p4: IntPoint) -> bool:
    """True if segment ``p1p2`` meets segment ``p3p4``."""
    d1 = cross(p4 - p3, p1 - p3)
    d2 = cross(p4 - p3, p2 - p3)
    d3 = cross(p2 - p1, p3 - p1)
    d4 = cross(p2 - p1, p4 - p1)
    if _sign(d1) * _sign(d2) < 0 and _sign(d3) * _sign(d4) < 0:
        return True
    return (
        (d1 == 0 and on_segment(p3, p4, p1))
        or (d2 == 0 and on_segment(p3, p4, p2))
        or (d3 == 0 and on_segment(p1, p2, p3))
        or (d4 == 0 and on_segment(p1, p2, p4))
    )


def dist_to_line(
    p: IntPoint, a: IntPoint, b: IntPoint
) -> tuple[float, tuple[float, float]]:
    """Return the distance from ``p`` to line ``ab`` and the nearest point."""
    length2 = dot(b - a, b - a)
    if length2 == 0:
        raise ValueError("the two points of the line must differ")
    scale = dot(p - a, b - a) / length2
    cx = a.x + scale * (b.x - a.x)
    cy = a.y + scale * (b.y - a.y)
    return math.hypot(p.x - cx, p.y - cy), (cx, cy)


def dist_to_line_segment(
    p: IntPoint, a: IntPoint, b: IntPoint
) -> tuple[float, tuple[float, float]]:
    """Return the distance from ``p`` to segment ``ab`` and the nearest point."""
    if dot(b - a, p - a) <= 0:
        return distance(p, a), (float(a.x), float(a.y))
    if dot(a - b, p - b) <= 0:
        return distance(p, b), (float(b.x), float(b.y))
    return dist_to_line(p, a, b)


def segment_intersection(
    a: IntPoint, b: IntPoint, c: IntPoint, d: IntPoint
) -> tuple[float, float] | None:
    """Crossing point of segments ``ab`` and ``cd``, or None if they miss.

    Raises ValueError for overlapping collinear segments, which share more
    than one point.
    """
    if not segments_intersect(a, b, c, d):
        return None
    return line_intersection(a, b, c, d)


def _pairs(polygon: Sequence[IntPoint]):
    """Yield ``(p[j], p[i])`` with ``j`` the index before ``i``, cyclically."""
    return zip([*polygon[-1:], *polygon[:-1]], polygon)


def point_in_polygon(polygon: Sequence[IntPoint], q: IntPoint) -> bool:
    """Crossing-number test in exact arithmetic; boundary points may go either way."""
    inside = False
    for pj, pi in _pairs(polygon):
        t = pj.y - pi.y
        sgn = _sign(t)
        t *= sgn
        if (pi.y > q.y) != (pj.y > q.y) and (q.x - pi.x) * t < (pj.x - pi.x) * (
            q.y - pi.y
        ) * sgn:
            inside = not inside
    return inside


def point_on_polygon(polygon: Sequence[IntPoint], q: IntPoint) -> bool:
    """True if ``q`` lies on the boundary of the polygon."""
    return any(on_segment(pj, pi, q) for pj, pi in _pairs(polygon))


def _angle_order(a: IntPoint, b: IntPoint) -> int:
    c = cross(a, b)
    if c:
        return -1 if c > 0 else 1
    d1, d2 = dot(a, a), dot(b, b)
    if d1 != d2:
        return -1 if d1 > d2 else 1
    return 0


def convex_hull(points: Iterable[IntPoint]) -> list[IntPoint]:
    """Return the convex hull counterclockwise, starting at the lowest point.

    Duplicate points are removed. With two or fewer distinct points those
    points are returned in sorted order.
    """
    poly = list(dict.fromkeys(sorted(points)))
    n = len(poly)
    if n == 0:
        return []
    origin = poly[0]
    if n <= 2:
        return poly
    shifted = [p - origin for p in poly]
    shifted[1:] = sorted(shifted[1:], key=cmp_to_key(_angle_order))

    stack = [shifted[0], shifted[1]]
    for i in range(2, n + 1):
        p3 = shifted[i % n]
        keep = i != n
        while True:
            p2, p1 = stack[-1], stack[-2]
            c = cross(p2 - p1, p3 - p1)
            if c < 0:
                if len(stack) > 2:
                    stack.pop()
                    continue
                break
            if c == 0:
                if dot(p3 - p1, p3 - p1) <= dot(p2 - p1, p2 - p1):
                    keep = False
                else:
                    stack.pop()
            break
        if keep:
            stack.append(p3)
    return [p + origin for p in stack]


def signed_area(polygon: Sequence[IntPoint]) -> float:
    """Signed area; positive for counterclockwise order."""
    edges = zip(polygon, [*polygon[1:], *polygon[:1]])
    return sum(p.x * q.y - q.x * p.y for p, q in edges) / 2.0


def area(polygon: Sequence[IntPoint]) -> float:
    """Unsigned area."""
    return abs(signed_area(polygon))