"""Floating-point routines for plane geometry.

Comparisons against zero use the tolerance :data:`EPS`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

EPS = 1e-9
INF = 1e100


def _sign(x: float) -> int:
    if abs(x) < EPS:
        return 0
    return 1 if x > 0 else -1


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, c: float) -> Point:
        return Point(self.x * c, self.y * c)

    def __truediv__(self, c: float) -> Point:
        return Point(self.x / c, self.y / c)


def dot(p: Point, q: Point) -> float:
    """Dot product."""
    return p.x * q.x + p.y * q.y


def dist2(p: Point, q: Point) -> float:
    """Squared distance."""
    return dot(p - q, p - q)


def distance(p: Point, q: Point) -> float:
    """Euclidean distance."""
    return math.sqrt(dist2(p, q))


def cross(p: Point, q: Point) -> float:
    """Z component of the cross product."""
    return p.x * q.y - p.y * q.x


def rotate_ccw90(p: Point) -> Point:
    """Rotate a quarter turn counterclockwise about the origin."""
    return Point(-p.y, p.x)


def rotate_cw90(p: Point) -> Point:
    """Rotate a quarter turn clockwise about the origin."""
    return Point(p.y, -p.x)


def rotate_ccw(p: Point, t: float) -> Point:
    """Rotate by ``t`` radians counterclockwise about the origin."""
    return Point(
        p.x * math.cos(t) - p.y * math.sin(t), p.x * math.sin(t) + p.y * math.cos(t)
    )


def rotate_cw(p: Point, t: float) -> Point:
    """Rotate by ``t`` radians clockwise about the origin."""
    return Point(
        p.x * math.cos(t) + p.y * math.sin(t), -p.x * math.sin(t) + p.y * math.cos(t)
    )


def point_along_line(a: Point, b: Point, d: float) -> Point:
    """Return the point at distance ``d`` from ``a`` in the direction of ``b``."""
    return a + ((b - a) / math.sqrt(dot(b - a, b - a))) * d


def project_point_line(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the line through ``a`` and ``b`` (``a != b``)."""
    return a + (b - a) * dot(c - a, b - a) / dot(b - a, b - a)


def project_point_segment(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the segment from ``a`` to ``b``."""
    r = dot(b - a, b - a)
    if abs(r) < EPS:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def distance_point_segment(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the segment from ``a`` to ``b``."""
    return math.sqrt(dist2(c, project_point_segment(a, b, c)))


def dist_to_line(p: Point, a: Point, b: Point) -> tuple[float, Point]:
    """Return the distance from ``p`` to line ``ab`` and the nearest point."""
    scale = dot(p - a, b - a) / dot(b - a, b - a)
    c = Point(a.x + scale * (b.x - a.x), a.y + scale * (b.y - a.y))
    return distance(p, c), c


def dist_to_line_segment(p: Point, a: Point, b: Point) -> tuple[float, Point]:
    """Return the distance from ``p`` to segment ``ab`` and the nearest point."""
    if dot(b - a, p - a) < EPS:
        return distance(p, a), a
    if dot(a - b, p - b) < EPS:
        return distance(p, b), b
    return dist_to_line(p, a, b)


def is_point_on_segment(p: Point, a: Point, b: Point) -> bool:
    """Return True if ``p`` lies on the segment from ``a`` to ``b``."""
    if abs(cross(p - b, a - b)) >= EPS:
        return False
    if p.x < min(a.x, b.x) or p.x > max(a.x, b.x):
        return False
    if p.y < min(a.y, b.y) or p.y > max(a.y, b.y):
        return False
    return True


def distance_point_plane(
    x: float, y: float, z: float, a: float, b: float, c: float, d: float
) -> float:
    """Distance from ``(x, y, z)`` to the plane ``ax + by + cz = d``."""
    return abs(a * x + b * y + c * z - d) / math.sqrt(a * a + b * b + c * c)


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if lines ``ab`` and ``cd`` are parallel or collinear."""
    return abs(cross(b - a, c - d)) < EPS


def lines_collinear(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if lines ``ab`` and ``cd`` lie on one line."""
    return (
        lines_parallel(a, b, c, d)
        and abs(cross(a - b, a - c)) < EPS
        and abs(cross(c - d, c - a)) < EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segment ``ab`` meets segment ``cd``."""
    if lines_collinear(a, b, c, d):
        if (
            dist2(a, c) < EPS
            or dist2(a, d) < EPS
            or dist2(b, c) < EPS
            or dist2(b, d) < EPS
        ):
            return True
        if dot(c - a, c - b) > 0 and dot(d - a, d - b) > 0 and dot(c - b, d - b) > 0:
            return False
        return True
    if cross(d - a, b - a) * cross(c - a, b - a) > 0:
        return False
    if cross(a - c, d - c) * cross(b - c, d - c) > 0:
        return False
    return True


def are_lines_same(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ``ab`` and line ``cd`` are the same line."""
    return abs(cross(a - c, c - d)) < EPS and abs(cross(b - c, c - d)) < EPS


def are_lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ``ab`` is parallel to line ``cd``."""
    return abs(cross(a - b, c - d)) < EPS


def compute_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point:
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
        raise ValueError("lines are parallel")
    return Point((b1 * c2 - b2 * c1) / det, (c1 * a2 - c2 * a1) / det)


def compute_circle_center(a: Point, b: Point, c: Point) -> Point:
    """Centre of the circle through three points."""
    b = (a + b) / 2
    c = (a + c) / 2
    return compute_line_intersection(
        b, b + rotate_cw90(a - b), c, c + rotate_cw90(a - c)
    )


def point_in_polygon(polygon: Sequence[Point], q: Point) -> bool:
    """Crossing-number test; boundary points may go either way."""
    inside = False
    for pj, pi in zip([*polygon[-1:], *polygon[:-1]], polygon):
        if (pi.y > q.y) != (pj.y > q.y) and q.x < pi.x + (pj.x - pi.x) * (
            q.y - pi.y
        ) / (pj.y - pi.y):
            inside = not inside
    return inside


def point_on_polygon(polygon: Sequence[Point], q: Point) -> bool:
    """True if ``q`` lies on the boundary of the polygon."""
    return any(
        is_point_on_segment(q, pj, pi)
        for pj, pi in zip([*polygon[-1:], *polygon[:-1]], polygon)
    )


def circle_line_intersection(a: Point, b: Point, c: Point, r: float) -> list[Point]:
    """Points where the line through ``a`` and ``b`` meets circle ``(c, r)``."""
    b = b - a
    a = a - c
    qa = dot(b, b)
    qb = dot(a, b)
    qc = dot(a, a) - r * r
    disc = qb * qb - qa * qc
    if disc < -EPS:
        return []
    result = [c + a + b * (-qb + math.sqrt(max(disc + EPS, 0.0))) / qa]
    if disc > EPS:
        result.append(c + a + b * (-qb - math.sqrt(disc)) / qa)
    return result


def circle_circle_intersection(
    a: Point, b: Point, r: float, big_r: float
) -> list[Point]:
    """Points where circle ``(a, r)`` meets circle ``(b, big_r)``.

    Concentric circles give an empty list.
    """
    d = math.sqrt(dist2(a, b))
    if d > r + big_r or d + min(r, big_r) < max(r, big_r) or d == 0:
        return []
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(r * r - x * x, 0.0))
    v = (b - a) / d
    result = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        result.append(a + v * x - rotate_ccw90(v) * y)
    return result


def _edges(polygon: Sequence[Point]):
    return zip(polygon, [*polygon[1:], *polygon[:1]])


def signed_area(polygon: Sequence[Point]) -> float:
    """Signed area; positive for counterclockwise order."""
    return sum(p.x * q.y - q.x * p.y for p, q in _edges(polygon)) / 2.0


def area(polygon: Sequence[Point]) -> float:
    """Unsigned area."""
    return abs(signed_area(polygon))


def centroid(polygon: Sequence[Point]) -> Point:
    """Centre of mass of a polygon with non-zero area."""
    scale = 6.0 * signed_area(polygon)
    if scale == 0:
        raise ValueError("polygon has zero area")
    c = Point(0.0, 0.0)
    for p, q in _edges(polygon):
        c = c + (p + q) * (p.x * q.y - q.x * p.y)
    return c / scale


def is_simple(polygon: Sequence[Point]) -> bool:
    """True if no two non-adjacent edges of the polygon meet."""
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        for k in range(i + 1, n):
            l = (k + 1) % n
            if i == l or j == k:
                continue
            if segments_intersect(polygon[i], polygon[j], polygon[k], polygon[l]):
                return False
    return True


def parallel_line(a: Point, b: Point, d: float) -> tuple[Point, Point]:
    """Line parallel to ``ab`` at distance ``d`` on its counterclockwise side."""
    return (
        point_along_line(a, rotate_ccw90(b - a) + a, d),
        point_along_line(b, rotate_cw90(a - b) + b, d),
    )


def perpendicular_line(a: Point, b: Point, c: Point) -> tuple[Point, Point]:
    """Rotate line ``ab`` a quarter turn counterclockwise about ``c``."""
    return rotate_ccw90(a - c) + c, rotate_ccw90(b - c) + c


def half_plane_intersection(
    polygon: Sequence[Point], line: tuple[Point, Point]
) -> list[Point]:
    """Cut a convex polygon, keeping the part left of the directed line."""
    start, end = line
    result: list[Point] = []
    for p, q in _edges(polygon):
        c1 = cross(end - start, p - start)
        c2 = cross(end - start, q - start)
        if _sign(c1) >= 0:
            result.append(p)
        if _sign(c1 * c2) < 0 and not are_lines_parallel(p, q, start, end):
            result.append(compute_line_intersection(p, q, start, end))
    return result


def angle(o: Point, a: Point, b: Point) -> float:
    """Angle ``a-o-b`` in radians."""
    oa = distance(o, a)
    ob = distance(o, b)
    ab = distance(a, b)
    cos_value = (oa * oa + ob * ob - ab * ab) / (2.0 * oa * ob)
    return math.acos(max(-1.0, min(1.0, cos_value)))