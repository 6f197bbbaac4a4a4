"""Convex hull that keeps only strict corners, and a test for convex position."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

Pair = tuple[int, int]


def _cross(a: Pair, b: Pair) -> int:
    return a[0] * b[1] - a[1] * b[0]


def _sub(a: Pair, b: Pair) -> Pair:
    return a[0] - b[0], a[1] - b[1]


def strict_convex_hull(points: Iterable[Pair]) -> list[Pair]:
    """Return the hull corners counterclockwise, dropping collinear points.

    The walk starts at the lowest point, the rightmost among equals.
    At least three points are required.
    """
    pts = [(int(x), int(y)) for x, y in points]
    n = len(pts)
    if n < 3:
        raise ValueError("at least three points are required")
    pts.sort(key=lambda p: (p[1], -p[0]))
    pivot = pts[0]

    def order(a: Pair, b: Pair) -> int:
        na, nb = _sub(a, pivot), _sub(b, pivot)
        c = _cross(na, nb)
        if c:
            return -1 if c > 0 else 1
        da = na[0] ** 2 + na[1] ** 2
        db = nb[0] ** 2 + nb[1] ** 2
        if da != db:
            return -1 if da > db else 1
        return 0

    pts[1:] = sorted(pts[1:], key=cmp_to_key(order))
    skip = [False] * n
    for i in range(2, n):
        if _cross(_sub(pts[i], pivot), _sub(pts[i - 1], pivot)) == 0:
            skip[i] = True

    stack = [pts[0], pts[1]]
    for i in range(2, n):
        if skip[i]:
            continue
        b = pts[i]
        keep = True
        while True:
            a, x = stack[-1], stack[-2]
            c = _cross(_sub(a, x), _sub(b, x))
            if c == 0:
                keep = False
                break
            if c > 0 or len(stack) <= 2:
                break
            stack.pop()
            if len(stack) <= 2:
                break
        if keep:
            stack.append(b)
    return stack


def all_on_hull(points: Iterable[Pair]) -> bool:
    """True if every point is a strict corner of the convex hull."""
    pts = list(points)
    return len(strict_convex_hull(pts)) == len(pts)