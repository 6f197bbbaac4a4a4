"""Closest pair of points by a sweep over x with a y-ordered window."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence
from math import isqrt


def _sq_dist(a: Sequence[int], b: Sequence[int]) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def closest_pair(points: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Return the indices of two points at minimum distance.

    Coordinates must be integers. The first index belongs to the point met
    earlier when sweeping by increasing ``x`` (then ``y``).
    """
    pts = [(int(x), int(y)) for x, y in points]
    n = len(pts)
    if n < 2:
        raise ValueError("at least two points are required")
    order = sorted(range(n), key=lambda i: (pts[i][0], pts[i][1], i))

    ci, cj = order[0], order[1]
    best = _sq_dist(pts[ci], pts[cj])
    active = sorted((pts[i][1], pts[i][0], i) for i in (ci, cj))
    left = 0
    for right in range(2, n):
        r = order[right]
        rx, ry = pts[r]
        while left < right and (pts[order[left]][0] - rx) ** 2 >= best:
            gone = order[left]
            key = (pts[gone][1], pts[gone][0], gone)
            pos = bisect_left(active, key)
            if pos < len(active) and active[pos] == key:
                del active[pos]
            left += 1
        reach = isqrt(best) + 1
        lo = bisect_left(active, (ry - reach,))
        hi = bisect_left(active, (ry + reach + 1,))
        for y, x, i in active[lo:hi]:
            d = (x - rx) ** 2 + (y - ry) ** 2
            if d < best:
                best = d
                ci, cj = i, r
        insort(active, (ry, rx, r))
    return ci, cj