"""Two-dimensional Fenwick trees for prefix maxima in any of four directions."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence


class MaxFenwick2D:
    """Maximum over updated points dominated by a query point.

    Coordinates run from 1 to ``size``. With ``rows_ascending`` a query at
    row ``r`` covers updates at rows ``<= r``, otherwise rows ``>= r``; the
    same holds for columns. An empty region gives ``-math.inf``.
    """

    def __init__(
        self, size: int, rows_ascending: bool = True, cols_ascending: bool = True
    ) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self.rows_ascending = rows_ascending
        self.cols_ascending = cols_ascending
        self._tree = [[-math.inf] * (size + 1) for _ in range(size + 1)]

    def _indices(self, i: int, ascending: bool) -> Iterator[int]:
        if ascending:
            while i <= self.size:
                yield i
                i += i & -i
        else:
            while i > 0:
                yield i
                i -= i & -i

    def _check(self, r: int, c: int) -> None:
        if not (1 <= r <= self.size and 1 <= c <= self.size):
            raise IndexError(f"({r}, {c}) outside 1..{self.size}")

    def update(self, r: int, c: int, value: float) -> None:
        """Record ``value`` at ``(r, c)``, keeping the larger of old and new."""
        self._check(r, c)
        cols = list(self._indices(c, self.cols_ascending))
        for x in self._indices(r, self.rows_ascending):
            row = self._tree[x]
            for y in cols:
                if value > row[y]:
                    row[y] = value

    def reset(self, r: int, c: int) -> None:
        """Clear every cell an update at ``(r, c)`` touched.

        Cells are shared between points, so this is meant for clearing all
        updated points together.
        """
        self._check(r, c)
        cols = list(self._indices(c, self.cols_ascending))
        for x in self._indices(r, self.rows_ascending):
            row = self._tree[x]
            for y in cols:
                row[y] = -math.inf

    def query(self, r: int, c: int) -> float:
        """Return the largest value recorded in the region dominated by ``(r, c)``."""
        self._check(r, c)
        cols = list(self._indices(c, not self.cols_ascending))
        best = -math.inf
        for x in self._indices(r, not self.rows_ascending):
            row = self._tree[x]
            for y in cols:
                if row[y] > best:
                    best = row[y]
        return best


_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def min_key_distance(grid: Sequence[Sequence[int]], keys: int) -> float:
    """Shortest Manhattan walk from the top-left cell through keys ``1 .. keys``.

    The walk visits a cell holding 1, then one holding 2, and so on, and ends
    at the first cell (in row-major order) holding ``keys``. Returns -1 if no
    cell holds ``keys`` and ``math.inf`` if some earlier key is missing.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    if keys < 1:
        raise ValueError("keys must be at least 1")

    cells: dict[int, list[tuple[int, int]]] = {}
    for i, row in enumerate(rows, 1):
        for j, value in enumerate(row, 1):
            cells.setdefault(value, []).append((i, j))
    if keys not in cells:
        return -1

    size = max(len(rows), width)
    trees = [MaxFenwick2D(size, sx > 0, sy > 0) for sx, sy in _DIRECTIONS]
    prev = {(x, y): x + y - 2 for x, y in cells.get(1, [])}
    for key in range(2, keys + 1):
        for (x, y), dist in prev.items():
            for tree, (sx, sy) in zip(trees, _DIRECTIONS):
                tree.update(x, y, sx * x + sy * y - dist)
        current = {}
        for x, y in cells.get(key, []):
            current[(x, y)] = min(
                sx * x + sy * y - tree.query(x, y)
                for tree, (sx, sy) in zip(trees, _DIRECTIONS)
            )
        for x, y in prev:
            for tree in trees:
                tree.reset(x, y)
        prev = current
    return prev[cells[keys][0]]