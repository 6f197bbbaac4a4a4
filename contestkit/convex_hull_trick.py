"""Lower envelope of lines for minimum queries (convex hull trick)."""

from __future__ import annotations


class LineEnvelope:
    """The lines ``y = m*x + c`` that can give the minimum for some ``x``.

    Lines must be added in order of non-increasing slope. :meth:`query`
    expects its ``x`` values to be non-decreasing from call to call.
    :meth:`query_any` takes ``x`` in any order.
    """

    def __init__(self) -> None:
        self._m: list[int] = []
        self._c: list[int] = []
        self._pointer = 0

    def __len__(self) -> int:
        return len(self._m)

    def _bad(self, l1: int, l2: int, l3: int) -> bool:
        """True if line ``l2`` is never strictly better than ``l1`` or ``l3``."""
        m, c = self._m, self._c
        return (c[l3] - c[l1]) * (m[l1] - m[l2]) <= (c[l2] - c[l1]) * (m[l1] - m[l3])

    def _value(self, i: int, x: int) -> int:
        return self._m[i] * x + self._c[i]

    def add(self, m: int, c: int) -> None:
        """Add the line ``y = m*x + c``, dropping lines it makes useless."""
        self._m.append(m)
        self._c.append(c)
        while len(self._m) >= 3 and self._bad(-3, -2, -1):
            del self._m[-2]
            del self._c[-2]

    def _require_lines(self) -> None:
        if not self._m:
            raise ValueError("the envelope holds no lines")

    def query(self, x: int) -> int:
        """Return the minimum ``m*x + c`` for a non-decreasing series of ``x``."""
        self._require_lines()
        last = len(self._m)
        if self._pointer >= last:
            self._pointer = last - 1
        while (
            self._pointer < last - 1
            and self._value(self._pointer + 1, x) <= self._value(self._pointer, x)
        ):
            self._pointer += 1
        return self._value(self._pointer, x)

    def query_any(self, x: int) -> int:
        """Return the minimum ``m*x + c`` by binary search over the envelope."""
        self._require_lines()
        last = len(self._m)
        lo, hi = 0, last - 1
        while True:
            mid = (lo + hi) // 2
            here = self._value(mid, x)
            if mid + 1 < last and self._value(mid + 1, x) < here:
                lo = mid + 1
            elif mid - 1 >= 0 and self._value(mid - 1, x) < here:
                hi = mid - 1
            else:
                return here