"""Exact rational numbers over integers and a determinant built on them."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from math import gcd


class Fraction:
    """A reduced fraction with a positive denominator.

    A zero denominator given to the constructor makes the value zero.
    """

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            numerator, denominator = 0, 1
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(numerator, denominator)
        self.numerator = numerator // g
        self.denominator = denominator // g

    @staticmethod
    def _coerce(other: object) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int):
            return Fraction(other)
        return None

    def __add__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        lcm = self.denominator // gcd(self.denominator, o.denominator) * o.denominator
        return Fraction(
            lcm // self.denominator * self.numerator
            + lcm // o.denominator * o.numerator,
            lcm,
        )

    def __sub__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        lcm = self.denominator // gcd(self.denominator, o.denominator) * o.denominator
        return Fraction(
            lcm // self.denominator * self.numerator
            - lcm // o.denominator * o.numerator,
            lcm,
        )

    def __mul__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        p = gcd(self.numerator, o.denominator)
        q = gcd(o.numerator, self.denominator)
        return Fraction(
            (self.numerator // p) * (o.numerator // q),
            (self.denominator // q) * (o.denominator // p),
        )

    def __truediv__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o.numerator == 0:
            raise ZeroDivisionError("division by a zero fraction")
        p = gcd(self.numerator, o.numerator)
        q = gcd(self.denominator, o.denominator)
        return Fraction(
            (self.numerator // p) * (o.denominator // q),
            (self.denominator // q) * (o.numerator // p),
        )

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return (self.numerator, self.denominator) == (o.numerator, o.denominator)

    __hash__ = None  # type: ignore[assignment]


def determinant(matrix: Sequence[Sequence[int | Fraction]]) -> Fraction:
    """Return the determinant of a square matrix by Gaussian elimination."""
    rows = [[x if isinstance(x, Fraction) else Fraction(x) for x in row] for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    sign = 1
    result = Fraction(1)
    for i in range(n):
        pivot = next((j for j in range(n - 1, i, -1) if rows[j][i].numerator), i)
        if pivot != i:
            rows[i], rows[pivot] = rows[pivot], rows[i]
            sign = -sign
        if rows[i][i].numerator == 0:
            return Fraction(0)
        for j in range(i + 1, n):
            factor = rows[j][i] / rows[i][i]
            rows[j] = [a - b * factor for a, b in zip(rows[j], rows[i])]
        result = result * rows[i][i]
    return result * sign