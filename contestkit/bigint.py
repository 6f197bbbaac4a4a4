"""Arbitrary-precision signed integers held as decimal digits.

Division truncates toward zero and the remainder takes the sign of the
dividend. Shifts work in powers of ten.
"""

from __future__ import annotations

import argparse
import sys
from itertools import zip_longest

_DIGITS = "0123456789"


def _strip(digits: list[int]) -> list[int]:
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _cmp_mag(a: list[int], b: list[int]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_mag(a: list[int], b: list[int]) -> list[int]:
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def _sub_mag(a: list[int], b: list[int]) -> list[int]:
    """Return ``a - b`` for magnitudes with ``a >= b``."""
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        digit = x - y - borrow
        borrow = 1 if digit < 0 else 0
        result.append(digit + 10 * borrow)
    return _strip(result)


def _mul_mag(a: list[int], b: list[int]) -> list[int]:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if not x:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, 10)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, 10)
            k += 1
    return _strip(result)


def _divmod_mag(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    quotient: list[int] = []
    rem = [0]
    for digit in reversed(a):
        rem = _strip([digit] + rem)
        count = 0
        while _cmp_mag(rem, b) >= 0:
            rem = _sub_mag(rem, b)
            count += 1
        quotient.append(count)
    return _strip(quotient[::-1] or [0]), rem


class BigInteger:
    """A signed integer of any size."""

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: BigInteger | int | str = 0) -> None:
        if isinstance(value, BigInteger):
            sign, digits = value._sign, list(value._digits)
        elif isinstance(value, int):
            sign = -1 if value < 0 else 1
            digits = [int(c) for c in reversed(str(abs(value)))]
        elif isinstance(value, str):
            sign, digits = self._parse(value)
        else:
            raise TypeError(f"cannot build a BigInteger from {type(value).__name__}")
        self._sign, self._digits = self._normal(sign, digits)

    @staticmethod
    def _parse(text: str) -> tuple[int, list[int]]:
        """Read an optional minus sign and the digits that follow it.

        Reading stops at the first character that is not a digit.
        """
        text = text.strip()
        sign = 1
        if text.startswith("-"):
            sign = -1
            text = text[1:]
        taken = []
        for ch in text:
            if ch not in _DIGITS:
                break
            taken.append(int(ch))
        return sign, taken[::-1]

    @staticmethod
    def _normal(sign: int, digits: list[int]) -> tuple[int, list[int]]:
        digits = _strip(digits or [0])
        if digits == [0]:
            sign = 1
        return sign, digits

    @classmethod
    def _make(cls, sign: int, digits: list[int]) -> BigInteger:
        obj = object.__new__(cls)
        obj._sign, obj._digits = cls._normal(sign, digits)
        return obj

    @staticmethod
    def _coerce(other: object) -> BigInteger | None:
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, (int, str)):
            return BigInteger(other)
        return None

    def _compare(self, other: BigInteger) -> int:
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        return self._sign * _cmp_mag(self._digits, other._digits)

    def __str__(self) -> str:
        body = "".join(str(d) for d in reversed(self._digits))
        return "-" + body if self._sign < 0 else body

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) == 0

    def __lt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) < 0

    def __le__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) <= 0

    def __gt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) > 0

    def __ge__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) >= 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __add__(self, other: object) -> BigInteger:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self._sign == o._sign:
            return self._make(self._sign, _add_mag(self._digits, o._digits))
        order = _cmp_mag(self._digits, o._digits)
        if order >= 0:
            return self._make(self._sign, _sub_mag(self._digits, o._digits))
        return self._make(o._sign, _sub_mag(o._digits, self._digits))

    def __sub__(self, other: object) -> BigInteger:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self + (-o)

    def __neg__(self) -> BigInteger:
        return self._make(-self._sign, list(self._digits))

    def __abs__(self) -> BigInteger:
        return self._make(1, list(self._digits))

    def __mul__(self, other: object) -> BigInteger:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self._sign * o._sign, _mul_mag(self._digits, o._digits))

    def divide_by(self, other: BigInteger | int | str) -> tuple[BigInteger, BigInteger]:
        """Return ``(quotient, remainder)`` with truncation toward zero."""
        o = self._coerce(other)
        if o is None:
            raise TypeError(f"cannot divide by {type(other).__name__}")
        if o.is_zero():
            raise ZeroDivisionError("BigInteger division by zero")
        quot, rem = _divmod_mag(self._digits, o._digits)
        return self._make(self._sign * o._sign, quot), self._make(self._sign, rem)

    def __floordiv__(self, other: object) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide_by(other)[0]

    def __mod__(self, other: object) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide_by(other)[1]

    def __lshift__(self, n: int) -> BigInteger:
        """Multiply by ``10 ** n``; a count below 1 leaves the value unchanged."""
        if n < 1:
            return BigInteger(self)
        return self._make(self._sign, [0] * n + self._digits)

    def __rshift__(self, n: int) -> BigInteger:
        """Drop the ``n`` lowest decimal digits, keeping the sign."""
        if n < 1:
            return BigInteger(self)
        return self._make(self._sign, self._digits[n:])

    def __pow__(self, exponent: int) -> BigInteger:
        if exponent < 0:
            raise ValueError("negative exponent")
        result = BigInteger(1)
        base = BigInteger(self)
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def __len__(self) -> int:
        return len(self._digits)

    def __getitem__(self, i: int) -> int:
        """Return the ``i``-th digit counting from the most significant."""
        return self._digits[::-1][i]

    def __int__(self) -> int:
        value = 0
        for d in reversed(self._digits):
            value = value * 10 + d
        return self._sign * value

    def is_zero(self) -> bool:
        """Return True for zero."""
        return self._digits == [0]

    def is_odd(self) -> bool:
        """Return True when the last digit is odd."""
        return bool(self._digits[0] & 1)


def evaluate(a: BigInteger, op: str, b: BigInteger) -> BigInteger | bool:
    """Apply the operator named by ``op`` to two big integers."""
    operations = {
        "+": lambda: a + b,
        "-": lambda: a - b,
        "*": lambda: a * b,
        "/": lambda: a // b,
        "%": lambda: a % b,
        "^": lambda: a ** int(b),
        "<": lambda: a < b,
        ">": lambda: a > b,
        "<=": lambda: a <= b,
        ">=": lambda: a >= b,
        "==": lambda: a == b,
        "<<": lambda: a << int(b),
        ">>": lambda: a >> int(b),
    }
    try:
        action = operations[op]
    except KeyError:
        raise ValueError(f"unrecognized operator {op!r}") from None
    return action()


def main(argv: list[str] | None = None) -> int:
    """Read ``big op big`` expressions from standard input and print results."""
    parser = argparse.ArgumentParser(
        description="Evaluate big-integer expressions read from standard input."
    )
    parser.parse_args(argv)
    print("Available operator: + - * / % ^(power) < > <= >= == << >>")
    print("Insert Simple Equation [(big1) (op) (big2)]: \n")
    tokens = sys.stdin.read().split()
    for start in range(0, len(tokens) - 2, 3):
        a = BigInteger(tokens[start])
        op = tokens[start + 1]
        b = BigInteger(tokens[start + 2])
        print(f">>> {a} {op} {b} = ", end="")
        try:
            result = evaluate(a, op, b)
        except ValueError as exc:
            if str(exc).startswith("unrecognized operator"):
                print("unrecognized operator")
            else:
                print(f"error: {exc}")
            continue
        except ZeroDivisionError as exc:
            print(f"error: {exc}")
            continue
        if isinstance(result, bool):
            print(int(result))
        else:
            print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())