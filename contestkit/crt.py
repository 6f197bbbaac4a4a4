"""Chinese remainder theorem for pairwise distinct prime moduli.

The solution is built in mixed-radix form: ``x = d0 + d1*p0 + d2*p0*p1 + ...``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def crt_init(primes: Sequence[int]) -> list[list[int]]:
    """Return the table ``r[i][j] = p_i ** (p_j - 2) mod p_j``.

    For ``i != j`` this is the inverse of ``p_i`` modulo the prime ``p_j``.
    """
    return [[pow(pi, pj - 2, pj) if pj > 2 else 1 for pj in primes] for pi in primes]


def crt_digits(
    residues: Sequence[int], primes: Sequence[int], table: Sequence[Sequence[int]]
) -> list[int]:
    """Return the mixed-radix digits of the solution."""
    if len(residues) != len(primes):
        raise ValueError("residues and primes must have the same length")
    digits: list[int] = []
    for i, (a, p) in enumerate(zip(residues, primes)):
        x = a
        for j, earlier in enumerate(digits):
            x = table[j][i] * (x - earlier) % p
        digits.append(x)
    return digits


def crt_value(digits: Sequence[int], primes: Sequence[int]) -> int:
    """Combine mixed-radix digits into the integer they stand for."""
    if len(digits) != len(primes):
        raise ValueError("digits and primes must have the same length")
    value = 0
    radix = 1
    for d, p in zip(digits, primes):
        value += d * radix
        radix *= p
    return value


def solve_crt(pairs: Iterable[tuple[int, int]]) -> int:
    """Solve ``x = a (mod p)`` for each ``(p, a)`` pair with distinct primes."""
    pairs = list(pairs)
    primes = [p for p, _ in pairs]
    residues = [a for _, a in pairs]
    table = crt_init(primes)
    return crt_value(crt_digits(residues, primes, table), primes)