"""Hash combiners for integer sequences and pairs, using 64-bit arithmetic."""

from __future__ import annotations

import operator
from collections.abc import Iterable

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9


def _int_hash(value: int) -> int:
    return operator.index(value) & _MASK


def hash_sequence(values: Iterable[int]) -> int:
    """Combine the hashes of integers in order into one 64-bit value."""
    seed = 0
    for value in values:
        seed ^= (_int_hash(value) + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK
    return seed


def hash_pair(pair: tuple[int, int]) -> int:
    """Hash a pair of integers by XOR of their element hashes."""
    first, second = pair
    return _int_hash(first) ^ _int_hash(second)