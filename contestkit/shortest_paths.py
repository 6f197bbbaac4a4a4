"""Single- and multi-source shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative cycle is reachable from the source."""


def bellman_ford(
    n: int, edges: Sequence[tuple[int, int, float]], source: int
) -> list[float]:
    """Distances from ``source`` over directed weighted edges ``(a, b, w)``.

    Unreachable nodes get ``math.inf``. Raises :class:`NegativeCycleError`
    if a negative cycle is reachable from the source.
    """
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n):
        changed = False
        for a, b, w in edges:
            if dist[a] == math.inf:
                continue
            if dist[a] + w < dist[b]:
                dist[b] = dist[a] + w
                changed = True
        if not changed:
            break
    for a, b, w in edges:
        if dist[b] > dist[a] + w:
            raise NegativeCycleError("negative cycle reachable from source")
    return dist


def has_negative_cycle(
    n: int, edges: Sequence[tuple[int, int, float]], source: int
) -> bool:
    """Return True if a negative cycle is reachable from ``source``."""
    try:
        bellman_ford(n, edges, source)
    except NegativeCycleError:
        return True
    return False


def dijkstra(
    n: int,
    adjacency: Sequence[Iterable[tuple[int, float]]],
    sources: Iterable[int],
) -> list[float]:
    """Distances from the nearest of ``sources`` with non-negative weights.

    ``adjacency[u]`` lists ``(v, w)`` pairs. Unreachable nodes get ``math.inf``.
    """
    dist: list[float] = [math.inf] * n
    heap: list[tuple[float, int]] = []
    for s in sources:
        dist[s] = 0
        heap.append((0, s))
    heapq.heapify(heap)
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist