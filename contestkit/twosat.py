"""2-SAT solving through strongly connected components.

Variable ``i`` is represented by literal ``2*i`` (true) and ``2*i + 1``
(false); :func:`negate` maps a literal to its complement.
"""

from __future__ import annotations

from collections.abc import Sequence


def negate(literal: int) -> int:
    """Return the complementary literal."""
    return literal ^ 1


def strongly_connected_components(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Label each node with its component id using Tarjan's algorithm.

    Ids are handed out in the order components are completed, which is a
    reverse topological order of the condensation.
    """
    n = len(adjacency)
    index: list[int | None] = [None] * n
    low = [0] * n
    on_stack = [False] * n
    component = [-1] * n
    stack: list[int] = []
    counter = 0
    found = 0

    for start in range(n):
        if index[start] is not None:
            continue
        index[start] = low[start] = counter
        counter += 1
        stack.append(start)
        on_stack[start] = True
        work = [(start, iter(adjacency[start]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if index[v] is None:
                    index[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, iter(adjacency[v])))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
                if low[u] == index[u]:
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        component[w] = found
                        if w == u:
                            break
                    found += 1
    return component


class TwoSat:
    """An implication graph over ``n_vars`` boolean variables."""

    def __init__(self, n_vars: int) -> None:
        if n_vars < 0:
            raise ValueError("number of variables must be non-negative")
        self.n_vars = n_vars
        self._adjacency: list[list[int]] = [[] for _ in range(2 * n_vars)]

    def add_implication(self, a: int, b: int) -> None:
        """Add the implication ``a -> b`` between two literals."""
        size = len(self._adjacency)
        if not (0 <= a < size and 0 <= b < size):
            raise IndexError("literal out of range")
        self._adjacency[a].append(b)

    def solve(self) -> list[bool] | None:
        """Return a satisfying assignment, or None if there is none."""
        component = strongly_connected_components(self._adjacency)
        assignment = []
        for var in range(self.n_vars):
            pos, neg = component[2 * var], component[2 * var + 1]
            if pos == neg:
                return None
            assignment.append(pos < neg)
        return assignment