"""Maximum matchings in bipartite graphs and in general graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def bipartite_matching(
    n_left: int, adjacency: Sequence[Iterable[int]]
) -> dict[int, int]:
    """Return a maximum matching as a mapping from left node to right node.

    ``adjacency[u]`` lists the right-side nodes that left node ``u`` may be
    paired with. Augmenting paths are searched with Kuhn's algorithm.
    """
    adj = [list(adjacency[u]) for u in range(n_left)]
    owner: dict[int, int] = {}

    for root in range(n_left):
        seen = {root}
        stack = [(root, iter(adj[root]))]
        via: list[int] = []
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                holder = owner.get(v)
                if holder is None:
                    via.append(v)
                    for (left, _), right in zip(stack, via):
                        owner[right] = left
                    stack.clear()
                    break
                if holder not in seen:
                    seen.add(holder)
                    via.append(v)
                    stack.append((holder, iter(adj[holder])))
                    break
            else:
                stack.pop()
                if via:
                    via.pop()
    return {left: right for right, left in owner.items()}


def escape_failures(
    gophers: Sequence[tuple[float, float]],
    holes: Sequence[tuple[float, float]],
    time: float,
    speed: float,
) -> int:
    """Count the gophers that cannot reach a hole of their own in time.

    A gopher can use a hole whose distance divided by ``speed`` is at most
    ``time``; each hole shelters one gopher.
    """
    adjacency = [
        [
            j
            for j, (hx, hy) in enumerate(holes)
            if math.hypot(gx - hx, gy - hy) / speed <= time
        ]
        for gx, gy in gophers
    ]
    return len(gophers) - len(bipartite_matching(len(gophers), adjacency))


def general_matching(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return a maximum matching of an undirected graph using Edmonds' blossoms.

    The result lists each matched pair ``(u, v)`` with ``u < v``, ordered by ``u``.
    """
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) has a node outside 0..{n - 1}")
        graph[u].append(v)
        graph[v].append(u)

    match = [-1] * n
    parent = [-1] * n
    base = list(range(n))
    in_blossom = [False] * n

    def lca(a: int, b: int) -> int:
        marked = [False] * n
        while True:
            a = base[a]
            marked[a] = True
            if match[a] == -1:
                break
            a = parent[match[a]]
        while True:
            b = base[b]
            if marked[b]:
                return b
            b = parent[match[b]]

    def mark_path(v: int, b: int, child: int) -> None:
        while base[v] != b:
            in_blossom[base[v]] = in_blossom[base[match[v]]] = True
            parent[v] = child
            child = match[v]
            v = parent[match[v]]

    def find_path(root: int) -> int:
        used = [False] * n
        parent[:] = [-1] * n
        base[:] = range(n)
        used[root] = True
        queue = deque([root])
        while queue:
            v = queue.popleft()
            for to in graph[v]:
                if base[v] == base[to] or match[v] == to:
                    continue
                if to == root or (match[to] != -1 and parent[match[to]] != -1):
                    current = lca(v, to)
                    in_blossom[:] = [False] * n
                    mark_path(v, current, to)
                    mark_path(to, current, v)
                    for i in range(n):
                        if in_blossom[base[i]]:
                            base[i] = current
                            if not used[i]:
                                used[i] = True
                                queue.append(i)
                elif parent[to] == -1:
                    parent[to] = v
                    if match[to] == -1:
                        return to
                    nxt = match[to]
                    used[nxt] = True
                    queue.append(nxt)
        return -1

    for i in range(n):
        if match[i] != -1:
            continue
        v = find_path(i)
        while v != -1:
            pv = parent[v]
            ppv = match[pv]
            match[v] = pv
            match[pv] = v
            v = ppv

    return [(i, match[i]) for i in range(n) if match[i] > i]