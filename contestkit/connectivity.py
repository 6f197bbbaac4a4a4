"""Bridges, articulation points and biconnected components of undirected graphs.

Nodes are numbered ``0 .. n-1`` and edges are given as ``(u, v)`` pairs.
During the depth-first search the edge back to a node's parent vertex is
ignored, so parallel copies of a tree edge do not count as a cycle.
"""

from __future__ import annotations

from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) has a node outside 0..{n - 1}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the bridges as ``(smaller, larger)`` pairs in sorted order."""
    adj = _adjacency(n, edges)
    disc = [0] * n
    low = [0] * n
    timer = 1
    found: list[tuple[int, int]] = []
    for start in range(n):
        if disc[start]:
            continue
        disc[start] = low[start] = timer
        timer += 1
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, par, neighbours = stack[-1]
            for v in neighbours:
                if v == par:
                    continue
                if not disc[v]:
                    disc[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(adj[v])))
                    break
                if disc[u] > disc[v]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if disc[p] < low[u]:
                        found.append((min(p, u), max(p, u)))
    return sorted(found)


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the cut vertices in ascending order."""
    adj = _adjacency(n, edges)
    disc = [0] * n
    low = [0] * n
    timer = 1
    points: set[int] = set()
    for root in range(n):
        if disc[root]:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            u, par, neighbours = stack[-1]
            for v in neighbours:
                if v == par:
                    continue
                if not disc[v]:
                    if u == root:
                        root_children += 1
                    disc[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(adj[v])))
                    break
                if disc[u] > disc[v]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if p != root and disc[p] <= low[u]:
                        points.add(p)
        if root_children >= 2:
            points.add(root)
    return sorted(points)


def biconnected_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[list[tuple[int, int]]]:
    """Return the biconnected components, each as the list of its edges.

    A bridge forms a component of its own holding a single edge.
    """
    adj = _adjacency(n, edges)
    disc = [0] * n
    low = [0] * n
    timer = 1
    edge_stack: list[tuple[int, int]] = []
    components: list[list[tuple[int, int]]] = []
    for start in range(n):
        if disc[start]:
            continue
        disc[start] = low[start] = timer
        timer += 1
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, par, neighbours = stack[-1]
            for v in neighbours:
                if v == par:
                    continue
                if not disc[v]:
                    edge_stack.append((u, v))
                    disc[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(adj[v])))
                    break
                if disc[u] > disc[v]:
                    edge_stack.append((u, v))
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if disc[p] <= low[u]:
                        component: list[tuple[int, int]] = []
                        while edge_stack:
                            edge = edge_stack.pop()
                            component.append(edge)
                            if edge == (p, u):
                                break
                        components.append(component)
    return components