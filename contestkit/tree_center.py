"""Tree diameters and the best single edge to move to shrink a tree's diameter."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def build_tree(n: int, edges: Sequence[tuple[int, int]]) -> list[list[int]]:
    """Return the adjacency lists of an undirected graph on ``0 .. n-1``."""
    tree: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) has a node outside 0..{n - 1}")
        tree[u].append(v)
        tree[v].append(u)
    return tree


def farthest_path(
    tree: Sequence[Sequence[int]], root: int, excluded: int
) -> tuple[list[int], int]:
    """Return the path from the node farthest from ``root`` back to ``root``.

    The search never enters ``excluded``. Among equally far nodes the first
    one reached breadth-first wins. The farthest node is returned as well.
    """
    n = len(tree)
    dist = [-1] * n
    parent = [-1] * n
    dist[root] = 0
    farthest, farthest_dist = root, 0
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in tree[u]:
            if v != excluded and dist[v] == -1:
                dist[v] = dist[u] + 1
                parent[v] = u
                queue.append(v)
                if dist[v] > farthest_dist:
                    farthest_dist = dist[v]
                    farthest = v
    path = []
    v = farthest
    while v != -1:
        path.append(v)
        v = parent[v]
    return path, farthest


def tree_diameter(
    tree: Sequence[Sequence[int]], root: int, excluded: int
) -> list[int]:
    """Return the nodes of a longest path in the part of the tree holding ``root``."""
    _, end = farthest_path(tree, root, excluded)
    path, _ = farthest_path(tree, end, excluded)
    return path


def best_relink(
    n: int, edges: Sequence[tuple[int, int]]
) -> tuple[int, tuple[int, int], tuple[int, int]]:
    """Find the edge whose removal and relinking gives the smallest diameter.

    Returns ``(diameter, removed_edge, added_edge)``. The added edge joins
    the centres of the two parts. The first edge reaching the minimum wins.
    """
    if n < 2 or len(edges) != n - 1:
        raise ValueError("a tree with at least two nodes and n-1 edges is required")
    tree = build_tree(n, edges)
    best: tuple[int, tuple[int, int], tuple[int, int]] | None = None
    for u, v in edges:
        side1 = tree_diameter(tree, u, v)
        side2 = tree_diameter(tree, v, u)
        d1, d2 = len(side1), len(side2)
        longest = max(max(d1, d2) - 1, d1 // 2 + d2 // 2 + 1)
        if best is None or longest < best[0]:
            best = (longest, (u, v), (side1[d1 // 2], side2[d2 // 2]))
    assert best is not None
    return best