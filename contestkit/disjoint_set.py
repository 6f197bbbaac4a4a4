"""Disjoint-set forest with union by rank, path compression and set sizes."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """Union-find over the elements ``0 .. n-1``."""

    def __init__(self, n: int = 0) -> None:
        self._parent: list[int] = []
        self._rank: list[int] = []
        self._member: list[int] = []
        self._count = 0
        self.resize(n)

    def resize(self, n: int) -> None:
        """Discard all unions and start over with ``n`` singleton sets."""
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._member = [1] * n
        self._count = n

    def clear(self) -> None:
        """Remove every element."""
        self.resize(0)

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        up = self.find(u)
        vp = self.find(v)
        if up == vp:
            return False
        self._count -= 1
        total = self._member[up] + self._member[vp]
        self._member[up] = self._member[vp] = total
        if self._rank[up] < self._rank[vp]:
            self._parent[up] = vp
        else:
            self._parent[vp] = up
            if self._rank[up] == self._rank[vp]:
                self._rank[up] += 1
        return True

    def members(self, u: int) -> int:
        """Return the size of the set holding ``u``."""
        return self._member[self.find(u)]

    def components(self) -> int:
        """Return the number of disjoint sets."""
        return self._count

    def __len__(self) -> int:
        return len(self._parent)


def count_acorns(dset: DisjointSet) -> int:
    """Count the elements that sit alone in their set."""
    return sum(1 for u in range(len(dset)) if dset.members(u) == 1)


def forest_summary(
    edges: Iterable[tuple[Hashable, Hashable]], nodes: Iterable[Hashable]
) -> tuple[int, int]:
    """Return ``(trees, acorns)`` for a forest given by labelled nodes and edges.

    An acorn is an isolated node; a tree is any component with two or more
    nodes.
    """
    index = {label: i for i, label in enumerate(nodes)}
    dset = DisjointSet(len(index))
    for a, b in edges:
        dset.union(index[a], index[b])
    acorns = count_acorns(dset)
    return dset.components() - acorns, acorns


def network_sizes(pairs: Iterable[tuple[Hashable, Hashable]]) -> list[int]:
    """After each friendship pair is joined, record the size of its network."""
    ids: dict[Hashable, int] = {}
    dset = DisjointSet()
    sizes: list[int] = []
    for a, b in pairs:
        for name in (a, b):
            if name not in ids:
                ids[name] = len(ids)
        if len(ids) > len(dset):
            grown = DisjointSet(len(ids))
            for u in range(len(dset)):
                grown.union(u, dset.find(u))
            dset = grown
        dset.union(ids[a], ids[b])
        sizes.append(dset.members(ids[a]))
    return sizes