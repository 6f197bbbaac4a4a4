"""Maximum flow with Dinic's algorithm."""

from __future__ import annotations

from collections import deque


class FlowNetwork:
    """A directed flow network over nodes ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of nodes must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._head: list[int] = []
        self._cap: list[int] = []
        self._flow: list[int] = []

    def _check(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"node {u} outside 0..{self.n - 1}")

    def add_edge(self, u: int, v: int, cap: int, flow: int = 0) -> None:
        """Add an edge ``u -> v`` with capacity ``cap`` and initial ``flow``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(len(self._head))
        self._head.append(v)
        self._cap.append(cap)
        self._flow.append(flow)
        self._adj[v].append(len(self._head))
        self._head.append(u)
        self._cap.append(0)
        self._flow.append(0)

    def _levels(self, source: int, sink: int) -> list[int] | None:
        level = [0] * self.n
        level[source] = 1
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                v = self._head[e]
                if not level[v] and self._cap[e] > self._flow[e]:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level if level[sink] else None

    def _augment(self, source: int, sink: int, level: list[int], pos: list[int]) -> int:
        path: list[int] = []
        u = source
        while True:
            if u == sink:
                amount = min(self._cap[e] - self._flow[e] for e in path)
                for e in path:
                    self._flow[e] += amount
                    self._flow[e ^ 1] -= amount
                return amount
            edges = self._adj[u]
            while pos[u] < len(edges):
                e = edges[pos[u]]
                v = self._head[e]
                if level[v] == level[u] + 1 and self._cap[e] > self._flow[e]:
                    path.append(e)
                    u = v
                    break
                pos[u] += 1
            else:
                if not path:
                    return 0
                e = path.pop()
                u = self._head[e ^ 1]
                pos[u] += 1

    def max_flow(self, source: int, sink: int) -> int:
        """Push as much flow as possible from ``source`` to ``sink``.

        Flow already in the network stays; the return value is the amount
        added by this call.
        """
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while (level := self._levels(source, sink)) is not None:
            pos = [0] * self.n
            while amount := self._augment(source, sink, level, pos):
                total += amount
        return total