"""Counting occurrences of many patterns in one text with Aho-Corasick."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class AhoCorasick:
    """An automaton over a fixed list of non-empty patterns."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)
        self._goto: list[dict[str, int]] = [{}]
        self._link: list[int] = [0]
        self._matched: list[list[int]] = [[]]
        for index, word in enumerate(self.words):
            if not word:
                raise ValueError("patterns must not be empty")
            node = 0
            for ch in word:
                nxt = self._goto[node].get(ch)
                if nxt is None:
                    nxt = len(self._goto)
                    self._goto.append({})
                    self._link.append(0)
                    self._matched.append([])
                    self._goto[node][ch] = nxt
                node = nxt
            self._matched[node].append(index)

        # Breadth-first order puts every node after its suffix link.
        order: list[int] = []
        queue = deque(self._goto[0].values())
        while queue:
            u = queue.popleft()
            order.append(u)
            for ch, v in self._goto[u].items():
                p = self._link[u]
                while p and ch not in self._goto[p]:
                    p = self._link[p]
                self._link[v] = self._goto[p].get(ch, 0)
                queue.append(v)
        self._order = order

    def count(self, text: str) -> list[int]:
        """Return, for each pattern in order, its overlapping occurrences in ``text``."""
        goto, link = self._goto, self._link
        freq = [0] * len(goto)
        cur = 0
        for ch in text:
            while cur and ch not in goto[cur]:
                cur = link[cur]
            cur = goto[cur].get(ch, 0)
            freq[cur] += 1
        for v in reversed(self._order):
            freq[link[v]] += freq[v]
        counts = [0] * len(self.words)
        for node, indices in enumerate(self._matched):
            for i in indices:
                counts[i] = freq[node]
        return counts