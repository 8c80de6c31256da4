"""Disjoint-set (union-find) over integer cell identifiers.

Union by rank is combined with path compression so that every operation runs
in amortized near-constant time. Roots are the entries whose parent is
themselves; ``rank`` is only meaningful for roots.
"""

from __future__ import annotations

from typing import List


class UnionFind:
    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"union-find size must be >= 0, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.count = n  # number of disjoint sets

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, p: int) -> None:
        # list indexing would silently accept negative values
        if not isinstance(p, int) or isinstance(p, bool) or not 0 <= p < len(self.parent):
            raise IndexError(f"cell {p!r} out of range [0, {len(self.parent)})")

    def find(self, p: int) -> int:
        """Return the root of ``p`` and point every node on the way at it."""
        self._check(p)
        root = p
        while self.parent[root] != root:
            root = self.parent[root]
        while p != root:
            nxt = self.parent[p]
            self.parent[p] = root
            p = nxt
        return root

    def union(self, p: int, q: int) -> bool:
        """Merge the sets of ``p`` and ``q``.

        Returns False when they were already in the same set.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        if self.rank[root_q] > self.rank[root_p]:
            self.parent[root_p] = root_q
        else:
            # tie: q's tree goes under p's root, which gets one level deeper
            if self.rank[root_p] == self.rank[root_q]:
                self.rank[root_p] += 1
            self.parent[root_q] = root_p
        self.count -= 1
        return True

    def is_connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def parent_of(self, p: int) -> int:
        self._check(p)
        return self.parent[p]

    def rank_of(self, p: int) -> int:
        self._check(p)
        return self.rank[p]
