"""Disjoint-set forest over point indices."""
from __future__ import annotations

from typing import List


class DisjointSet:
    """Union-find arena with path halving and union by size."""

    def __init__(self, n: int) -> None:
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already joined."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._size[rx] < self._size[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
