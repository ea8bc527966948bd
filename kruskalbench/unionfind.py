"""Disjoint-set forest with union by size and optional path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the integers ``0 .. n-1``.

    ``parent`` maps each element to its parent and ``rank`` holds the size of
    the tree rooted at each root.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range")

    def union(self, root_x: int, root_y: int) -> None:
        """Join the trees rooted at ``root_x`` and ``root_y``.

        The smaller tree is hung below the root of the larger; on a tie,
        ``root_y`` goes below ``root_x``.
        """
        self._check(root_x)
        self._check(root_y)
        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self.rank[root_x] += self.rank[root_y]

    def find(self, x: int) -> int:
        """Return the root of ``x``, pointing every node on the path at it."""
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def find_no_compression(self, x: int) -> int:
        """Return the root of ``x`` without changing the forest."""
        self._check(x)
        while self.parent[x] != x:
            x = self.parent[x]
        return x