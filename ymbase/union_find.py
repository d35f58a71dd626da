"""Disjoint-set forest over the integers 0 .. n-1."""

from __future__ import annotations


class UnionFindSet:
    """Union-find with union by rank and path halving."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, id_: int) -> None:
        if not 0 <= id_ < len(self._parent):
            raise IndexError(f"{id_}: id is out of range")

    def _root(self, x: int) -> int:
        parent = self._parent
        p = parent[x]
        while parent[p] != p:
            parent[x] = parent[p]
            x = parent[x]
            p = parent[x]
        return p

    def find(self, id_: int) -> int:
        """Return the representative of the set containing ``id_``."""
        self._check(id_)
        return self._root(id_)

    def merge(self, x_id: int, y_id: int) -> int:
        """Join the sets of ``x_id`` and ``y_id``; return the new representative."""
        self._check(x_id)
        self._check(y_id)
        x = self._root(x_id)
        y = self._root(y_id)
        if x == y:
            return x
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
            return x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
            self._parent[y] = x
            return x
        self._parent[x] = y
        return y