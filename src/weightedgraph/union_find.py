"""Union-Find data structure over arbitrary hashable elements."""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

import numpy as np

T = TypeVar("T", bound=Hashable)


class ArrayDisjointSet(Generic[T]):
    """Disjoint sets stored as a dense ``int64`` array of parent pointers.

    Each registered element owns one slot. A negative slot value marks a root
    and encodes ``-(rank + 1)``; a non-negative value is the parent slot.
    """

    INIT_CAPACITY = 10

    def __init__(self) -> None:
        self._pointers = np.empty(self.INIT_CAPACITY, dtype=np.int64)
        self._slots: dict[T, int] = {}
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: object) -> bool:
        return item in self._slots

    def make_set(self, item: T) -> None:
        if item is None:
            raise ValueError("cannot register None in a disjoint set")
        if item in self._slots:
            raise ValueError(f"{item!r} is already registered")
        if self._size >= self._pointers.shape[0]:
            grown = np.empty(2 * self._pointers.shape[0], dtype=np.int64)
            grown[: self._size] = self._pointers[: self._size]
            self._pointers = grown
        self._slots[item] = self._size
        self._pointers[self._size] = -1
        self._size += 1

    def _slot(self, item: T) -> int:
        try:
            return self._slots[item]
        except KeyError:
            raise ValueError(f"{item!r} was never registered") from None

    def _root(self, slot: int) -> int:
        pointers = self._pointers
        root = slot
        while pointers[root] >= 0:
            root = int(pointers[root])
        # Compression: repoint the whole chain, last hop included.
        while slot != root:
            parent = int(pointers[slot])
            pointers[slot] = root
            slot = parent
        return root

    def find_set(self, item: T) -> int:
        return self._root(self._slot(item))

    def union(self, item1: T, item2: T) -> bool:
        root1 = self._root(self._slot(item1))
        root2 = self._root(self._slot(item2))
        if root1 == root2:
            return False
        pointers = self._pointers
        # More negative means higher rank.
        if pointers[root1] < pointers[root2]:
            pointers[root2] = root1
        elif pointers[root1] > pointers[root2]:
            pointers[root1] = root2
        else:
            pointers[root1] = root2
            pointers[root2] -= 1
        return True

    def connected(self, item1: T, item2: T) -> bool:
        return self.find_set(item1) == self.find_set(item2)

    def count_sets(self) -> int:
        return int(np.count_nonzero(self._pointers[: self._size] < 0))

    def rank(self, item: T) -> int:
        """Rank of the root of ``item``'s component."""
        root = self.find_set(item)
        return int(-self._pointers[root] - 1)


__all__ = ["ArrayDisjointSet"]
