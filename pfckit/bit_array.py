"""Read-only and writable bit-array interfaces with sparse implementations."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from .avltree import AvlTree

__all__ = [
    "BitArray",
    "BitArrayVar",
    "SparseBitArray",
    "FlatIndexBitArray",
    "PermutationBitArray",
]


class BitArray(ABC):
    """A set of boolean values addressed by index.

    The valid index range depends on the context and is given separately.
    """

    @abstractmethod
    def get(self, n: int) -> bool:
        """Value at index ``n``."""

    def find(self, val: bool, start: int, count: int) -> int:
        """First index holding ``val`` from ``start`` over ``count`` indices.

        A negative ``count`` searches backwards. Returns ``start + count``
        when nothing is found.
        """
        if count == 0:
            return start
        step = -1 if count < 0 else 1
        todo = abs(count)
        ptr = start
        while todo > 0 and bool(self.get(ptr)) != bool(val):
            ptr += step
            todo -= 1
        return ptr

    def __getitem__(self, n: int) -> bool:
        return self.get(n)

    def calc_count(self, val: bool, start: int, count: int, count_max: Optional[int] = None) -> int:
        """Number of indices in [start, start+count) holding ``val``, up to ``count_max``."""
        found = 0
        end = start + count
        ptr = self.find(val, start, count)
        while (count_max is None or found < count_max) and ptr < end:
            found += 1
            ptr = self.find(val, ptr + 1, end - ptr - 1)
        return found

    def find_first(self, val: bool, start: int, end: int) -> int:
        """First index in [start, end) holding ``val``, or ``end``."""
        return self.find(val, start, end - start)

    def find_next(self, val: bool, previous: int, end: int) -> int:
        """First index after ``previous`` and before ``end`` holding ``val``, or ``end``."""
        return self.find(val, previous + 1, end - (previous + 1))

    def indices(self, count: int) -> Iterator[int]:
        """Yield every set index below ``count`` in increasing order."""
        index = self.find_first(True, 0, count)
        while index < count:
            yield index
            index = self.find_next(True, index, count)


class BitArrayVar(BitArray):
    """A bit array whose values can be changed."""

    @abstractmethod
    def set(self, n: int, val: bool) -> None:
        """Store ``val`` at index ``n``."""


class SparseBitArray(BitArrayVar):
    """Writable bit array that stores only the set indices in a balanced tree."""

    def __init__(self, source: Optional[BitArray] = None, count: int = 0) -> None:
        self._data = AvlTree()
        if source is not None:
            for index in source.indices(count):
                self.set(index, True)

    def get(self, n: int) -> bool:
        return n in self._data

    def find(self, val: bool, start: int, count: int) -> int:
        if not val:
            return super().find(False, start, count)
        if count > 0:
            found = self._data.find_nearest(start, inclusive=True, above=True)
            if found is None or found > start + count:
                return start + count
            return found
        if count < 0:
            found = self._data.find_nearest(start, inclusive=True, above=False)
            if found is None or found < start + count:
                return start + count
            return found
        return start

    def set(self, n: int, val: bool) -> None:
        if val:
            self._data.add(n)
        else:
            self._data.remove(n)


class FlatIndexBitArray(BitArray):
    """Bit array built from a list of set indices.

    Indices are appended with :meth:`add`; call :meth:`presort` once all have
    been added and before querying.
    """

    def __init__(self) -> None:
        self._content: list[int] = []

    def add(self, n: int) -> None:
        """Append a set index."""
        self._content.append(n)

    def presort(self) -> None:
        """Sort the stored indices so that lookups work."""
        self._content.sort()

    def _locate(self, n: int) -> tuple[bool, int]:
        idx = bisect.bisect_left(self._content, n)
        return idx < len(self._content) and self._content[idx] == n, idx

    def get(self, n: int) -> bool:
        return self._locate(n)[0]

    def _nearest_up(self, n: int) -> Optional[int]:
        found, idx = self._locate(n)
        if found:
            return idx
        return None if idx == len(self._content) else idx

    def _nearest_down(self, n: int) -> Optional[int]:
        found, idx = self._locate(n)
        if found:
            return idx
        return None if idx == 0 else idx - 1

    def find(self, val: bool, start: int, count: int) -> int:
        if not val:
            return super().find(False, start, count)
        if count == 0:
            return start
        if count < 0:
            idx = self._nearest_down(start)
            if idx is None or self._content[idx] < start + count:
                return start + count
            return self._content[idx]
        idx = self._nearest_up(start)
        if idx is None or self._content[idx] > start + count:
            return start + count
        return self._content[idx]


class PermutationBitArray(BitArray):
    """True at every index that a permutation moves."""

    def __init__(self, permutation: Sequence[int]) -> None:
        self._permutation = tuple(permutation)

    def get(self, n: int) -> bool:
        if 0 <= n < len(self._permutation):
            return self._permutation[n] != n
        return False