"""Index-based quicksort, stable sorting and in-place reordering."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Callable, MutableSequence, Optional, Sequence

from .avltree import compare_default

__all__ = [
    "SortCallback",
    "SortStabilizer",
    "sort",
    "sort_stable",
    "sort_list",
    "sort_list_stable",
    "sort_get_permutation",
    "sort_stable_get_permutation",
    "reorder_with",
    "reorder",
    "reorder_partial",
]

Comparator = Callable[[Any, Any], int]

_rng = random.Random()


class SortCallback(ABC):
    """Something that can be sorted by comparing and swapping positions."""

    @abstractmethod
    def compare(self, index1: int, index2: int) -> int:
        """Three-way comparison of the items at two positions."""

    @abstractmethod
    def swap(self, index1: int, index2: int) -> None:
        """Exchange the items at two positions."""

    def swap_check(self, index1: int, index2: int) -> None:
        """Swap the two positions if they are out of order."""
        if self.compare(index1, index2) > 0:
            self.swap(index1, index2)


class SortStabilizer(SortCallback):
    """Wraps a callback so that equal items keep their original order."""

    def __init__(self, chain: SortCallback, count: int) -> None:
        self._chain = chain
        self._order = list(range(count))

    def compare(self, index1: int, index2: int) -> int:
        result = self._chain.compare(index1, index2)
        if result == 0:
            delta = self._order[index1] - self._order[index2]
            result = (delta > 0) - (delta < 0)
        return result

    def swap(self, index1: int, index2: int) -> None:
        self._chain.swap(index1, index2)
        order = self._order
        order[index1], order[index2] = order[index2], order[index1]


class _ListCallback(SortCallback):
    def __init__(self, data: MutableSequence[Any], compare: Comparator) -> None:
        self._data = data
        self._compare = compare

    def compare(self, index1: int, index2: int) -> int:
        return self._compare(self._data[index1], self._data[index2])

    def swap(self, index1: int, index2: int) -> None:
        data = self._data
        data[index1], data[index2] = data[index2], data[index1]


class _PermutationCallback(SortCallback):
    def __init__(self, data: Sequence[Any], compare: Comparator, permutation: list[int]) -> None:
        self._data = data
        self._compare = compare
        self._permutation = permutation

    def compare(self, index1: int, index2: int) -> int:
        perm = self._permutation
        return self._compare(self._data[perm[index1]], self._data[perm[index2]])

    def swap(self, index1: int, index2: int) -> None:
        perm = self._permutation
        perm[index1], perm[index2] = perm[index2], perm[index1]


def _squaresort(callback: SortCallback, base: int, count: int) -> None:
    for walk in range(base + 1, base + count):
        for prev in range(base, walk):
            callback.swap_check(prev, walk)


def _pivot(callback: SortCallback, base: int, count: int) -> int:
    val1 = _rng.randrange(count)
    val2 = _rng.randrange(count - 1)
    val3 = _rng.randrange(count - 2)
    if val2 >= val1:
        val2 += 1
    if val3 >= val1:
        val3 += 1
    if val3 >= val2:
        val3 += 1
    val1 += base
    val2 += base
    val3 += base
    if callback.compare(val1, val2) > 0:
        val1, val2 = val2, val1
    if callback.compare(val1, val3) > 0:
        val1, val3 = val3, val1
    if callback.compare(val2, val3) > 0:
        val2, val3 = val3, val2
    return val2


def _partition(callback: SortCallback, base: int, count: int) -> int:
    pivot = _pivot(callback, base, count)
    target = base + count - 1
    if pivot != target:
        callback.swap(pivot, target)
        pivot = target

    partition = base
    alternate = False
    for walk in range(base, pivot):
        comp = callback.compare(walk, pivot)
        if comp == 0:
            trigger = alternate
            alternate = not alternate
        else:
            trigger = comp < 0
        if trigger:
            if partition != walk:
                callback.swap(partition, walk)
            partition += 1

    if pivot != partition:
        callback.swap(pivot, partition)
    return partition


def _newsort(callback: SortCallback, base: int, count: int) -> None:
    while count > 4:
        pivot = _partition(callback, base, count)
        left = (base, pivot - base)
        right = (pivot + 1, base + count - pivot - 1)
        small, large = (left, right) if left[1] <= right[1] else (right, left)
        _newsort(callback, *small)
        base, count = large
    _squaresort(callback, base, count)


def sort(callback: SortCallback, count: int) -> None:
    """Sort positions 0..count-1 of ``callback`` (not stable)."""
    _newsort(callback, 0, count)


def sort_stable(callback: SortCallback, count: int) -> None:
    """Sort positions 0..count-1 of ``callback``, keeping equal items in order."""
    sort(SortStabilizer(callback, count), count)


def sort_list(data: MutableSequence[Any], compare: Optional[Comparator] = None) -> None:
    """Sort a mutable sequence in place with a three-way comparator."""
    sort(_ListCallback(data, compare or compare_default), len(data))


def sort_list_stable(data: MutableSequence[Any], compare: Optional[Comparator] = None) -> None:
    """Stable in-place sort of a mutable sequence with a three-way comparator."""
    sort_stable(_ListCallback(data, compare or compare_default), len(data))


def sort_get_permutation(data: Sequence[Any], compare: Optional[Comparator] = None) -> list[int]:
    """Return indices that list ``data`` in sorted order, leaving ``data`` alone."""
    permutation = list(range(len(data)))
    sort(_PermutationCallback(data, compare or compare_default, permutation), len(data))
    return permutation


def sort_stable_get_permutation(data: Sequence[Any], compare: Optional[Comparator] = None) -> list[int]:
    """Like :func:`sort_get_permutation` but stable."""
    permutation = list(range(len(data)))
    sort_stable(_PermutationCallback(data, compare or compare_default, permutation), len(data))
    return permutation


def reorder_with(swap: Callable[[int, int], None], order: Sequence[int]) -> None:
    """Apply a permutation through a swap function.

    Afterwards position ``i`` holds what was at position ``order[i]``.
    """
    count = len(order)
    if sorted(order) != list(range(count)):
        raise ValueError("order is not a permutation")
    done = bytearray(count)
    for n, nxt in enumerate(order):
        if nxt != n and not done[n]:
            prev = n
            while True:
                swap(prev, nxt)
                done[nxt] = 1
                prev = nxt
                nxt = order[nxt]
                if nxt == n:
                    break


def reorder(data: MutableSequence[Any], order: Sequence[int]) -> None:
    """Permute ``data`` in place so that ``data[i]`` becomes the old ``data[order[i]]``."""

    def _swap(a: int, b: int) -> None:
        data[a], data[b] = data[b], data[a]

    reorder_with(_swap, order)


def reorder_partial(data: MutableSequence[Any], base: int, order: Sequence[int]) -> None:
    """Permute the slice of ``data`` starting at ``base`` in place."""

    def _swap(a: int, b: int) -> None:
        data[a + base], data[b + base] = data[b + base], data[a + base]

    reorder_with(_swap, order)