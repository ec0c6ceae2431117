"""Binary search over index-addressed data."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

__all__ = ["bsearch", "bsearch_list", "bsearch_permutation", "bsearch_range"]

Comparator = Callable[[Any, Any], int]


def bsearch(count: int, test: Callable[[int], int]) -> tuple[bool, int]:
    """Binary search over positions 0..count-1.

    ``test(i)`` compares the item at ``i`` with the wanted value. Returns
    ``(True, index)`` on a hit, otherwise ``(False, insertion_point)``.
    """
    low, high = 0, count
    while low < high:
        mid = low + ((high - low) >> 1)
        result = test(mid)
        if result < 0:
            low = mid + 1
        elif result > 0:
            high = mid
        else:
            return True, mid
    return False, low


def bsearch_list(data: Sequence[Any], compare: Comparator, value: Any) -> tuple[bool, int]:
    """Search sorted ``data`` for ``value`` using ``compare(item, value)``."""
    return bsearch(len(data), lambda i: compare(data[i], value))


def bsearch_permutation(
    data: Sequence[Any], compare: Comparator, value: Any, permutation: Sequence[int]
) -> Optional[int]:
    """Search ``data`` viewed through a sorting permutation.

    Returns the index into ``data`` of a matching item, or None.
    """
    found, index = bsearch(len(permutation), lambda i: compare(data[permutation[i]], value))
    return permutation[index] if found else None


def bsearch_range(data: Sequence[Any], compare: Comparator, value: Any) -> Optional[tuple[int, int]]:
    """Return ``(base, count)`` of the run of items equal to ``value``, or None."""
    found, probe = bsearch_list(data, compare, value)
    if not found:
        return None
    base, count = probe, 1
    while base > 0 and compare(data[base - 1], value) == 0:
        base -= 1
        count += 1
    while base + count < len(data) and compare(data[base + count], value) == 0:
        count += 1
    return base, count