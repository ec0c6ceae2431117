"""Array helpers: lexicographic comparison, resizing, insertion and a 2-D grid."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, MutableSequence, Optional, Sequence

from .avltree import compare_default

__all__ = [
    "compare_arrays",
    "array_equals",
    "set_size_fill",
    "insert_multi",
    "Array2D",
]

Comparator = Callable[[Any, Any], int]


def compare_arrays(a: Sequence[Any], b: Sequence[Any], compare: Optional[Comparator] = None) -> int:
    """Lexicographic three-way comparison; a shorter prefix sorts first."""
    cmp = compare if compare is not None else compare_default
    for left, right in zip(a, b):
        state = cmp(left, right)
        if state != 0:
            return state
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


def array_equals(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True if both sequences have the same length and equal items."""
    if len(a) != len(b):
        return False
    return all(left == right for left, right in zip(a, b))


def set_size_fill(items: List[Any], size: int, filler: Any) -> None:
    """Resize ``items`` in place; new positions receive ``filler``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    current = len(items)
    if size < current:
        del items[size:]
    else:
        items.extend([filler] * (size - current))


def insert_multi(items: MutableSequence[Any], value: Any, base: int, count: int) -> None:
    """Insert ``count`` copies of ``value`` at ``base`` (clamped to the end)."""
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    if base < 0:
        raise ValueError(f"base must not be negative: {base}")
    base = min(base, len(items))
    items[base:base] = [value] * count


class Array2D:
    """A dense two-dimensional grid stored row by row."""

    def __init__(self, dim1: int = 0, dim2: int = 0, fill: Any = None) -> None:
        self._default = fill
        self._content: List[Any] = []
        self._d1 = 0
        self._d2 = 0
        self.set_size(dim1, dim2)

    @property
    def dim1(self) -> int:
        """Number of rows."""
        return self._d1

    @property
    def dim2(self) -> int:
        """Number of columns."""
        return self._d2

    def set_size(self, dim1: int, dim2: int) -> None:
        """Change the dimensions; the flat storage keeps its prefix."""
        if dim1 < 0 or dim2 < 0:
            raise ValueError(f"dimensions must not be negative: {dim1}x{dim2}")
        set_size_fill(self._content, dim1 * dim2, self._default)
        self._d1 = dim1
        self._d2 = dim2

    def _check_row(self, i1: int) -> None:
        if not 0 <= i1 < self._d1:
            raise IndexError(f"row index out of range: {i1}")

    def _offset(self, i1: int, i2: int) -> int:
        self._check_row(i1)
        if not 0 <= i2 < self._d2:
            raise IndexError(f"column index out of range: {i2}")
        return i1 * self._d2 + i2

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, tuple):
            i1, i2 = index
            return self._content[self._offset(i1, i2)]
        return self.row(index)

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, tuple):
            i1, i2 = index
            self._content[self._offset(i1, i2)] = value
            return
        self._check_row(index)
        row = list(value)
        if len(row) != self._d2:
            raise ValueError(f"row needs {self._d2} items, got {len(row)}")
        start = index * self._d2
        self._content[start : start + self._d2] = row

    def fill(self, value: Any) -> None:
        """Set every cell to ``value``."""
        self._content = [value] * len(self._content)

    def row(self, i1: int) -> List[Any]:
        """A copy of row ``i1``."""
        self._check_row(i1)
        start = i1 * self._d2
        return self._content[start : start + self._d2]

    def __iter__(self) -> Iterator[List[Any]]:
        for i1 in range(self._d1):
            yield self.row(i1)

    def __repr__(self) -> str:
        return f"Array2D({self._d1}x{self._d2})"