"""Permutation helpers, integer powers, scoped toggles and chunked memory."""

from __future__ import annotations

import contextlib
import math
from typing import Any, Iterator, MutableSequence, Sequence

__all__ = [
    "InvalidPermutationError",
    "permutation_is_valid",
    "permutation_validate",
    "permutation_find_reverse",
    "create_move_items_permutation",
    "order_find_reverse",
    "order_reverse",
    "pow_int",
    "exp_int",
    "rint32",
    "rint64",
    "output_debug_line",
    "toggled",
    "DestructNotify",
    "BigMem",
]

_MASK64 = 0xFFFFFFFFFFFFFFFF


class InvalidPermutationError(ValueError):
    """Raised when a sequence is not a permutation of 0..n-1."""


def permutation_is_valid(order: Sequence[int]) -> bool:
    """True if ``order`` holds each of 0..len(order)-1 exactly once."""
    count = len(order)
    seen = [False] * count
    for value in order:
        if not 0 <= value < count or seen[value]:
            return False
        seen[value] = True
    return True


def permutation_validate(order: Sequence[int]) -> None:
    """Raise :class:`InvalidPermutationError` unless ``order`` is a permutation."""
    if not permutation_is_valid(order):
        raise InvalidPermutationError("invalid permutation")


def permutation_find_reverse(order: Sequence[int], value: int) -> int:
    """Position of ``value`` in ``order``, or -1."""
    if not 0 <= value < len(order):
        return -1
    for position, item in enumerate(order):
        if item == value:
            return position
    return -1


def create_move_items_permutation(count: int, selection: Any, delta: int) -> list[int]:
    """Permutation moving the selected items ``delta`` places.

    ``selection[i]`` tells whether item ``i`` is selected. Selected items
    step past unselected neighbours one place per unit of ``delta``; a
    negative ``delta`` moves them towards the start.
    """
    order = list(range(count))
    selected = [bool(selection[i]) for i in range(count)]
    if delta < 0:
        for _ in range(-delta):
            for idx in range(1, count):
                if selected[idx] and not selected[idx - 1]:
                    order[idx], order[idx - 1] = order[idx - 1], order[idx]
                    selected[idx], selected[idx - 1] = selected[idx - 1], selected[idx]
    else:
        for _ in range(delta):
            for idx in range(count - 2, -1, -1):
                if selected[idx] and not selected[idx + 1]:
                    order[idx], order[idx + 1] = order[idx + 1], order[idx]
                    selected[idx], selected[idx + 1] = selected[idx + 1], selected[idx]
    return order


def order_find_reverse(order: Sequence[int], value: int) -> int:
    """Index ``i`` with ``order[i] == value``, found by following its cycle."""
    prev, nxt = value, order[value]
    while nxt != value:
        prev = nxt
        nxt = order[nxt]
    return prev


def order_reverse(order: MutableSequence[Any], base: int, count: int) -> None:
    """Reverse ``count`` items of ``order`` starting at ``base``, in place."""
    last = base + count - 1
    for n in range(count >> 1):
        order[base + n], order[last - n] = order[last - n], order[base + n]


def pow_int(base: int, exp: int) -> int:
    """``base`` to the power ``exp`` with 64-bit unsigned wrap-around."""
    mul = base & _MASK64
    exp &= _MASK64
    val = 1
    mask = 1
    while exp:
        if exp & mask:
            val = (val * mul) & _MASK64
            exp ^= mask
        mul = (mul * mul) & _MASK64
        mask <<= 1
    return val


def exp_int(base: float, exp: int) -> float:
    """``base`` to an integer power by repeated squaring."""
    neg = exp < 0
    remaining = -exp if neg else exp
    value = 1.0
    mul = float(base)
    while remaining:
        if remaining & 1:
            value *= mul
        remaining >>= 1
        if remaining:
            mul *= mul
    if neg:
        if value == 0:
            return math.copysign(math.inf, value)
        value = 1.0 / value
    return value


def rint32(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def rint64(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def output_debug_line(msg: str) -> None:
    """Write a line of debug output to standard output."""
    print(msg)


@contextlib.contextmanager
def toggled(obj: Any, attr: str, value: Any) -> Iterator[Any]:
    """Set ``obj.attr`` to ``value`` for the duration of a ``with`` block."""
    old = getattr(obj, attr)
    setattr(obj, attr, value)
    try:
        yield obj
    finally:
        setattr(obj, attr, old)


class _NotifyScope:
    """Flag raised when the owning :class:`DestructNotify` is set."""

    __slots__ = ("triggered",)

    def __init__(self) -> None:
        self.triggered = False

    def get(self) -> bool:
        return self.triggered


class DestructNotify:
    """Lets code inside a scope learn whether an object went away meanwhile."""

    def __init__(self) -> None:
        self._scopes: list[_NotifyScope] = []

    def set(self) -> None:
        """Raise the flag of every open scope."""
        for scope in self._scopes:
            scope.triggered = True
        self._scopes.clear()

    @contextlib.contextmanager
    def scope(self) -> Iterator[_NotifyScope]:
        """Open a scope whose ``triggered`` flag tells whether :meth:`set` ran."""
        entry = _NotifyScope()
        self._scopes.append(entry)
        try:
            yield entry
        finally:
            if not entry.triggered:
                self._scopes.remove(entry)


class BigMem:
    """A large zero-filled byte buffer kept in 1 MiB slices."""

    SLICE = 1024 * 1024

    def __init__(self) -> None:
        self._slices: list[bytearray] = []
        self._size = 0

    def resize(self, new_size: int) -> None:
        """Discard the contents and allocate ``new_size`` zero bytes."""
        if new_size < 0:
            raise ValueError(f"size must not be negative: {new_size}")
        self.clear()
        full, rest = divmod(new_size, self.SLICE)
        slices = [bytearray(self.SLICE) for _ in range(full)]
        if rest:
            slices.append(bytearray(rest))
        self._slices = slices
        self._size = new_size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Release every slice."""
        self._slices = []
        self._size = 0

    def _check_range(self, count: int, offset: int) -> None:
        if count < 0 or offset < 0 or offset + count > self._size:
            raise ValueError(f"range {offset}+{count} outside buffer of {self._size} bytes")

    def read(self, count: int, offset: int) -> bytes:
        """Return ``count`` bytes starting at ``offset``."""
        self._check_range(count, offset)
        out = bytearray()
        while count > 0:
            index, start = divmod(offset, self.SLICE)
            delta = min(self.SLICE - start, count)
            out += self._slices[index][start : start + delta]
            offset += delta
            count -= delta
        return bytes(out)

    def write(self, data: bytes, offset: int) -> None:
        """Store ``data`` starting at ``offset``."""
        view = memoryview(bytes(data))
        self._check_range(len(view), offset)
        while view:
            index, start = divmod(offset, self.SLICE)
            delta = min(self.SLICE - start, len(view))
            self._slices[index][start : start + delta] = view[:delta]
            offset += delta
            view = view[delta:]

    def slice_count(self) -> int:
        """Number of slices in use."""
        return len(self._slices)

    def slice_size(self, which: int) -> int:
        """Size in bytes of slice ``which``."""
        if not 0 <= which < len(self._slices):
            raise IndexError(f"slice index out of range: {which}")
        return len(self._slices[which])