"""String search, replacement and comparison helpers."""

from __future__ import annotations

from typing import Any, Iterable

__all__ = [
    "is_non_text_char",
    "index_of_any_char",
    "last_index_of_any_char",
    "contains_any_char",
    "replace_all",
    "compare_case_sensitive",
    "compare_case_insensitive",
    "compare_case_insensitive_ascii",
    "combine_list",
]


def _sign(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


def is_non_text_char(c: str) -> bool:
    """True for control characters below space."""
    return ord(c) < 32


def index_of_any_char(text: str, chars: str) -> int:
    """Index of the first character of ``text`` found in ``chars``, or -1."""
    return next((i for i, c in enumerate(text) if c in chars), -1)


def last_index_of_any_char(text: str, chars: str) -> int:
    """Index of the last character of ``text`` found in ``chars``, or -1."""
    for i in range(len(text) - 1, -1, -1):
        if text[i] in chars:
            return i
    return -1


def contains_any_char(text: str, chars: str) -> bool:
    """True if any character of ``chars`` occurs in ``text``."""
    return index_of_any_char(text, chars) >= 0


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, left to right."""
    if not old:
        raise ValueError("the string to replace must not be empty")
    return text.replace(old, new)


def compare_case_sensitive(a: str, b: str) -> int:
    """Byte-wise comparison of the UTF-8 forms; returns -1, 0 or 1."""
    return _sign(a.encode("utf-8"), b.encode("utf-8"))


def compare_case_insensitive(a: str, b: str) -> int:
    """Comparison ignoring letter case across Unicode; returns -1, 0 or 1."""
    return _sign(a.lower().encode("utf-8"), b.lower().encode("utf-8"))


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def compare_case_insensitive_ascii(a: str, b: str) -> int:
    """Comparison ignoring case of ASCII letters only; returns -1, 0 or 1."""
    return _sign(_ascii_lower(a).encode("utf-8"), _ascii_lower(b).encode("utf-8"))


def combine_list(items: Iterable[Any], separator: str) -> str:
    """Join the string forms of ``items`` with ``separator``."""
    return separator.join(str(item) for item in items)