"""File-name and path helpers for slash-separated paths."""

from __future__ import annotations

from .textutil import (
    compare_case_sensitive,
    contains_any_char,
    is_non_text_char,
    last_index_of_any_char,
)

__all__ = [
    "get_file_name",
    "get_file_name_without_extension",
    "get_file_extension",
    "get_parent",
    "get_directory",
    "combine",
    "get_default_separator",
    "get_separators",
    "is_separator",
    "get_illegal_name_chars",
    "replace_illegal_name_chars",
    "replace_illegal_path_chars",
    "is_inside_directory",
    "is_directory_root",
    "validate_file_name",
    "equals",
    "compare",
]

_SEPARATORS = "/"
_DEFAULT_SEPARATOR = "/"
_ILLEGAL_NAME_CHARS = _SEPARATORS + "*?"
_ILLEGAL_NAME_CHARS_NO_WC = _SEPARATORS

_REPLACEMENTS = {
    "*": "x",
    '"': "''",
    ":": "-",
    "/": "-",
    "\\": "-",
}


def get_file_name(path: str) -> str:
    """The part of ``path`` after the last separator."""
    split = last_index_of_any_char(path, _SEPARATORS)
    return path if split < 0 else path[split + 1 :]


def get_file_name_without_extension(path: str) -> str:
    """The file name with everything from its last dot removed."""
    name = get_file_name(path)
    split = name.rfind(".")
    return name if split < 0 else name[:split]


def get_file_extension(path: str) -> str:
    """The file name's extension including the dot, or an empty string."""
    name = get_file_name(path)
    split = name.rfind(".")
    return "" if split < 0 else name[split:]


def get_parent(path: str) -> str:
    """Everything before the last separator, or an empty string."""
    split = last_index_of_any_char(path, _SEPARATORS)
    return "" if split < 0 else path[:split]


def get_directory(path: str) -> str:
    """Same as :func:`get_parent`."""
    return get_parent(path)


def combine(base_path: str, file_name: str) -> str:
    """Join a directory and a name, adding a separator if needed."""
    if not base_path:
        return file_name
    if not is_separator(base_path[-1]):
        base_path += _DEFAULT_SEPARATOR
    return base_path + file_name


def get_default_separator() -> str:
    """The separator used when building paths."""
    return _DEFAULT_SEPARATOR


def get_separators() -> str:
    """Every character accepted as a path separator."""
    return _SEPARATORS


def is_separator(c: str) -> bool:
    """True if ``c`` is a path separator."""
    return len(c) == 1 and c in _SEPARATORS


def get_illegal_name_chars(allow_wc: bool = False) -> str:
    """Characters not allowed in a file name; wildcards are allowed with ``allow_wc``."""
    return _ILLEGAL_NAME_CHARS_NO_WC if allow_wc else _ILLEGAL_NAME_CHARS


def _replacement(c: str, illegal: str) -> str:
    replacement = _REPLACEMENTS.get(c, "_")
    if contains_any_char(replacement, illegal):
        replacement = "_"
    return replacement


def _sanitize(name: str, illegal: str, keep_separators: bool) -> str:
    out = []
    for c in name:
        if keep_separators and c in _SEPARATORS:
            out.append(_DEFAULT_SEPARATOR)
        elif is_non_text_char(c) or c in illegal:
            out.append(_replacement(c, illegal))
        else:
            out.append(c)
    return "".join(out)


def replace_illegal_name_chars(name: str, allow_wc: bool = False) -> str:
    """Replace characters that may not appear in a file name."""
    return _sanitize(name, get_illegal_name_chars(allow_wc), keep_separators=False)


def replace_illegal_path_chars(name: str) -> str:
    """Replace illegal characters while keeping separators."""
    return _sanitize(name, get_illegal_name_chars(), keep_separators=True)


def is_inside_directory(directory: str, inside: str) -> bool:
    """True if ``directory`` is one of the ancestors of ``inside``."""
    walk = inside
    while True:
        walk = get_parent(walk)
        if walk == "":
            return False
        if equals(directory, walk):
            return True


def is_directory_root(path: str) -> bool:
    """True if ``path`` has no parent."""
    return get_parent(path) == ""


def validate_file_name(name: str, allow_wc: bool = False) -> str:
    """Remove question marks and replace illegal characters in a file name.

    ``allow_wc`` is accepted for interface compatibility and has no effect
    with slash-separated paths.
    """
    return replace_illegal_name_chars(name.replace("?", ""))


def equals(a: str, b: str) -> bool:
    """Path equality, case sensitive."""
    return compare_case_sensitive(a, b) == 0


def compare(a: str, b: str) -> int:
    """Case-sensitive three-way comparison of two paths."""
    return compare_case_sensitive(a, b)