"""Owning wrapper around an operating-system file descriptor."""

from __future__ import annotations

import os
from typing import Any

__all__ = ["FILE_HANDLE_INVALID", "file_handle_close", "file_handle_dup", "FileHandle"]

FILE_HANDLE_INVALID = -1


def file_handle_close(fd: int) -> None:
    """Close ``fd`` unless it is the invalid handle; errors are ignored."""
    if fd == FILE_HANDLE_INVALID:
        return
    try:
        os.close(fd)
    except OSError:
        pass


def file_handle_dup(fd: int) -> int:
    """Return a duplicate of ``fd``; raise :class:`OSError` on failure."""
    return os.dup(fd)


class FileHandle:
    """Owns a file descriptor and closes it when done with."""

    def __init__(self, fd: int = FILE_HANDLE_INVALID) -> None:
        self.fd = fd

    def close(self) -> None:
        """Close the descriptor and forget it."""
        file_handle_close(self.fd)
        self.clear()

    def clear(self) -> None:
        """Forget the descriptor without closing it."""
        self.fd = FILE_HANDLE_INVALID

    def is_valid(self) -> bool:
        """True if a descriptor is held."""
        return self.fd != FILE_HANDLE_INVALID

    def replace(self, fd: int) -> None:
        """Close the current descriptor and take ownership of ``fd``."""
        self.close()
        self.fd = fd

    def __enter__(self) -> "FileHandle":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "fd", FILE_HANDLE_INVALID) != FILE_HANDLE_INVALID:
            self.close()