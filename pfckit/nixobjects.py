"""POSIX descriptor helpers: flags, pipes, polling, pipe-based events and timing."""

from __future__ import annotations

import math
import os
import select
import sys
import time
from typing import Optional, Set, Tuple, Union

from .other import rint32

__all__ = [
    "NixError",
    "set_non_blocking",
    "set_close_on_exec",
    "set_inheritable",
    "create_pipe",
    "make_timeval",
    "import_timeval",
    "FdSelect",
    "fd_can_read",
    "fd_can_write",
    "fd_wait_read",
    "fd_wait_write",
    "NixEvent",
    "two_event_wait",
    "nix_sleep",
    "nix_get_time",
    "read_symlink",
    "self_process_path",
    "get_random_data",
]


class NixError(OSError):
    """An operating-system error identified by its errno code."""

    def __init__(self, code: int) -> None:
        super().__init__(code, os.strerror(code))

    @property
    def code(self) -> int:
        """The errno value."""
        return self.errno


def set_non_blocking(fd: int, enabled: bool = True) -> None:
    """Switch non-blocking mode of ``fd`` on or off."""
    os.set_blocking(fd, not enabled)


def set_close_on_exec(fd: int, enabled: bool = True) -> None:
    """Switch the close-on-exec flag of ``fd`` on or off."""
    os.set_inheritable(fd, not enabled)


def set_inheritable(fd: int, enabled: bool = True) -> None:
    """Make ``fd`` inheritable by child processes, or not."""
    set_close_on_exec(fd, not enabled)


def create_pipe(inheritable: bool = False) -> Tuple[int, int]:
    """Create a pipe and return ``(read_fd, write_fd)``; not inheritable by default."""
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise NixError(exc.errno or 0) from exc
    set_inheritable(read_fd, inheritable)
    set_inheritable(write_fd, inheritable)
    return read_fd, write_fd


def make_timeval(seconds: float) -> Tuple[int, int]:
    """Split seconds into ``(seconds, microseconds)``, rounded to the nearest microsecond."""
    if seconds < 0:
        raise ValueError(f"time must not be negative: {seconds}")
    total = int(math.floor(seconds * 1000000.0 + 0.5))
    return total // 1000000, total % 1000000


def import_timeval(sec: int, usec: int) -> float:
    """Combine seconds and microseconds into seconds."""
    return float(sec) + float(usec) / 1000000.0


def _timeout_ms(timeout: Optional[float]) -> int:
    if timeout is None or timeout < 0:
        return -1
    if timeout == 0:
        return 0
    return max(rint32(timeout * 1000), 1)


class FdSelect:
    """Waits on sets of descriptors for reading, writing or errors.

    After :meth:`select` the three sets hold only the ready descriptors.
    """

    def __init__(self) -> None:
        self.reads: Set[int] = set()
        self.writes: Set[int] = set()
        self.errors: Set[int] = set()

    def select(self, timeout: Optional[float] = None) -> int:
        """Wait up to ``timeout`` seconds (None or negative: forever).

        Returns the number of ready descriptors.
        """
        total = self.reads | self.writes | self.errors
        poller = select.poll()
        for fd in sorted(total):
            mask = (select.POLLIN if fd in self.reads else 0) | (select.POLLOUT if fd in self.writes else 0)
            poller.register(fd, mask)
        ms = _timeout_ms(timeout)
        if total:
            try:
                events = poller.poll(ms)
            except OSError as exc:
                raise NixError(exc.errno or 0) from exc
        else:
            if ms > 0:
                time.sleep(ms / 1000.0)
            elif ms < 0:
                raise ValueError("waiting forever on no descriptors")
            events = []

        self.reads.clear()
        self.writes.clear()
        self.errors.clear()
        for fd, revents in events:
            if revents & select.POLLIN:
                self.reads.add(fd)
            if revents & select.POLLOUT:
                self.writes.add(fd)
            if revents & (select.POLLERR | select.POLLHUP | select.POLLNVAL):
                self.errors.add(fd)
        return len(events)


def fd_wait_read(fd: int, timeout: Optional[float]) -> bool:
    """True if ``fd`` becomes readable within ``timeout`` seconds."""
    sel = FdSelect()
    sel.reads.add(fd)
    return sel.select(timeout) > 0


def fd_wait_write(fd: int, timeout: Optional[float]) -> bool:
    """True if ``fd`` becomes writable within ``timeout`` seconds."""
    sel = FdSelect()
    sel.writes.add(fd)
    return sel.select(timeout) > 0


def fd_can_read(fd: int) -> bool:
    """True if ``fd`` is readable right now."""
    return fd_wait_read(fd, 0)


def fd_can_write(fd: int) -> bool:
    """True if ``fd`` is writable right now."""
    return fd_wait_write(fd, 0)


class NixEvent:
    """A manual-reset event backed by a non-blocking pipe."""

    def __init__(self) -> None:
        self._read_fd, self._write_fd = create_pipe()
        set_non_blocking(self._read_fd)
        set_non_blocking(self._write_fd)

    @property
    def handle(self) -> int:
        """The descriptor that becomes readable while the event is set."""
        return self._read_fd

    def fileno(self) -> int:
        return self._read_fd

    def set_state(self, state: bool) -> None:
        """Set or reset the event."""
        if state:
            if not fd_can_read(self._read_fd):
                os.write(self._write_fd, b"\0")
        else:
            while True:
                try:
                    if len(os.read(self._read_fd, 1)) != 1:
                        break
                except BlockingIOError:
                    break

    def is_set(self) -> bool:
        """True if the event is set."""
        return self.wait_for(0)

    def wait_for(self, timeout: Optional[float]) -> bool:
        """Wait up to ``timeout`` seconds for the event; True if it is set."""
        return fd_wait_read(self._read_fd, timeout)

    def close(self) -> None:
        """Release both ends of the pipe."""
        for fd in (self._read_fd, self._write_fd):
            if fd >= 0:
                try:
                    os.close(fd)
                except OSError:
                    pass
        self._read_fd = self._write_fd = -1

    def __enter__(self) -> "NixEvent":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_read_fd", -1) >= 0:
            self.close()


def _handle(value: Union[int, NixEvent]) -> int:
    return value.handle if isinstance(value, NixEvent) else value


def two_event_wait(h1: Union[int, NixEvent], h2: Union[int, NixEvent], timeout: Optional[float]) -> int:
    """Wait on two events; return 0 on timeout, 1 if the first is set, else 2."""
    fd1, fd2 = _handle(h1), _handle(h2)
    sel = FdSelect()
    sel.reads.add(fd1)
    sel.reads.add(fd2)
    if sel.select(timeout) == 0:
        return 0
    if fd1 in sel.reads:
        return 1
    if fd2 in sel.reads:
        return 2
    raise RuntimeError("poll reported readiness on neither descriptor")


def nix_sleep(seconds: float) -> None:
    """Sleep for ``seconds``, rounded up to whole milliseconds."""
    FdSelect().select(max(seconds, 0))


def nix_get_time() -> float:
    """Wall-clock time in seconds since the epoch."""
    return time.time()


def read_symlink(path: str) -> Optional[str]:
    """Target of a symbolic link, or None if it cannot be read."""
    try:
        return os.readlink(path)
    except OSError:
        return None


def self_process_path() -> Optional[str]:
    """Path of the running executable, or None if it cannot be found."""
    if sys.platform == "darwin":
        return sys.executable or None
    return read_symlink(f"/proc/{os.getpid()}/exe")


def get_random_data(count: int) -> bytes:
    """Read ``count`` bytes from the system random device."""
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    try:
        with open("/dev/urandom", "rb") as source:
            data = source.read(count)
    except OSError as exc:
        raise RuntimeError("getRandomData failure") from exc
    if len(data) != count:
        raise RuntimeError("getRandomData failure")
    return data