import os

import pytest

from pfckit import filehandle as fh


def _is_open(fd):
    try:
        os.fstat(fd)
    except OSError:
        return False
    return True


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        if _is_open(fd):
            os.close(fd)


def test_default_handle_invalid():
    handle = fh.FileHandle()
    assert not handle.is_valid()
    assert handle.fd == fh.FILE_HANDLE_INVALID


def test_close_releases_descriptor(pipe):
    r, w = pipe
    handle = fh.FileHandle(r)
    assert handle.is_valid()
    handle.close()
    assert not handle.is_valid()
    assert not _is_open(r)


def test_clear_keeps_descriptor_open(pipe):
    r, w = pipe
    handle = fh.FileHandle(r)
    handle.clear()
    assert not handle.is_valid()
    assert _is_open(r)


def test_replace_closes_old(pipe):
    r, w = pipe
    handle = fh.FileHandle(r)
    handle.replace(w)
    assert handle.fd == w
    assert not _is_open(r)
    handle.close()
    assert not _is_open(w)


def test_context_manager_closes(pipe):
    r, w = pipe
    with fh.FileHandle(w) as handle:
        assert handle.is_valid()
    assert not _is_open(w)


def test_dup_shares_pipe(pipe):
    r, w = pipe
    dup = fh.file_handle_dup(w)
    try:
        assert dup != w
        os.write(dup, b"ok")
        assert os.read(r, 2) == b"ok"
    finally:
        fh.file_handle_close(dup)
    assert not _is_open(dup)


def test_dup_invalid_raises():
    with pytest.raises(OSError):
        fh.file_handle_dup(fh.FILE_HANDLE_INVALID)


def test_close_invalid_is_noop(pipe):
    r, w = pipe
    fh.file_handle_close(fh.FILE_HANDLE_INVALID)
    handle = fh.FileHandle()
    handle.close()
    assert not handle.is_valid()
    assert handle.fd == fh.FILE_HANDLE_INVALID
    assert _is_open(r)
    assert _is_open(w)