"""Small file-system helpers."""

from __future__ import annotations

import os
import stat

_CHUNK = 64 * 1024
_FILE_MODE = 0o644


def copy_file(dst: str | os.PathLike, src: str | os.PathLike) -> int:
    """Copy ``src`` over the start of ``dst`` and return the number of bytes copied.

    ``dst`` is created if missing but not truncated, so trailing bytes of a
    longer existing file are left in place.
    """
    written = 0
    with open(src, "rb") as source:
        fd = os.open(dst, os.O_WRONLY | os.O_CREAT, _FILE_MODE)
        with os.fdopen(fd, "wb") as target:
            while chunk := source.read(_CHUNK):
                target.write(chunk)
                written += len(chunk)
    return written


def write_file(filename: str | os.PathLike, data: bytes) -> None:
    """Write ``data`` to ``filename``, replacing any previous content."""
    fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    with os.fdopen(fd, "wb") as target:
        target.write(bytes(data))


def read_file(filename: str | os.PathLike) -> bytes:
    """Return the whole content of ``filename``."""
    with open(filename, "rb") as source:
        return source.read()


def file_exists(filename: str | os.PathLike) -> bool:
    """True if ``filename`` can be stat'ed."""
    try:
        os.stat(filename)
    except OSError:
        return False
    return True


def remove_file(filename: str | os.PathLike) -> None:
    """Remove a file or an empty directory."""
    info = os.lstat(filename)
    if stat.S_ISDIR(info.st_mode):
        os.rmdir(filename)
    else:
        os.remove(filename)