"""Size-classed pool of reusable byte buffers."""

from __future__ import annotations

import threading

_MAX_INT32 = 2**31 - 1
_POOL_COUNT = 32
_MAX_PER_CLASS = 64


def _index(n: int) -> int:
    return (n - 1).bit_length()


class BytePool:
    """Keeps byte buffers in power-of-two size classes for reuse."""

    def __init__(self) -> None:
        self._pools: list[list[bytearray]] = [[] for _ in range(_POOL_COUNT)]
        self._lock = threading.Lock()

    def get(self, size: int) -> bytearray:
        """Return a buffer of exactly ``size`` bytes, reused where possible."""
        if size <= 0:
            return bytearray()
        if size > _MAX_INT32:
            return bytearray(size)
        idx = _index(size)
        with self._lock:
            pool = self._pools[idx]
            buf = pool.pop() if pool else None
        if buf is None:
            return bytearray(size)
        if len(buf) > size:
            try:
                del buf[size:]
            except BufferError:
                return bytearray(size)
        return buf

    def put(self, buf: bytearray) -> None:
        """Hand a buffer back to the pool."""
        if not isinstance(buf, bytearray):
            return
        size = len(buf)
        if size == 0 or size > _MAX_INT32:
            return
        idx = _index(size)
        if size != 1 << idx:
            # Not a full size class: it only satisfies the class below.
            idx -= 1
        with self._lock:
            pool = self._pools[idx]
            if len(pool) < _MAX_PER_CLASS:
                pool.append(buf)


_builtin_pool = BytePool()


def get(size: int) -> bytearray:
    """Return a buffer of ``size`` bytes from the shared pool."""
    return _builtin_pool.get(size)


def put(buf: bytearray) -> None:
    """Return a buffer to the shared pool."""
    _builtin_pool.put(buf)