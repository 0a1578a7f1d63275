"""Self-calibrating pool of ring buffers."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .ring import Buffer

_MIN_BIT_SIZE = 6  # 2**6 = 64, a CPU cache line
_STEPS = 20
_MIN_SIZE = 1 << _MIN_BIT_SIZE
_CALIBRATE_CALLS_THRESHOLD = 42000
_MAX_PERCENTILE = 0.95
_MAX_POOLED = 1024


def _index(n: int) -> int:
    n = (n - 1) >> _MIN_BIT_SIZE
    idx = n.bit_length() if n > 0 else 0
    return min(idx, _STEPS - 1)


@dataclass
class _CallSize:
    calls: int
    size: int


class RingBufferPool:
    """Hands out ring buffers and learns which sizes are worth keeping."""

    def __init__(self) -> None:
        self._calls = [0] * _STEPS
        self._calibrating = False
        self._default_size = 0
        self._max_size = 0
        self._free: list[Buffer] = []
        self._lock = threading.Lock()

    def get(self) -> Buffer:
        """Return an empty buffer, reused if one is pooled."""
        with self._lock:
            if self._free:
                return self._free.pop()
            default_size = self._default_size
        return Buffer(default_size)

    def put(self, buf: Buffer) -> None:
        """Release a buffer to the pool; it must not be used afterwards."""
        idx = _index(buf.length())
        with self._lock:
            self._calls[idx] += 1
            needs_calibration = self._calls[idx] > _CALIBRATE_CALLS_THRESHOLD
        if needs_calibration:
            self._calibrate()

        with self._lock:
            max_size = self._max_size
            if max_size == 0 or buf.cap() <= max_size:
                buf.reset()
                if len(self._free) < _MAX_POOLED:
                    self._free.append(buf)

    def _calibrate(self) -> None:
        with self._lock:
            if self._calibrating:
                return
            self._calibrating = True
            stats = [
                _CallSize(calls=calls, size=_MIN_SIZE << i)
                for i, calls in enumerate(self._calls)
            ]
            self._calls = [0] * _STEPS

        calls_sum = sum(s.calls for s in stats)
        stats.sort(key=lambda s: s.calls, reverse=True)

        default_size = stats[0].size
        max_size = default_size
        max_sum = int(calls_sum * _MAX_PERCENTILE)
        calls_sum = 0
        for stat in stats:
            if calls_sum > max_sum:
                break
            calls_sum += stat.calls
            max_size = max(max_size, stat.size)

        with self._lock:
            self._default_size = default_size
            self._max_size = max_size
            self._calibrating = False


_builtin_pool = RingBufferPool()


def get_buffer() -> Buffer:
    """Return an empty ring buffer from the shared pool."""
    return _builtin_pool.get()


def put_buffer(buf: Buffer) -> None:
    """Return a ring buffer to the shared pool."""
    _builtin_pool.put(buf)