"""Rate limiting by tracked in-memory log size."""

from __future__ import annotations

import threading
from dataclasses import dataclass

_MAX_UINT64 = 2**64 - 1

GC_TICK = 3
# Minimum number of ticks between two changes of the limited state.
CHANGE_TICK_THRESHOLD = 10


class RateLimiter:
    """Tracks consumed memory size against a maximum (unsigned 64-bit arithmetic)."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._size = 0
        self._lock = threading.Lock()

    def enabled(self) -> bool:
        """True unless the maximum is zero or the largest 64-bit value."""
        return self.max_size > 0 and self.max_size != _MAX_UINT64

    def increase(self, sz: int) -> None:
        with self._lock:
            self._size = (self._size + sz) & _MAX_UINT64

    def decrease(self, sz: int) -> None:
        """Subtract ``sz``; the size wraps around below zero."""
        with self._lock:
            self._size = (self._size - sz) & _MAX_UINT64

    def set(self, sz: int) -> None:
        with self._lock:
            self._size = sz & _MAX_UINT64

    def get(self) -> int:
        with self._lock:
            return self._size

    def rate_limited(self) -> bool:
        """True when enabled and the recorded size exceeds the maximum."""
        if not self.enabled():
            return False
        return self.get() > self.max_size


@dataclass(frozen=True)
class _FollowerState:
    tick: int
    in_mem_log_size: int


class InMemRateLimiter:
    """Rate limiter that also weighs recent sizes reported by followers.

    Once limited, the limit is only lifted when the size falls below 70% of
    the maximum, and the state changes at most once per
    ``CHANGE_TICK_THRESHOLD`` ticks.
    """

    def __init__(self, max_size: int) -> None:
        # Start at 1 so that a recorded change tick is never 0.
        self._tick = 1
        self._rl = RateLimiter(max_size)
        self._followers: dict[int, _FollowerState] = {}
        self._tick_limited = 0
        self._limited = False

    def enabled(self) -> bool:
        return self._rl.enabled()

    def tick(self) -> None:
        """Advance the logical clock."""
        self._tick += 1

    def get_tick(self) -> int:
        return self._tick

    def increase(self, sz: int) -> None:
        self._rl.increase(sz)

    def decrease(self, sz: int) -> None:
        self._rl.decrease(sz)

    def set(self, sz: int) -> None:
        self._rl.set(sz)

    def get(self) -> int:
        return self._rl.get()

    def reset(self) -> None:
        """Forget all follower states."""
        self._followers = {}

    def set_follower_state(self, replica_id: int, sz: int) -> None:
        """Record that follower ``replica_id`` holds ``sz`` bytes in memory now."""
        self._followers[replica_id] = _FollowerState(self._tick, sz)

    def rate_limited(self) -> bool:
        limited = self._limited_by_in_mem_size()
        if limited != self._limited:
            if self._tick_limited == 0 or self._tick - self._tick_limited > CHANGE_TICK_THRESHOLD:
                self._limited = limited
                self._tick_limited = self._tick
        return self._limited

    def _is_stale(self, state: _FollowerState) -> bool:
        return self._tick - state.tick > GC_TICK

    def _limited_by_in_mem_size(self) -> bool:
        if not self.enabled():
            return False
        fresh = [s.in_mem_log_size for s in self._followers.values() if not self._is_stale(s)]
        if len(fresh) != len(self._followers):
            self._followers = {
                nid: s for nid, s in self._followers.items() if not self._is_stale(s)
            }
        max_in_mem = max(fresh + [self.get()])
        max_size = self._rl.max_size
        if not self._limited:
            return max_in_mem > max_size
        return max_in_mem >= ((max_size * 7) & _MAX_UINT64) // 10