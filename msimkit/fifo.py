"""Bounded first-in first-out queue of integers."""

from __future__ import annotations

from collections import deque


class FIFO:
    """Keeps at most ``size`` values; pushing onto a full queue drops the oldest."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._data: deque[int] = deque(maxlen=size)

    def push(self, val: int) -> None:
        self._data.append(val)

    def pop(self) -> int:
        """Remove and return the oldest value, or 0 when empty."""
        if not self._data:
            return 0
        return self._data.popleft()

    def data(self) -> list[int]:
        """Values from oldest to newest."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)