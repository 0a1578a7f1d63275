"""Run callbacks on threads and wait for all of them."""

from __future__ import annotations

import threading
from typing import Callable


class WaitGroupWrapper:
    """Starts callbacks on threads and tracks how many are still running."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._count = 0
        self._cond = threading.Condition()

    def wrap(self, cb: Callable[[], object]) -> None:
        """Run ``cb`` on a new thread."""
        with self._cond:
            self._count += 1
        thread = threading.Thread(target=self._run, args=(cb,), name=self.name or None, daemon=True)
        thread.start()

    def _run(self, cb: Callable[[], object]) -> None:
        try:
            cb()
        finally:
            with self._cond:
                self._count -= 1
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until every wrapped callback has returned."""
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)

    def thread_count(self) -> int:
        """Number of callbacks still running."""
        with self._cond:
            return self._count