"""Background pipeline that batches appended bytes into a delivery callback."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from .elastic import ElasticRingBuffer
from .ring import RingBufferEmptyError

_log = logging.getLogger(__name__)

_TICK_SECONDS = 1.0
_RETRY_SECONDS = 0.1


class DataNotEnoughError(Exception):
    """Raised by a delivery callback that needs more data before it can consume any."""

    def __init__(self, message: str = "data not enough") -> None:
        super().__init__(message)


class DataPipeline:
    """Buffers appended bytes and feeds them to ``deliver`` from a worker thread.

    Each delivery receives at most ``max_peek_bytes`` bytes (all buffered
    bytes when it is ``<= 0``). Delivered bytes are dropped from the buffer;
    if ``deliver`` raises, they are kept and offered again later.
    """

    def __init__(self, max_peek_bytes: int, deliver: Callable[[bytes], None]) -> None:
        self._buffer = ElasticRingBuffer()
        self._max_peek = max_peek_bytes
        self._deliver = deliver
        self._lock = threading.Lock()
        self._trigger = threading.Event()
        self._stop_event = threading.Event()
        self._stopped = False
        self._flushing = False
        self._thread: threading.Thread | None = None

    def append(self, data: bytes) -> int:
        """Queue ``data`` for delivery and return the number of bytes queued."""
        with self._lock:
            n = self._buffer.write(data)
        self._trigger.set()
        return n

    def start(self) -> None:
        """Start the worker thread."""
        self._thread = threading.Thread(target=self._run, name="dataPipeline", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        self._stopped = True
        self._stop_event.set()
        self._trigger.set()
        if self._thread is not None:
            self._thread.join()

    def _buffered(self) -> int:
        with self._lock:
            return self._buffer.buffered()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            triggered = self._trigger.wait(_TICK_SECONDS)
            if self._stop_event.is_set():
                return
            if not triggered:
                if not self._flushing:
                    self._safe_flush()
                continue
            self._trigger.clear()
            while self._buffered() > 0 and not self._stopped:
                try:
                    progressed = self._flush()
                except Exception as exc:
                    _log.warning("fail to flush: %s", exc)
                    time.sleep(_RETRY_SECONDS)
                    continue
                if not progressed:
                    # The consumer wants more data; wait for the next append or tick.
                    break

    def _safe_flush(self) -> None:
        try:
            self._flush()
        except Exception as exc:
            _log.warning("fail to flush: %s", exc)

    def _flush(self) -> bool:
        with self._lock:
            self._flushing = True
            try:
                head, tail = self._buffer.peek(self._max_peek)
                data = head + tail
                if not data:
                    return False
                try:
                    self._deliver(data)
                except DataNotEnoughError:
                    _log.debug("data not enough")
                    return False
                try:
                    self._buffer.discard(len(data))
                except RingBufferEmptyError as exc:
                    _log.warning("fail to discard: %s", exc)
                return True
            finally:
                self._flushing = False