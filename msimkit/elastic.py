"""Ring buffer that borrows its storage from the shared pool only while in use."""

from __future__ import annotations

from . import bufferpool
from .ring import Buffer, RingBufferEmptyError


class ElasticRingBuffer:
    """Lazily allocated ring buffer that returns its storage when drained."""

    def __init__(self) -> None:
        self._rb: Buffer | None = None

    def _instance(self) -> Buffer:
        if self._rb is None:
            self._rb = bufferpool.get_buffer()
        return self._rb

    def _require(self) -> Buffer:
        if self._rb is None:
            raise RingBufferEmptyError()
        return self._rb

    def done(self) -> None:
        """Return the underlying buffer to the pool unconditionally."""
        if self._rb is not None:
            bufferpool.put_buffer(self._rb)
            self._rb = None

    def _release_if_empty(self) -> None:
        if self._rb is not None and self._rb.is_empty():
            bufferpool.put_buffer(self._rb)
            self._rb = None

    def peek(self, n: int = 0) -> tuple[bytes, bytes]:
        """Return up to ``n`` bytes (all when ``n <= 0``) as (head, tail)."""
        if self._rb is None:
            return b"", b""
        return self._rb.peek(n)

    def discard(self, n: int) -> int:
        """Skip up to ``n`` readable bytes."""
        rb = self._require()
        try:
            return rb.discard(n)
        finally:
            self._release_if_empty()

    def read(self, n: int) -> bytes:
        """Consume and return up to ``n`` bytes."""
        rb = self._require()
        try:
            return rb.read(n)
        finally:
            self._release_if_empty()

    def read_byte(self) -> int:
        """Consume and return the next byte."""
        rb = self._require()
        try:
            return rb.read_byte()
        finally:
            self._release_if_empty()

    def write(self, data) -> int:
        """Append bytes; nothing is allocated for an empty write."""
        if len(data) == 0:
            return 0
        return self._instance().write(data)

    def write_byte(self, c: int) -> None:
        self._instance().write_byte(c)

    def write_string(self, s: str) -> int:
        if not s:
            return 0
        return self._instance().write_string(s)

    def buffered(self) -> int:
        return 0 if self._rb is None else self._rb.buffered()

    def length(self) -> int:
        return 0 if self._rb is None else self._rb.length()

    def cap(self) -> int:
        return 0 if self._rb is None else self._rb.cap()

    def available(self) -> int:
        return 0 if self._rb is None else self._rb.available()

    def to_bytes(self) -> bytes:
        """Copy of all readable bytes."""
        return b"" if self._rb is None else self._rb.to_bytes()

    def read_from(self, reader) -> int:
        """Fill from ``reader.readinto`` until end of data."""
        return self._instance().read_from(reader)

    def write_to(self, writer) -> int:
        """Drain into ``writer.write``."""
        rb = self._require()
        try:
            return rb.write_to(writer)
        finally:
            self._release_if_empty()

    def is_full(self) -> bool:
        return False if self._rb is None else self._rb.is_full()

    def is_empty(self) -> bool:
        return True if self._rb is None else self._rb.is_empty()

    def reset(self) -> None:
        if self._rb is not None:
            self._rb.reset()