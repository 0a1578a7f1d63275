"""Growable circular byte buffer."""

from __future__ import annotations

import os

from . import byteslice

MIN_READ = 512
DEFAULT_BUFFER_SIZE = 1024
_BUFFER_GROW_THRESHOLD = 4 * 1024
_MAXINT_HEAD_BIT = 1 << 62


class RingBufferEmptyError(Exception):
    """Raised when reading from an empty ring buffer."""

    def __init__(self, message: str = "ring-buffer is empty") -> None:
        super().__init__(message)


class ShortWriteError(IOError):
    """Raised when a writer accepted fewer bytes than offered."""

    def __init__(self, written: int) -> None:
        super().__init__("short write")
        self.written = written


def ceil_to_power_of_two(n: int) -> int:
    """Return ``n`` if it is a power of two, else the next power of two (at least 2)."""
    if n > _MAXINT_HEAD_BIT:
        raise ValueError("argument is too large")
    if n <= 2:
        return 2
    return 1 << (n - 1).bit_length()


class Buffer:
    """A circular byte buffer that grows when a write does not fit."""

    def __init__(self, size: int = 0) -> None:
        if size == 0:
            self._buf = bytearray()
            self._size = 0
        else:
            size = ceil_to_power_of_two(size)
            self._buf = bytearray(size)
            self._size = size
        self._r = 0
        self._w = 0
        self._empty = True

    # ------------------------------------------------------------------ peek

    def peek(self, n: int = 0) -> tuple[bytes, bytes]:
        """Return up to ``n`` readable bytes as (head, tail) without consuming them.

        All readable bytes are returned when ``n <= 0``.
        """
        if self._empty:
            return b"", b""
        if n <= 0:
            return self._peek_all()
        buf, r, w, size = self._buf, self._r, self._w, self._size
        if w > r:
            m = min(w - r, n)
            return bytes(buf[r : r + m]), b""
        m = min(size - r + w, n)
        if r + m <= size:
            return bytes(buf[r : r + m]), b""
        c1 = size - r
        return bytes(buf[r:size]), bytes(buf[: m - c1])

    def peek_from_pos(self, start: int, n: int) -> tuple[bytes, bytes]:
        """Return up to ``n`` bytes from absolute position ``start`` without consuming them."""
        if start < 0 or start >= self._size:
            return b"", b""
        if self._empty:
            return b"", b""
        if n <= 0:
            return self._peek_all()
        buf, size = self._buf, self._size
        if start < self._r:
            m = size - start + self._w
        else:
            m = self._w - start
        if m < 0:
            raise ValueError("start position lies outside the buffered data")
        m = min(m, n)
        if start + m <= size:
            return bytes(buf[start : start + m]), b""
        c1 = size - start
        return bytes(buf[start:size]), bytes(buf[: m - c1])

    def _peek_all(self) -> tuple[bytes, bytes]:
        if self._empty:
            return b"", b""
        buf, r, w = self._buf, self._r, self._w
        if w > r:
            return bytes(buf[r:w]), b""
        head = bytes(buf[r : self._size])
        tail = bytes(buf[:w]) if w != 0 else b""
        return head, tail

    # ------------------------------------------------------------------ read

    def discard(self, n: int) -> int:
        """Skip up to ``n`` readable bytes and return how many were skipped."""
        if n <= 0:
            return 0
        buffered = self.buffered()
        if n < buffered:
            self._r = (self._r + n) % self._size
            return n
        self.reset()
        return buffered

    def read(self, n: int) -> bytes:
        """Consume and return up to ``n`` bytes."""
        if n <= 0:
            return b""
        if self._empty:
            raise RingBufferEmptyError()
        head, tail = self.peek(n)
        data = head + tail
        self._r = (self._r + len(data)) % self._size
        if self._r == self._w:
            self.reset()
        return data

    def read_byte(self) -> int:
        """Consume and return the next byte."""
        if self._empty:
            raise RingBufferEmptyError()
        b = self._buf[self._r]
        self._r += 1
        if self._r == self._size:
            self._r = 0
        if self._r == self._w:
            self.reset()
        return b

    # ----------------------------------------------------------------- write

    def write(self, data) -> int:
        """Append bytes, growing the buffer if needed; return the count written."""
        if not isinstance(data, (bytes, bytearray)):
            data = bytes(data)
        n = len(data)
        if n == 0:
            return 0
        free = self.available()
        if n > free:
            self._grow(self._size + n - free)

        buf, size, w = self._buf, self._size, self._w
        if w >= self._r:
            c1 = size - w
            if c1 >= n:
                buf[w : w + n] = data
                w += n
            else:
                buf[w:size] = data[:c1]
                c2 = n - c1
                buf[:c2] = data[c1:]
                w = c2
        else:
            buf[w : w + n] = data
            w += n
        if w == size:
            w = 0
        self._w = w
        self._empty = False
        return n

    def write_byte(self, c: int) -> None:
        """Append a single byte."""
        if self.available() < 1:
            self._grow(1)
        self._buf[self._w] = c
        self._w += 1
        if self._w == self._size:
            self._w = 0
        self._empty = False

    def write_string(self, s: str) -> int:
        """Append the UTF-8 encoding of ``s``."""
        return self.write(s.encode("utf-8"))

    # ----------------------------------------------------------------- state

    def buffered(self) -> int:
        """Number of bytes available to read."""
        if self._r == self._w:
            return 0 if self._empty else self._size
        if self._w > self._r:
            return self._w - self._r
        return self._size - self._r + self._w

    def length(self) -> int:
        """Length of the underlying storage."""
        return len(self._buf)

    def cap(self) -> int:
        """Capacity of the ring."""
        return self._size

    def available(self) -> int:
        """Number of bytes that can be written without growing."""
        if self._r == self._w:
            return self._size if self._empty else 0
        if self._w < self._r:
            return self._r - self._w
        return self._size - self._w + self._r

    def to_bytes(self) -> bytes:
        """Copy of all readable bytes; the read position is unchanged."""
        head, tail = self._peek_all()
        return head + tail

    def is_full(self) -> bool:
        return self._r == self._w and not self._empty

    def is_empty(self) -> bool:
        return self._empty

    def reset(self) -> None:
        """Drop all content and move both positions to zero."""
        self._empty = True
        self._r = 0
        self._w = 0

    # -------------------------------------------------------------- streams

    def read_from(self, reader) -> int:
        """Fill the buffer from ``reader.readinto`` until it reports end of data."""
        total = 0
        while True:
            if self.available() < MIN_READ:
                self._grow(self.buffered() + MIN_READ)
            end = self._size if self._w >= self._r else self._r
            with memoryview(self._buf) as whole, whole[self._w : end] as part:
                m = reader.readinto(part)
            if not m:
                return total
            if m < 0:
                raise ValueError("reader returned negative count")
            self._empty = False
            self._w = (self._w + m) % self._size
            total += m

    def write_to(self, writer) -> int:
        """Drain the buffer into ``writer.write`` and return the bytes written."""
        if self._empty:
            raise RingBufferEmptyError()
        pending = self.buffered()
        head, tail = self._peek_all()

        m = self._write_chunk(writer, head)
        self._r = (self._r + m) % self._size
        if m == pending:
            self.reset()
            return m
        if m < len(head):
            raise ShortWriteError(m)

        m2 = self._write_chunk(writer, tail)
        self._r = m2
        total = m + m2
        if total == pending:
            self.reset()
            return total
        raise ShortWriteError(total)

    @staticmethod
    def _write_chunk(writer, chunk: bytes) -> int:
        result = writer.write(chunk)
        m = len(chunk) if result is None else result
        if m < 0 or m > len(chunk):
            raise ValueError("invalid write count")
        return m

    def copy_from_fd(self, fd: int) -> int:
        """Read once from file descriptor ``fd`` into the free space."""
        if self._r == self._w:
            if not self._empty:
                self._grow(self._size + self._size // 2)
                n = self._readv(fd, [(self._w, self._size)])
                if n > 0:
                    self._w = (self._w + n) % self._size
                return n
            self._r = self._w = 0
            n = self._readv(fd, [(0, self._size)])
            if n > 0:
                self._w = n % self._size
                self._empty = False
            return n
        if self._w < self._r:
            n = self._readv(fd, [(self._w, self._r)])
        else:
            n = self._readv(fd, [(self._w, self._size), (0, self._r)])
        if n > 0:
            self._w = (self._w + n) % self._size
        return n

    def _readv(self, fd: int, spans: list[tuple[int, int]]) -> int:
        with memoryview(self._buf) as whole:
            parts = [whole[a:b] for a, b in spans]
            try:
                return os.readv(fd, parts)
            finally:
                for part in parts:
                    part.release()

    def rewind(self) -> int:
        """Move readable data to the front of the storage where that frees room."""
        if self._empty:
            self.reset()
            return 0
        n = 0
        if self._w == 0:
            if self._r < self._size - self._r:
                self._grow(self._size + self._size - self._r)
                return self._size - self._r
            n = self._size - self._r
            self._buf[:n] = self._buf[self._r : self._size]
            self._r = 0
            self._w = n
        elif self._w > self._r and self._size - self._w < DEFAULT_BUFFER_SIZE:
            if self._r < self._w - self._r:
                self._grow(self._size + self._w - self._r)
                return self._w - self._r
            n = self._w - self._r
            self._buf[:n] = self._buf[self._r : self._w]
            self._r = 0
            self._w = n
        return n

    # ------------------------------------------------------------------ grow

    def _grow(self, new_cap: int) -> None:
        n = self._size
        if n == 0:
            if new_cap <= DEFAULT_BUFFER_SIZE:
                new_cap = DEFAULT_BUFFER_SIZE
            else:
                new_cap = ceil_to_power_of_two(new_cap)
        else:
            double_cap = n + n
            if new_cap <= double_cap:
                if n < _BUFFER_GROW_THRESHOLD:
                    new_cap = double_cap
                else:
                    while 0 < n < new_cap:
                        n += n // 4
                    if n > 0:
                        new_cap = n
        new_buf = byteslice.get(new_cap)
        old_len = self.buffered()
        data = self.read(old_len) if old_len else b""
        new_buf[:old_len] = data
        if self._buf:
            byteslice.put(self._buf)
        self._buf = new_buf
        self._r = 0
        self._w = old_len
        self._size = new_cap
        if self._w > 0:
            self._empty = False