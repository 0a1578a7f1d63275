from msimkit.bufferpool import RingBufferPool, get_buffer, put_buffer
from msimkit.ring import Buffer


def test_fresh_pool_gives_empty_unallocated_buffer():
    pool = RingBufferPool()
    buf = pool.get()
    assert buf.is_empty()
    assert buf.cap() == 0


def test_put_then_get_reuses_and_resets():
    pool = RingBufferPool()
    buf = pool.get()
    buf.write(b"hello")
    pool.put(buf)
    again = pool.get()
    assert again is buf
    assert again.is_empty()
    assert again.buffered() == 0


def test_shared_pool_round_trip():
    buf = get_buffer()
    buf.write(b"abc")
    assert buf.to_bytes() == b"abc"
    put_buffer(buf)
    fresh = get_buffer()
    assert fresh.is_empty()


def _drain_until_new(pool, seed):
    for _ in range(2000):
        buf = pool.get()
        if buf is not seed:
            return buf
    raise AssertionError("pool never produced a new buffer")


def test_calibration_sets_default_size_from_common_length():
    pool = RingBufferPool()
    seed = Buffer(1024)
    for _ in range(42001):
        pool.put(seed)
    fresh = _drain_until_new(pool, seed)
    assert fresh.cap() == seed.cap()


def test_calibration_rejects_oversized_buffers():
    pool = RingBufferPool()
    seed = Buffer(1024)
    for _ in range(42001):
        pool.put(seed)
    _drain_until_new(pool, seed)
    big = Buffer(1024 * 64)
    pool.put(big)
    assert pool.get() is not big