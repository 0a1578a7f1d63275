from msimkit import byteslice
from msimkit.byteslice import BytePool


def test_get_nonpositive_returns_empty():
    pool = BytePool()
    assert pool.get(0) == bytearray()
    assert pool.get(-3) == bytearray()


def test_get_returns_requested_length():
    pool = BytePool()
    for size in (1, 7, 64, 1000):
        assert len(pool.get(size)) == size


def test_put_then_get_reuses_same_buffer():
    pool = BytePool()
    buf = pool.get(8)
    pool.put(buf)
    again = pool.get(8)
    assert again is buf
    assert len(again) == 8


def test_reused_buffer_is_cut_to_size():
    pool = BytePool()
    buf = pool.get(8)
    pool.put(buf)
    smaller = pool.get(5)
    assert smaller is buf
    assert len(smaller) == 5


def test_non_power_of_two_goes_to_lower_class():
    pool = BytePool()
    odd = bytearray(5)
    pool.put(odd)
    fresh = pool.get(5)
    assert len(fresh) == 5 and fresh is not odd
    reused = pool.get(4)
    assert reused is odd
    assert len(reused) == 4


def test_put_immutable_is_ignored():
    pool = BytePool()
    pool.put(b"abcd")
    got = pool.get(4)
    assert got == bytearray(4)
    assert isinstance(got, bytearray)


def test_module_level_pool():
    buf = byteslice.get(16)
    assert len(buf) == 16
    byteslice.put(buf)
    assert len(byteslice.get(16)) == 16