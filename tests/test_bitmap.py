import pytest

from msimkit.bitmap import (
    SlotBitMap,
    get_slot_fill_format,
    get_slot_num,
    slots_contains,
)


def test_new_bitmap_size_rounds_up():
    assert len(SlotBitMap(16).bits) == 2
    assert len(SlotBitMap(17).bits) == 3


def test_set_and_get_slot():
    bm = SlotBitMap(32)
    bm.set_slot(9, True)
    assert bm.get_slot(9)
    assert not bm.get_slot(8)
    bm.set_slot(9, False)
    assert not bm.get_slot(9)
    assert bm.valid_slot_num() == 0


def test_slot_bit_position():
    bm = SlotBitMap(16)
    bm.set_slot(9, True)
    assert bm.bits[1] == 1 << 1


def test_out_of_range_raises():
    bm = SlotBitMap(8)
    with pytest.raises(IndexError):
        bm.set_slot(8, True)
    with pytest.raises(IndexError):
        bm.get_slot(-1)


def test_range_and_valid_slots():
    bm = SlotBitMap(64)
    bm.set_slot_for_range(3, 6, True)
    assert bm.valid_slots() == [3, 4, 5, 6]
    assert bm.valid_slot_num() == 4


def test_reset_clears():
    bm = SlotBitMap(20)
    bm.set_slot_for_range(0, 19, True)
    bm.reset()
    assert bm.valid_slot_num() == 0
    assert len(bm.bits) == 3


def test_format_round_trip():
    text = "1-3,5-6,10"
    bm = SlotBitMap.from_format(text, 64)
    assert bm.valid_slots() == [1, 2, 3, 5, 6, 10]
    assert bm.format_slots() == text
    assert SlotBitMap.from_format(bm.format_slots(), 64).bits == bm.bits


def test_format_empty():
    assert SlotBitMap(16).format_slots() == ""
    assert SlotBitMap.from_format("", 16).valid_slot_num() == 0


def test_export_moves_highest_slots():
    bm = SlotBitMap(16)
    bm.set_slot_for_range(0, 15, True)
    exported = bm.export_slots(3)
    assert SlotBitMap.from_bits(exported).valid_slots() == [13, 14, 15]
    assert bm.valid_slots() == list(range(13))


def test_export_more_than_available():
    bm = SlotBitMap.from_format("2-4", 16)
    exported = bm.export_slots(10)
    assert SlotBitMap.from_bits(exported).valid_slots() == [2, 3, 4]
    assert bm.valid_slot_num() == 0


def test_clean_slots():
    bm = SlotBitMap(16)
    bm.set_slot_for_range(0, 15, True)
    removed = SlotBitMap.from_format("0-1,9", 16)
    bm.clean_slots(removed.bits)
    assert set(bm.valid_slots()) == set(range(16)) - {0, 1, 9}


def test_merge_slots_is_union():
    a = SlotBitMap.from_format("0-2", 24)
    b = SlotBitMap.from_format("10-11", 24)
    c = SlotBitMap.from_format("20-22", 24)
    merged = SlotBitMap(24)
    merged.merge_slots(a.bits, b.bits, c.bits)
    assert merged.valid_slots() == a.valid_slots() + b.valid_slots() + c.valid_slots()


def test_slots_contains():
    full = SlotBitMap.from_format("0-15", 16)
    part = SlotBitMap.from_format("3-5", 16)
    assert slots_contains(full.bits, part.bits)
    assert not slots_contains(part.bits, full.bits)
    assert not slots_contains(b"\x01", b"\x01\x01")


def test_get_slot_num_in_range_and_stable():
    for value in ["a", "user1", "group&42"]:
        slot = get_slot_num(128, value)
        assert 0 <= slot < 128
        assert get_slot_num(128, value) == slot


def test_fill_format_widths():
    assert get_slot_fill_format(5, 50) == "05"
    assert len(get_slot_fill_format(5, 500)) == 3
    assert len(get_slot_fill_format(5, 5000)) == 4


def test_fill_format_too_large():
    with pytest.raises(ValueError):
        get_slot_fill_format(1, 10000)