import pytest

from msimkit.channel import channel_from_key, channel_to_key


def test_to_key_format():
    assert channel_to_key("room1", 2) == "2&room1"


@pytest.mark.parametrize("channel_id,channel_type", [("u1", 1), ("group-9", 2), ("", 0), ("x", 255)])
def test_round_trip(channel_id, channel_type):
    assert channel_from_key(channel_to_key(channel_id, channel_type)) == (channel_id, channel_type)


def test_missing_separator():
    assert channel_from_key("nothing") == ("", 0)


def test_extra_separators_are_dropped():
    assert channel_from_key("1&a&b") == ("ab", 1)


def test_bad_type_becomes_zero():
    assert channel_from_key("abc&room") == ("room", 0)


def test_to_key_rejects_out_of_range_type():
    with pytest.raises(ValueError):
        channel_to_key("room", 256)