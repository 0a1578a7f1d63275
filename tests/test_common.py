import json
from decimal import Decimal

import pytest

from msimkit.common import (
    any_to_decimal,
    array_contains,
    array_equal,
    base64_decode,
    bool_to_int,
    decimal_to_any,
    int_to_bool,
    json_to_map,
    random_string,
    read_json,
    remove_first,
    remove_repeated,
    to_json,
    uints_to_strings,
)


def test_bool_int_conversions():
    assert bool_to_int(True) == 1
    assert bool_to_int(False) == 0
    assert int_to_bool(1) is True
    assert int_to_bool(2) is False
    assert int_to_bool(0) is False


def test_to_json_compact_sorted():
    assert to_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_to_json_escapes_html():
    text = to_json("<a&b>")
    assert "<" not in text and ">" not in text and "&" not in text
    assert json.loads(text) == "<a&b>"


def test_to_json_unencodable_gives_empty():
    assert to_json({1, 2}) == ""
    assert to_json(float("nan")) == ""


def test_json_round_trip():
    data = {"name": "x", "items": [1, 2, 3], "nested": {"ok": True}}
    assert json_to_map(to_json(data)) == data


def test_json_floats_are_decimal():
    assert json_to_map('{"a": 1.5}')["a"] == Decimal("1.5")


def test_json_to_map_null_and_errors():
    assert json_to_map("null") == {}
    with pytest.raises(ValueError):
        json_to_map("[1, 2]")
    with pytest.raises(ValueError):
        json_to_map("{bad")
    with pytest.raises(ValueError):
        json_to_map("")


def test_read_json_ignores_trailing_data():
    assert read_json(b'  {"k": 1} trailing') == {"k": 1}


def test_read_json_rejects_nan():
    with pytest.raises(ValueError):
        read_json("NaN")


def test_decimal_to_any_hex():
    assert decimal_to_any(255, 16) == "ff"


def test_decimal_to_any_zero():
    assert decimal_to_any(0, 62) == ""


@pytest.mark.parametrize("num", [1, 61, 62, 12345, 987654321])
@pytest.mark.parametrize("base", [2, 16, 36, 62])
def test_base_round_trip(num, base):
    assert any_to_decimal(decimal_to_any(num, base), base) == num


def test_any_to_decimal_empty():
    assert any_to_decimal("", 16) == 0


def test_random_string():
    s = random_string(32)
    assert len(s) == 32
    assert s.isalnum() and s.isascii()
    assert random_string(0) == ""


def test_remove_repeated_keeps_last_occurrence():
    assert remove_repeated(["a", "b", "a"]) == ["b", "a"]
    assert remove_repeated([3, 3, 3]) == [3]


def test_uints_to_strings():
    assert uints_to_strings([1, 20, 300]) == ["1", "20", "300"]


def test_base64_decode():
    assert base64_decode("aGVsbG8=") == b"hello"
    with pytest.raises(ValueError):
        base64_decode("not base64!")


def test_array_helpers():
    assert array_contains(["a", "b"], "b") is True
    assert array_contains([], "b") is False
    assert array_equal(["a", "b"], ["a", "b"]) is True
    assert array_equal(["a", "b"], ["b", "a"]) is False
    assert array_equal(["a"], ["a", "b"]) is False


def test_remove_first():
    assert remove_first([1, 2, 1], 1) == [2, 1]
    assert remove_first([1, 2], 5) == [1, 2]