import math

import pytest

from msimkit.parse import (
    parse_bool,
    parse_float64,
    parse_int,
    parse_int64,
    parse_uint8,
    parse_uint32,
    parse_uint64,
    string_to_uint8,
)


@pytest.mark.parametrize("text,expected", [("42", 42), ("-7", -7), ("+5", 5), ("0", 0)])
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected
    assert parse_int64(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.5", " 1", "1_000", "0x10"])
def test_parse_int_invalid_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_clamps():
    assert parse_int("99999999999999999999") == 2**63 - 1
    assert parse_int64("-99999999999999999999") == -(2**63)


def test_parse_uint8():
    assert parse_uint8("200") == 200
    assert parse_uint8("300") == 255
    assert parse_uint8("-1") == 0
    assert string_to_uint8("300") == 255
    assert string_to_uint8("x") == 0


def test_parse_uint32_and_uint64():
    assert parse_uint32("99999999999") == 2**32 - 1
    assert parse_uint32("123") == 123
    assert parse_uint64("18446744073709551615") == 2**64 - 1
    assert parse_uint64("+1") == 0


def test_parse_float64():
    assert parse_float64("1.5") == 1.5
    assert parse_float64("-2e3") == -2000.0
    assert parse_float64("bad") == 0.0
    assert parse_float64("") == 0.0
    assert parse_float64("0x1p-2") == 0.25


def test_parse_float64_out_of_range_is_infinite():
    assert math.isinf(parse_float64("1e400"))
    assert parse_float64("-1e400") < 0


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["", "0", "f", "false", "yes", "tRUE"])
def test_parse_bool_false(text):
    assert parse_bool(text) is False