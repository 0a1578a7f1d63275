from datetime import datetime, timezone

import pytest

from msimkit.timefmt import (
    parse_yyyy_mm_dd,
    parse_yyyymmdd,
    to_yyyy_mm,
    to_yyyy_mm_dd,
    to_yyyy_mm_dd_hh_mm,
    to_yyyy_mm_dd_hh_mm_ss,
    to_yyyymm,
    to_yyyymmdd,
)

SAMPLE = datetime(2023, 5, 7, 8, 9, 10)


def test_formats():
    assert to_yyyy_mm_dd_hh_mm(SAMPLE) == "2023-05-07 08:09"
    assert to_yyyy_mm_dd_hh_mm_ss(SAMPLE) == "2023-05-07 08:09:10"
    assert to_yyyymm(SAMPLE) == "202305"


def test_date_forms_are_consistent():
    assert to_yyyymmdd(SAMPLE) == to_yyyy_mm_dd(SAMPLE).replace("-", "")
    assert to_yyyy_mm(SAMPLE) == to_yyyy_mm_dd(SAMPLE)[:7]
    assert to_yyyy_mm_dd_hh_mm_ss(SAMPLE).startswith(to_yyyy_mm_dd_hh_mm(SAMPLE))


def test_parse_yyyymmdd_round_trip():
    parsed = parse_yyyymmdd(to_yyyymmdd(SAMPLE))
    assert parsed == datetime(SAMPLE.year, SAMPLE.month, SAMPLE.day, tzinfo=timezone.utc)


def test_parse_yyyy_mm_dd_round_trip():
    parsed = parse_yyyy_mm_dd(to_yyyy_mm_dd(SAMPLE))
    assert to_yyyy_mm_dd(parsed) == to_yyyy_mm_dd(SAMPLE)
    assert parsed.tzinfo == timezone.utc


@pytest.mark.parametrize("text", ["2023-5-07", "2023050", "20230230", "2023-05-07", ""])
def test_parse_yyyymmdd_errors(text):
    with pytest.raises(ValueError):
        parse_yyyymmdd(text)


@pytest.mark.parametrize("text", ["20230507", "2023-5-7", "2023-13-01", "2023-02-30"])
def test_parse_yyyy_mm_dd_errors(text):
    with pytest.raises(ValueError):
        parse_yyyy_mm_dd(text)