"""Fixed-layout date and time formatting and parsing."""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

_YYYYMMDD = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")
_YYYY_MM_DD = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def to_yyyy_mm_dd_hh_mm(tm: datetime) -> str:
    """``YYYY-MM-DD HH:MM``."""
    return f"{to_yyyy_mm_dd(tm)} {tm.hour:02d}:{tm.minute:02d}"


def to_yyyy_mm_dd_hh_mm_ss(tm: datetime) -> str:
    """``YYYY-MM-DD HH:MM:SS``."""
    return f"{to_yyyy_mm_dd_hh_mm(tm)}:{tm.second:02d}"


def to_yyyymm(tm: date) -> str:
    return f"{tm.year:04d}{tm.month:02d}"


def to_yyyymmdd(tm: date) -> str:
    return f"{tm.year:04d}{tm.month:02d}{tm.day:02d}"


def to_yyyy_mm_dd(tm: date) -> str:
    return f"{tm.year:04d}-{tm.month:02d}-{tm.day:02d}"


def to_yyyy_mm(tm: date) -> str:
    return f"{tm.year:04d}-{tm.month:02d}"


def _parse(pattern: re.Pattern[str], text: str, layout: str) -> datetime:
    match = pattern.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as {layout}")
    year, month, day = (int(g) for g in match.groups())
    return datetime(year, month, day, tzinfo=timezone.utc)


def parse_yyyymmdd(text: str) -> datetime:
    """Parse ``YYYYMMDD`` as midnight UTC."""
    return _parse(_YYYYMMDD, text, "YYYYMMDD")


def parse_yyyy_mm_dd(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` as midnight UTC."""
    return _parse(_YYYY_MM_DD, text, "YYYY-MM-DD")