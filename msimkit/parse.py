"""Lenient number and boolean parsing: bad input yields zero values."""

from __future__ import annotations

import math
import re

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_DEC_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}


def _parse_signed(text: str, bits: int) -> int:
    if not _SIGNED.fullmatch(text):
        return 0
    lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return max(lo, min(hi, int(text)))


def _parse_unsigned(text: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        return 0
    return min((1 << bits) - 1, int(text))


def parse_int(text: str) -> int:
    """Decimal 64-bit integer; 0 if invalid, clamped if out of range."""
    return _parse_signed(text, 64)


def parse_int64(text: str) -> int:
    return _parse_signed(text, 64)


def parse_uint8(text: str) -> int:
    """Unsigned decimal in 0..255; 0 if invalid, 255 if too large."""
    return _parse_unsigned(text, 8)


def parse_uint32(text: str) -> int:
    return _parse_unsigned(text, 32)


def parse_uint64(text: str) -> int:
    return _parse_unsigned(text, 64)


def string_to_uint8(text: str) -> int:
    return _parse_unsigned(text, 8)


def parse_float64(text: str) -> float:
    """Decimal or hex float; 0.0 if invalid, infinite if out of range."""
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            return -math.inf if text.startswith("-") else math.inf
    if _DEC_FLOAT.fullmatch(text):
        return float(text)
    return 0.0


def parse_bool(text: str) -> bool:
    """True for 1, t, T, TRUE, true, True; False for anything else."""
    return text in _TRUE