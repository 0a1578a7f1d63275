"""General helpers: JSON, number bases, random strings and list utilities."""

from __future__ import annotations

import base64
import binascii
import json
import random
from decimal import Decimal
from typing import Any, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_JSON_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def bool_to_int(value: bool) -> int:
    """1 for a true value, 0 otherwise."""
    return int(bool(value))


def int_to_bool(value: int) -> bool:
    """True only for exactly 1."""
    return value == 1


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def to_json(obj: Any) -> str:
    """Compact JSON with sorted keys and HTML-safe escapes; ``""`` if not encodable."""
    try:
        text = json.dumps(
            obj,
            ensure_ascii=False,
            separators=(",", ":"),
            sort_keys=True,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError):
        return ""
    return text.translate(_JSON_ESCAPES)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def read_json(data: str | bytes) -> Any:
    """Decode the first JSON value in ``data``; floats become ``Decimal``.

    Anything after the first complete value is ignored.
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    text = data.lstrip(" \t\r\n")
    if not text:
        raise ValueError("unexpected end of JSON input")
    decoder = json.JSONDecoder(parse_float=Decimal, parse_constant=_reject_constant)
    value, _ = decoder.raw_decode(text)
    return value


def json_to_map(text: str | bytes) -> dict[str, Any]:
    """Decode a JSON object; ``null`` gives an empty dict, other values raise."""
    value = read_json(text)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode JSON {type(value).__name__} into a map")
    return value


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def decimal_to_any(num: int, base: int) -> str:
    """Write ``num`` in ``base`` using digits 0-9, a-z, A-Z; zero gives ``""``."""
    out: list[str] = []
    while num != 0:
        num, remainder = _trunc_divmod(num, base)
        out.append(_DIGITS[remainder] if 9 < remainder < 62 else str(remainder))
    return "".join(reversed(out))


def any_to_decimal(num: str, base: int) -> int:
    """Read ``num`` written in ``base``; stops at the first unknown character."""
    exponent = len(num) - 1
    total = 0
    for ch in num:
        digit = _DIGITS.find(ch)
        if digit == -1:
            break
        total += digit * base**exponent
        exponent -= 1
    return total


def random_string(length: int) -> str:
    """Random string of ``length`` characters from 0-9, a-z and A-Z."""
    return "".join(random.choices(_DIGITS, k=max(length, 0)))


def remove_repeated(items: Sequence[T]) -> list[T]:
    """Drop duplicates, keeping each value at the position of its last occurrence."""
    last = {item: i for i, item in enumerate(items)}
    return [item for i, item in enumerate(items) if last[item] == i]


def uints_to_strings(items: Iterable[int]) -> list[str]:
    return [str(v) for v in items]


def base64_decode(text: str | bytes) -> bytes:
    """Decode standard padded base64; line breaks are ignored."""
    if isinstance(text, str):
        text = text.encode("ascii", errors="strict")
    cleaned = bytes(text).replace(b"\r", b"").replace(b"\n", b"")
    try:
        return base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc


def array_contains(items: Iterable[Any], target: Any) -> bool:
    return target in items


def array_equal(items1: Sequence[Any], items2: Sequence[Any]) -> bool:
    """Same length and equal element by element."""
    return list(items1) == list(items2)


def remove_first(items: Sequence[Any], target: Any) -> list[Any]:
    """Copy of ``items`` without the first occurrence of ``target``."""
    result = list(items)
    if target in result:
        result.remove(target)
    return result