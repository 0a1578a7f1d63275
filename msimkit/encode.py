"""Binary serialisation of Python values for trusted, local round trips."""

from __future__ import annotations

import pickle
from typing import Any

_DECODE_ERRORS = (
    pickle.UnpicklingError,
    EOFError,
    ValueError,
    TypeError,
    AttributeError,
    ImportError,
    IndexError,
    KeyError,
)


def encode_to_bytes(data: Any) -> bytes:
    """Serialise ``data``; raises ValueError if it cannot be encoded."""
    try:
        return pickle.dumps(data, protocol=pickle.HIGHEST_PROTOCOL)
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise ValueError(f"cannot encode value: {exc}") from exc


def decode_from_bytes(data: bytes) -> Any:
    """Restore a value written by :func:`encode_to_bytes`; only use on trusted data."""
    try:
        return pickle.loads(bytes(data))
    except _DECODE_ERRORS as exc:
        raise ValueError(f"cannot decode value: {exc}") from exc