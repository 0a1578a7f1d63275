"""Channel identity keys of the form ``<type>&<id>``."""

from __future__ import annotations


def channel_to_key(channel_id: str, channel_type: int) -> str:
    """Join a channel type and id into a single key."""
    if not 0 <= channel_type <= 0xFF:
        raise ValueError(f"channel type {channel_type} out of range")
    return f"{channel_type}&{channel_id}"


def _uint8(text: str) -> int:
    try:
        return int(text) & 0xFF
    except ValueError:
        return 0


def channel_from_key(channel_key: str) -> tuple[str, int]:
    """Split a key into (channel id, channel type); ``("", 0)`` if it has no ``&``.

    Extra ``&`` separators inside the id are dropped.
    """
    parts = channel_key.split("&")
    if len(parts) < 2:
        return "", 0
    return "".join(parts[1:]), _uint8(parts[0])