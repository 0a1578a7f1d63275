"""Bitmap of hash slots with range formatting."""

from __future__ import annotations

import zlib


def _byte_count(slot_num: int) -> int:
    return (slot_num + 7) // 8


def _atoi(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _format_range(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


class SlotBitMap:
    """One bit per slot; slot ``n`` lives in byte ``n // 8`` at bit ``n % 8``."""

    def __init__(self, slot_num: int) -> None:
        self.slot_num = slot_num
        self.bits = bytearray(_byte_count(slot_num))

    @classmethod
    def from_bits(cls, bits) -> "SlotBitMap":
        """Wrap existing bitmap bytes; the slot count is left at zero."""
        bm = cls(0)
        bm.bits = bytearray(bits)
        return bm

    @classmethod
    def from_format(cls, format_str: str, slot_count: int) -> "SlotBitMap":
        """Build from text such as ``"0-3,7,9-10"``; unparsable numbers count as 0."""
        bm = cls(slot_count)
        if not format_str:
            return bm
        for part in format_str.split(","):
            if "-" in part:
                bounds = part.split("-")
                bm.set_slot_for_range(_atoi(bounds[0]), _atoi(bounds[1]), True)
            else:
                bm.set_slot(_atoi(part), True)
        return bm

    def _locate(self, num: int) -> tuple[int, int]:
        if num < 0:
            raise IndexError(f"slot {num} out of range")
        return num // 8, num % 8

    def set_slot(self, num: int, value: bool) -> None:
        index, pos = self._locate(num)
        if value:
            self.bits[index] |= 1 << pos
        else:
            self.bits[index] &= ~(1 << pos) & 0xFF

    def set_slot_for_range(self, start: int, end: int, value: bool) -> None:
        """Set every slot from ``start`` to ``end`` inclusive."""
        for num in range(start, end + 1):
            self.set_slot(num, value)

    def get_slot(self, num: int) -> bool:
        index, pos = self._locate(num)
        return bool(self.bits[index] & (1 << pos))

    def reset(self) -> None:
        """Clear all slots."""
        self.bits = bytearray(_byte_count(self.slot_num))

    def valid_slot_num(self) -> int:
        """Number of set slots."""
        return sum(bin(b).count("1") for b in self.bits)

    def valid_slots(self) -> list[int]:
        """Set slots in ascending order."""
        return [
            i * 8 + j
            for i, b in enumerate(self.bits)
            for j in range(8)
            if (b >> j) & 1
        ]

    def export_slots(self, num: int) -> bytes:
        """Move the ``num`` highest set slots out of this bitmap and return them as bits."""
        exported = bytearray(len(self.bits))
        remaining = num
        for i in reversed(range(len(self.bits))):
            if remaining <= 0:
                break
            b = self.bits[i]
            eb = exported[i]
            for j in reversed(range(8)):
                if remaining <= 0:
                    break
                if (b >> j) & 1:
                    eb |= 1 << j
                    b &= ~(1 << j) & 0xFF
                    remaining -= 1
            self.bits[i] = b
            exported[i] = eb
        return bytes(exported)

    def clean_slots(self, slots) -> None:
        """Clear the bits set in ``slots``, aligning both byte strings at their ends."""
        for k in range(1, min(len(self.bits), len(slots)) + 1):
            self.bits[-k] &= ~slots[-k] & 0xFF

    def merge_slots(self, *args) -> None:
        """OR each given byte string into this bitmap, aligned at the start."""
        for other in args:
            for i, v in enumerate(other[: len(self.bits)]):
                self.bits[i] |= v

    def format_slots(self) -> str:
        """Describe set slots as comma-separated runs, e.g. ``"0-3,7"``.

        At least two set slots are needed to produce any output.
        """
        slots = self.valid_slots()
        if not slots:
            return ""
        parts: list[str] = []
        start = slots[0]
        pairs = list(zip(slots, slots[1:]))
        for k, (prev, cur) in enumerate(pairs):
            if cur - prev != 1:
                parts.append(_format_range(start, prev))
                start = cur
            if k == len(pairs) - 1:
                parts.append(_format_range(start, cur))
        return ",".join(parts)


def slots_contains(bits, subset) -> bool:
    """True if every bit set in ``subset`` is also set in ``bits``."""
    if len(bits) < len(subset):
        return False
    if len(subset) < len(bits):
        raise ValueError("subset is shorter than the bitmap")
    return all(s & ~b & 0xFF == 0 for b, s in zip(bits, subset))


def get_slot_num(slot_count: int, value: str) -> int:
    """Slot for ``value``: its IEEE CRC-32 modulo ``slot_count``."""
    return (zlib.crc32(value.encode("utf-8")) & 0xFFFFFFFF) % slot_count


def get_slot_fill_format(slot: int, slot_count: int) -> str:
    """Zero-pad ``slot`` to the width implied by ``slot_count``."""
    if slot_count < 100:
        return f"{slot:02d}"
    if slot_count < 1000:
        return f"{slot:03d}"
    if slot_count < 10000:
        return f"{slot:04d}"
    raise ValueError(f"slotCount too large {slot_count}")