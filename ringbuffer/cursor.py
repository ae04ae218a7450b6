"""Cursor algebra shared by ring buffer handles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorState:
    """Read-only snapshot of a handle's cursors."""

    start: int
    end: int
    capacity: int
    length: int

    def as_fields(self) -> dict[str, int]:
        return {
            "start": self.start,
            "end": self.end,
            "capacity": self.capacity,
            "length": self.length,
        }


def is_empty_sentinel(start: int, end: int) -> bool:
    """Return True for the ``start == 0 and end == 0`` empty state."""
    return start == 0 and end == 0


def occupied_count(start: int, end: int, capacity: int) -> int:
    """Return the number of live elements in the ``[start, end)`` window.

    ``start < end`` is the unwrapped regime and counts directly. Any other
    non-empty state has wrapped past slot 0, including ``start == end`` which
    is a full buffer.
    """
    if is_empty_sentinel(start, end):
        return 0
    if start < end:
        return end - start
    return capacity - start + end


def physical_slot_of(start: int, end: int, capacity: int, logical_idx: int) -> int | None:
    """Map a logical index (0 = oldest) to a storage slot, or None outside the live window."""
    if logical_idx < 0 or logical_idx >= capacity:
        return None
    if logical_idx >= occupied_count(start, end, capacity):
        return None
    return (start + logical_idx) % capacity


def cursor_state(start: int, end: int, capacity: int) -> CursorState:
    return CursorState(
        start=start,
        end=end,
        capacity=capacity,
        length=occupied_count(start, end, capacity),
    )


__all__ = [
    "CursorState",
    "cursor_state",
    "is_empty_sentinel",
    "occupied_count",
    "physical_slot_of",
]
