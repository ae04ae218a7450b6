"""Read-only frozen view over a ring buffer."""

from __future__ import annotations

from ringbuffer.buffer import RingBuffer
from ringbuffer.cursor import CursorState, cursor_state, occupied_count, physical_slot_of
from ringbuffer.errors import HandleConsumedError
from ringbuffer.logging import get_ringbuffer_logger

_LOG = get_ringbuffer_logger("view")


class RingBufferView[T]:
    """Exclusive read-only owner of a buffer's storage, indexed by logical position.

    Values returned by ``at`` are the stored objects themselves. They must not
    be relied on after ``thaw``, since the thawed buffer may overwrite their
    slots.
    """

    __slots__ = ("_buffer", "_live")

    def __init__(self, buffer: RingBuffer[T]) -> None:
        self._buffer = buffer
        self._live = True

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def __len__(self) -> int:
        self._ensure_live("len")
        buffer = self._buffer
        return occupied_count(buffer._start, buffer._end, buffer._capacity)

    def at(self, idx: int) -> T | None:
        """Return the ``idx``-th oldest live element, or None outside the live window."""
        self._ensure_live("at")
        buffer = self._buffer
        slot = physical_slot_of(buffer._start, buffer._end, buffer._capacity, idx)
        if slot is None:
            return None
        return buffer._slot(slot)

    def cursor_state(self) -> CursorState:
        self._ensure_live("cursor_state")
        buffer = self._buffer
        return cursor_state(buffer._start, buffer._end, buffer._capacity)

    def thaw(self) -> RingBuffer[T]:
        return thaw(self)

    def __repr__(self) -> str:
        if not self._live:
            return f"RingBufferView(capacity={self.capacity}, consumed)"
        return f"RingBufferView(capacity={self.capacity}, len={len(self)})"

    def _ensure_live(self, operation: str) -> None:
        if not self._live:
            raise HandleConsumedError("RingBufferView", operation)


def freeze[T](buffer: RingBuffer[T]) -> RingBufferView[T]:
    """Move ``buffer`` into a read-only view; the passed handle becomes unusable."""
    storage, start, end, capacity, trace = buffer._release()
    view = RingBufferView(type(buffer)._adopt(storage, start, end, capacity, trace))
    _LOG.debug("ring_buffer_frozen", extra=cursor_state(start, end, capacity).as_fields())
    return view


def thaw[T](view: RingBufferView[T]) -> RingBuffer[T]:
    """Move the view's buffer back out as a mutable handle; the view becomes unusable."""
    view._ensure_live("thaw")
    inner = view._buffer
    storage, start, end, capacity, trace = inner._release()
    view._live = False
    buffer = type(inner)._adopt(storage, start, end, capacity, trace)
    _LOG.debug("ring_buffer_thawed", extra=cursor_state(start, end, capacity).as_fields())
    return buffer


__all__ = ["RingBufferView", "freeze", "thaw"]
