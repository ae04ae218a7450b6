"""Fixed-capacity ring buffer with overwrite-oldest eviction."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ringbuffer.config import RingBufferConfig, load_ringbuffer_config
from ringbuffer.cursor import CursorState, cursor_state, is_empty_sentinel, occupied_count
from ringbuffer.errors import HandleConsumedError, InvalidCapacityError
from ringbuffer.logging import get_ringbuffer_logger

if TYPE_CHECKING:
    from ringbuffer.view import RingBufferView

_LOG = get_ringbuffer_logger("buffer")


class RingBuffer[T]:
    """Drop-oldest ring buffer with O(1) push that hands evicted values back.

    ``start`` and ``end`` bound the live window. ``start == 0`` means the
    window has not wrapped and ``end`` counts filled slots; once the buffer
    is full the next push moves both cursors into the wrapped regime where
    ``start == end`` and both advance together. ``start == 0 and end == 0``
    is the empty state.
    """

    __slots__ = ("_storage", "_start", "_end", "_capacity", "_trace", "_live")

    def __init__(self, capacity: int, *, trace: bool = False) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            _LOG.warning("ring_buffer_invalid_capacity capacity=%r", capacity)
            raise InvalidCapacityError("capacity must be > 0")
        self._capacity = capacity
        self._storage: list[T | None] = [None] * capacity
        self._start = 0
        self._end = 0
        self._trace = bool(trace)
        self._live = True

    @classmethod
    def from_config(cls, config: RingBufferConfig | None = None) -> RingBuffer[T]:
        """Build a buffer sized and traced according to ``config`` (env when omitted)."""
        resolved = config if config is not None else load_ringbuffer_config()
        return cls(resolved.default_capacity, trace=resolved.trace_enabled)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        self._ensure_live("len")
        return occupied_count(self._start, self._end, self._capacity)

    def is_empty(self) -> bool:
        self._ensure_live("is_empty")
        return is_empty_sentinel(self._start, self._end)

    def is_full(self) -> bool:
        return len(self) == self._capacity

    def cursor_state(self) -> CursorState:
        self._ensure_live("cursor_state")
        return cursor_state(self._start, self._end, self._capacity)

    def peek_first[R](self, projection: Callable[[T], R]) -> R | None:
        """Project the oldest live element, or return None when empty."""
        self._ensure_live("peek_first")
        if is_empty_sentinel(self._start, self._end):
            return None
        return projection(self._slot(self._start))

    def peek_last[R](self, projection: Callable[[T], R]) -> R | None:
        """Project the newest live element, or return None when empty."""
        self._ensure_live("peek_last")
        if is_empty_sentinel(self._start, self._end):
            return None
        return projection(self._slot(self._end - 1))

    def push(self, value: T) -> T | None:
        """Insert ``value`` as the newest element and return the evicted oldest, if any."""
        self._ensure_live("push")
        if self._start == 0:
            if self._end >= self._capacity:
                evicted = self._swap(0, value)
                # A single slot never wraps: (0, 1) stays the full state.
                if self._capacity > 1:
                    self._start = 1
                    self._end = 1
                    _LOG.debug("ring_buffer_wrapped capacity=%d", self._capacity)
                return evicted
            self._storage[self._end] = value
            self._end += 1
            return None
        if self._start == self._end:
            evicted = self._swap(self._end, value)
            self._end += 1
            if self._end < self._capacity:
                self._start = self._end
            else:
                self._start = 0
            return evicted
        self._storage[self._end] = value
        self._end += 1
        return None

    def freeze(self) -> RingBufferView[T]:
        from ringbuffer.view import freeze

        return freeze(self)

    def __repr__(self) -> str:
        if not self._live:
            return f"RingBuffer(capacity={self._capacity}, consumed)"
        return f"RingBuffer(capacity={self._capacity}, len={len(self)})"

    def _slot(self, index: int) -> T:
        # Live slots always hold a pushed value; None here is a caller's own None.
        return self._storage[index]  # type: ignore[return-value]

    def _swap(self, index: int, value: T) -> T:
        evicted = self._slot(index)
        self._storage[index] = value
        if self._trace:
            _LOG.debug("ring_buffer_evicted slot=%d capacity=%d", index, self._capacity)
        return evicted

    def _ensure_live(self, operation: str) -> None:
        if not self._live:
            raise HandleConsumedError("RingBuffer", operation)

    def _release(self) -> tuple[list[T | None], int, int, int, bool]:
        """Move storage and cursors out of this handle and invalidate it."""
        self._ensure_live("freeze")
        moved = (self._storage, self._start, self._end, self._capacity, self._trace)
        self._storage = []
        self._start = 0
        self._end = 0
        self._live = False
        return moved

    @classmethod
    def _adopt(
        cls,
        storage: list[T | None],
        start: int,
        end: int,
        capacity: int,
        trace: bool,
    ) -> RingBuffer[T]:
        """Build a live handle around storage moved out of another handle."""
        buffer: RingBuffer[T] = cls.__new__(cls)
        buffer._storage = storage
        buffer._start = start
        buffer._end = end
        buffer._capacity = capacity
        buffer._trace = trace
        buffer._live = True
        return buffer


__all__ = ["RingBuffer"]
