"""Ring buffer exception types."""

from __future__ import annotations


class RingBufferError(Exception):
    """Base class for ring buffer failures."""


class InvalidCapacityError(RingBufferError, ValueError):
    """Raised when a buffer is constructed with a non-positive capacity."""


class HandleConsumedError(RingBufferError, RuntimeError):
    """Raised when a handle is used after ownership moved out of it."""

    def __init__(self, handle: str, operation: str) -> None:
        super().__init__(f"{handle} handle was consumed; cannot call {operation}()")
        self.handle = handle
        self.operation = operation


__all__ = [
    "HandleConsumedError",
    "InvalidCapacityError",
    "RingBufferError",
]
