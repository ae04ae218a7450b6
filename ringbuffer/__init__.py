"""Fixed-capacity ring buffer with frozen read-only views."""

from ringbuffer.buffer import RingBuffer
from ringbuffer.config import RingBufferConfig, load_ringbuffer_config
from ringbuffer.cursor import CursorState, occupied_count, physical_slot_of
from ringbuffer.errors import HandleConsumedError, InvalidCapacityError, RingBufferError
from ringbuffer.logging import (
    JsonFormatter,
    TextFormatter,
    get_ringbuffer_logger,
    setup_ringbuffer_logging,
)
from ringbuffer.view import RingBufferView, freeze, thaw

__all__ = [
    "CursorState",
    "HandleConsumedError",
    "InvalidCapacityError",
    "JsonFormatter",
    "RingBuffer",
    "RingBufferConfig",
    "RingBufferError",
    "RingBufferView",
    "TextFormatter",
    "freeze",
    "get_ringbuffer_logger",
    "load_ringbuffer_config",
    "occupied_count",
    "physical_slot_of",
    "setup_ringbuffer_logging",
    "thaw",
]
