from __future__ import annotations

from ringbuffer import HandleConsumedError, InvalidCapacityError, RingBufferError


def test_error_hierarchy_keeps_builtin_bases() -> None:
    assert issubclass(InvalidCapacityError, RingBufferError)
    assert issubclass(InvalidCapacityError, ValueError)
    assert issubclass(HandleConsumedError, RingBufferError)
    assert issubclass(HandleConsumedError, RuntimeError)


def test_handle_consumed_error_names_handle_and_operation() -> None:
    err = HandleConsumedError("RingBuffer", "push")

    assert err.handle == "RingBuffer"
    assert err.operation == "push"
    assert str(err) == "RingBuffer handle was consumed; cannot call push()"
