from __future__ import annotations

from collections import deque

import pytest

from ringbuffer import RingBuffer, freeze, thaw


def test_ring_buffer_stress_push_and_view_order() -> None:
    capacity = 1024
    total = 50_000
    buffer = RingBuffer[int](capacity)
    for i in range(total):
        evicted = buffer.push(i)
        assert evicted == (i - capacity if i >= capacity else None)

    view = freeze(buffer)
    assert len(view) == capacity
    assert view.at(0) == total - capacity
    assert view.at(capacity - 1) == total - 1


@pytest.mark.parametrize("capacity", [1, 2, 3, 4, 7])
def test_ring_buffer_matches_bounded_deque(capacity: int) -> None:
    buffer = RingBuffer[int](capacity)
    model: deque[int] = deque(maxlen=capacity)
    for value in range(4 * capacity + 3):
        expected_evicted = model[0] if len(model) == capacity else None
        model.append(value)

        assert buffer.push(value) == expected_evicted
        assert len(buffer) == len(model)
        assert buffer.peek_first(lambda item: item) == model[0]
        assert buffer.peek_last(lambda item: item) == model[-1]

        view = freeze(buffer)
        assert [view.at(idx) for idx in range(capacity + 1)] == [*model, *[None] * (capacity + 1 - len(model))]
        buffer = thaw(view)
