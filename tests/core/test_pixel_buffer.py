import numpy as np
import pytest

from photofilter.core.pixel_buffer import BufferLifecycle, BufferState, PixelBuffer
from photofilter.errors import LifecycleError, PhotoFilterError


def test_allocate_and_dimensions() -> None:
    buffer = PixelBuffer.allocate(3, 2)
    assert buffer.size == (3, 2)
    assert buffer.pixels.shape == (2, 3, 4)
    assert buffer.state is BufferState.LIVE


def test_filled_buffer_pixels() -> None:
    buffer = PixelBuffer.filled(2, 2, (1, 2, 3, 4))
    assert buffer.pixel(1, 1) == (1, 2, 3, 4)


def test_rejects_malformed_arrays() -> None:
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 4), dtype=np.float32))
    with pytest.raises(ValueError):
        PixelBuffer.allocate(-1, 2)


def test_dispose_is_idempotent() -> None:
    buffer = PixelBuffer.allocate(1, 1)
    buffer.dispose()
    buffer.dispose()
    assert buffer.is_disposed
    assert buffer.state is BufferState.DISPOSED


def test_use_after_dispose_raises() -> None:
    buffer = PixelBuffer.allocate(1, 1)
    buffer.dispose()
    with pytest.raises(LifecycleError):
        _ = buffer.pixels
    with pytest.raises(LifecycleError):
        buffer.pixel(0, 0)


def test_lifecycle_error_is_not_recoverable_error() -> None:
    assert issubclass(LifecycleError, AssertionError)
    assert not issubclass(LifecycleError, PhotoFilterError)


def test_lifecycle_releases_exactly_once() -> None:
    buffer = PixelBuffer.allocate(1, 1)
    with BufferLifecycle() as buffers:
        buffers.track(buffer)
        buffers.track(buffer)
        assert buffers.pending == 1
        buffers.release(buffer)
        buffers.release(buffer)
        assert buffers.released == 1
        assert buffers.pending == 0
    assert buffer.is_disposed


def test_lifecycle_disposes_pending_buffers_on_exit() -> None:
    first = PixelBuffer.allocate(1, 1)
    second = PixelBuffer.allocate(1, 1)
    with pytest.raises(RuntimeError):
        with BufferLifecycle() as buffers:
            buffers.track(first)
            buffers.track(second)
            raise RuntimeError("boom")
    assert first.is_disposed
    assert second.is_disposed


def test_hand_off_transfers_ownership() -> None:
    buffer = PixelBuffer.allocate(2, 2)
    with BufferLifecycle() as buffers:
        buffers.track(buffer)
        result = buffers.hand_off(buffer)
    assert result is buffer
    assert not buffer.is_disposed


def test_cannot_track_or_hand_off_disposed_buffer() -> None:
    buffer = PixelBuffer.allocate(1, 1)
    buffer.dispose()
    buffers = BufferLifecycle()
    with pytest.raises(LifecycleError):
        buffers.track(buffer)
    with pytest.raises(LifecycleError):
        buffers.hand_off(buffer)
