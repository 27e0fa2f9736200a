import numpy as np
import pytest

from amoled_maker.models.pixel_buffer import PixelBuffer, PixelStats, black_pixel_percentage


def test_dimensions_and_length():
    buf = PixelBuffer(np.zeros((3, 5, 4), dtype=np.uint8))
    assert buf.width == 5
    assert buf.height == 3
    assert buf.size == (5, 3)
    assert len(buf) == 5 * 3 * 4
    assert len(buf.as_bytes()) == len(buf)


@pytest.mark.parametrize(
    "arr",
    [
        np.zeros((2, 2, 3), dtype=np.uint8),
        np.zeros((2, 2, 4), dtype=np.int32),
        np.zeros((4, 4), dtype=np.uint8),
        np.zeros((0, 2, 4), dtype=np.uint8),
        np.zeros((2, 0, 4), dtype=np.uint8),
    ],
)
def test_rejects_invalid_arrays(arr):
    with pytest.raises(ValueError):
        PixelBuffer(arr)


def test_from_bytes_round_trip_layout():
    data = bytes(range(16))
    buf = PixelBuffer.from_bytes(2, 2, data)
    assert buf.pixel(0, 0) == (0, 1, 2, 3)
    assert buf.pixel(1, 0) == (4, 5, 6, 7)
    assert buf.pixel(0, 1) == (8, 9, 10, 11)
    assert buf.as_bytes() == data


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        PixelBuffer.from_bytes(2, 2, bytes(15))


def test_copy_is_independent():
    buf = PixelBuffer(np.full((1, 1, 4), 9, dtype=np.uint8))
    clone = buf.copy()
    clone.pixels[0, 0, 0] = 0
    assert buf.pixel(0, 0) == (9, 9, 9, 9)


def test_black_pixel_percentage_truncates():
    assert black_pixel_percentage(1, 3) == 33
    assert black_pixel_percentage(2, 3) == 66
    assert black_pixel_percentage(0, 7) == 0
    assert black_pixel_percentage(7, 7) == 100


def test_black_pixel_percentage_rejects_empty():
    with pytest.raises(ValueError):
        black_pixel_percentage(0, 0)


def test_stats_percentage():
    assert PixelStats(pixels=2, black_pixels=1).black_percentage == 50
