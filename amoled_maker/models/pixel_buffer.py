"""Пиксельный буфер BGRA и статистика по чёрным пикселям.

Принципы:
- SRP: только хранение пикселей и их инвариант (длина = ширина × высота × 4).
- Чистый код: буфер не меняет размер; заменяется целиком, копируется явно.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

CHANNELS = 4


def black_pixel_percentage(black_pixels: int, pixels: int) -> int:
    """Процент чёрных пикселей с отбрасыванием дробной части.

    Raises:
        ValueError: если `pixels` не положительно (пустое изображение).
    """
    if pixels <= 0:
        raise ValueError("Количество пикселей должно быть положительным")
    return black_pixels * 100 // pixels


@dataclass(frozen=True)
class PixelStats:
    """Результат прохода по буферу: всего пикселей и из них чёрных."""
    pixels: int
    black_pixels: int

    @property
    def black_percentage(self) -> int:
        return black_pixel_percentage(self.black_pixels, self.pixels)


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Плотный буфер 4-канальных пикселей в порядке (blue, green, red, alpha).

    Fields:
        pixels: массив `uint8` формы (height, width, 4).
    """
    pixels: np.ndarray

    def __post_init__(self) -> None:
        arr = self.pixels
        if not isinstance(arr, np.ndarray) or arr.dtype != np.uint8:
            raise ValueError("Ожидается numpy-массив uint8")
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"Ожидается форма (height, width, 4), получено {arr.shape}")
        if arr.shape[0] < 1 or arr.shape[1] < 1:
            raise ValueError("Ширина и высота должны быть положительными")

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        """Собирает буфер из сырых байтов BGRA."""
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise ValueError(f"Ожидается {expected} байт, получено {len(data)}")
        arr = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)
        return cls(arr.copy())

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return self.width * self.height * CHANNELS

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.pixels.copy())

    def as_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        b, g, r, a = (int(v) for v in self.pixels[y, x])
        return b, g, r, a
