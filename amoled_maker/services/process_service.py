"""Обработка пикселей: приведение к BGRA, миниатюры и пороговое «зачернение».

Принципы:
- SRP: только вычисления над пикселями, без хранения состояния и без UI.
- Чистый код: пороговый проход векторизован через numpy-маски.
"""
from __future__ import annotations

import logging
import operator
from typing import Tuple

import numpy as np
from PIL import Image

from amoled_maker.models.pixel_buffer import PixelBuffer, PixelStats, black_pixel_percentage

logger = logging.getLogger(__name__)

THUMBNAIL_MIN_WIDTH = 256
THUMBNAIL_MAX_WIDTH = 1024
THUMBNAIL_MIN_HEIGHT = 256
THUMBNAIL_MAX_HEIGHT = 1024

# BGRA <-> RGBA: перестановка симметрична
_SWAP_RB = [2, 1, 0, 3]


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def to_rgba8(image: Image.Image) -> Image.Image:
    """Приводит изображение любого режима к RGBA с 8 битами на канал.

    Целые оттенки серого (`I;16`, `I`) считаются 16-битными и сдвигаются на
    8 бит вниз, `F` считается долей яркости 0..1. Остальные режимы конвертирует Pillow.
    """
    mode = image.mode
    if mode == "I" or mode.startswith("I;16"):
        arr = np.clip(np.asarray(image).astype(np.int64), 0, 0xFFFF) >> 8
        image = Image.fromarray(arr.astype(np.uint8))
    elif mode == "F":
        arr = np.rint(np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0) * 255.0)
        image = Image.fromarray(arr.astype(np.uint8))
    return image if image.mode == "RGBA" else image.convert("RGBA")


def check_black_point(black_point: int) -> int:
    """Проверяет, что порог — целое в диапазоне 0..255, и возвращает его как `int`."""
    try:
        value = operator.index(black_point)
    except TypeError as exc:
        raise ValueError(f"Порог должен быть целым числом, получено {black_point!r}") from exc
    if not 0 <= value <= 255:
        raise ValueError(f"Порог должен быть в диапазоне 0..255, получено {value}")
    return value


class ProcessService:
    # ---------- Приведение форматов ----------
    def to_bgra(self, image: Image.Image) -> PixelBuffer:
        """
        Переводит изображение любого режима PIL в буфер BGRA (8 бит на канал).
        Альфа-канал сохраняется; изображения без альфы считаются непрозрачными.
        """
        rgba = to_rgba8(image)
        arr = np.asarray(rgba, dtype=np.uint8)
        return PixelBuffer(np.ascontiguousarray(arr[..., _SWAP_RB]))

    def to_rgba_bytes(self, buffer: PixelBuffer) -> bytes:
        """Байты в стандартном порядке (red, green, blue, alpha) для сохранения."""
        return np.ascontiguousarray(buffer.pixels[..., _SWAP_RB]).tobytes()

    def to_rgba_image(self, buffer: PixelBuffer) -> Image.Image:
        """Изображение PIL в режиме RGBA (для показа и сохранения)."""
        return Image.fromarray(np.ascontiguousarray(buffer.pixels[..., _SWAP_RB]))

    # ---------- Миниатюра ----------
    def thumbnail_size(self, width: int, height: int) -> Tuple[int, int]:
        """
        Размер миниатюры: половина исходного размера, зажатая в [256, 1024]
        по каждой оси независимо, но не больше исходного (без увеличения).
        """
        thumb_w = min(width, clamp(width // 2, THUMBNAIL_MIN_WIDTH, THUMBNAIL_MAX_WIDTH))
        thumb_h = min(height, clamp(height // 2, THUMBNAIL_MIN_HEIGHT, THUMBNAIL_MAX_HEIGHT))
        return thumb_w, thumb_h

    def make_thumbnail(self, image: Image.Image) -> PixelBuffer:
        rgba = to_rgba8(image)
        size = self.thumbnail_size(*rgba.size)
        if size != rgba.size:
            rgba = rgba.resize(size, Image.Resampling.LANCZOS)
        return self.to_bgra(rgba)

    # ---------- Порог ----------
    def threshold(self, buffer: PixelBuffer, black_point: int) -> PixelStats:
        """
        Зачернение: пиксель, у которого blue, green и red не превышают порог,
        становится (0, 0, 0) с прежней альфой. Остальные пиксели не меняются.
        Буфер изменяется на месте; возвращается статистика прохода.
        """
        t = check_black_point(black_point)
        arr = buffer.pixels
        mask = (arr[..., 0] <= t) & (arr[..., 1] <= t) & (arr[..., 2] <= t)
        arr[mask, :3] = 0
        stats = PixelStats(pixels=buffer.width * buffer.height, black_pixels=int(np.count_nonzero(mask)))
        logger.debug(
            "Порог %d: %d из %d пикселей чёрные (%dx%d)",
            t, stats.black_pixels, stats.pixels, buffer.width, buffer.height,
        )
        return stats

    def count_black_pixels(self, buffer: PixelBuffer) -> PixelStats:
        """Считает пиксели ровно (0, 0, 0) без изменения буфера."""
        arr = buffer.pixels
        black = np.count_nonzero(~arr[..., :3].any(axis=-1))
        return PixelStats(pixels=buffer.width * buffer.height, black_pixels=int(black))

    def black_pixel_percentage(self, black_pixels: int, pixels: int) -> int:
        return black_pixel_percentage(black_pixels, pixels)
