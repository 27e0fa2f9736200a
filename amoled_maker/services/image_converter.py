"""Конвертер изображения в AMOLED-вариант: исходник, миниатюра и их «зачернённые» копии.

Принципы:
- SRP: владеет четырьмя буферами и порогом; вычисления делегирует `ProcessService`.
- Чистый код: преобразованные буферы — кэш, всегда пересчитываемый из исходных.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from amoled_maker.models.image_model import ImageData
from amoled_maker.models.pixel_buffer import PixelBuffer, PixelStats
from amoled_maker.services.image_service import ImageService
from amoled_maker.services.process_service import ProcessService, check_black_point

logger = logging.getLogger(__name__)

_image_service = ImageService()
_process_service = ProcessService()


class ImageConverter:
    """Исходное изображение с миниатюрой и их версиями после порога.

    `original` и `thumbnail` не меняются после создания. `converted` и
    `converted_thumbnail` пересоздаются целиком при каждой смене порога.
    Проценты чёрных пикселей считаются по полноразмерным буферам.
    """

    def __init__(
        self,
        original: PixelBuffer,
        thumbnail: PixelBuffer,
        black_point: int,
        source: Optional[ImageData] = None,
    ) -> None:
        self._original = original
        self._thumbnail = thumbnail
        self._source = source
        self._original_stats = _process_service.count_black_pixels(original)
        self.set_black_point(black_point)

    # ---- Создание ----
    @classmethod
    def from_image(cls, image: Image.Image, black_point: int, source: Optional[ImageData] = None) -> "ImageConverter":
        """Строит конвертер из уже декодированного изображения PIL.

        Raises:
            ValueError: если у изображения нулевая ширина или высота либо порог вне 0..255.
        """
        black_point = check_black_point(black_point)
        width, height = image.size
        if width < 1 or height < 1:
            raise ValueError(f"Изображение нулевого размера: {width}x{height}")

        original = _process_service.to_bgra(image)
        thumbnail = _process_service.make_thumbnail(image)
        converter = cls(original, thumbnail, black_point, source=source)
        logger.info(
            "Конвертер %dx%d (миниатюра %dx%d), порог %d: %d%% чёрных",
            width, height, thumbnail.width, thumbnail.height,
            black_point, converter.converted_black_pixel_percentage,
        )
        return converter

    @classmethod
    def from_image_data(cls, image_data: ImageData, black_point: int) -> "ImageConverter":
        return cls.from_image(image_data.pil_image, black_point, source=image_data)

    @classmethod
    def from_path(cls, path: str | Path, black_point: int) -> "ImageConverter":
        """Декодирует файл и строит конвертер.

        Raises:
            DecodeError: если файл не удалось прочитать как изображение.
        """
        return cls.from_image_data(_image_service.load_image(path), black_point)

    @classmethod
    def from_bytes(cls, data: bytes, black_point: int) -> "ImageConverter":
        return cls.from_image_data(_image_service.load_image_bytes(data), black_point)

    # ---- Порог ----
    def set_black_point(self, black_point: int) -> None:
        """Пересчитывает оба преобразованных буфера с новым порогом.

        Работает от исходных буферов, поэтому результат не зависит от
        предыдущих значений порога.
        """
        black_point = check_black_point(black_point)
        converted = self._original.copy()
        converted_thumbnail = self._thumbnail.copy()
        converted_stats = _process_service.threshold(converted, black_point)
        thumbnail_stats = _process_service.threshold(converted_thumbnail, black_point)

        self._black_point = black_point
        self._converted = converted
        self._converted_thumbnail = converted_thumbnail
        self._converted_stats = converted_stats
        self._converted_thumbnail_stats = thumbnail_stats

    # ---- Свойства ----
    @property
    def black_point(self) -> int:
        return self._black_point

    @property
    def width(self) -> int:
        return self._original.width

    @property
    def height(self) -> int:
        return self._original.height

    @property
    def source(self) -> Optional[ImageData]:
        return self._source

    @property
    def original(self) -> PixelBuffer:
        return self._original

    @property
    def thumbnail(self) -> PixelBuffer:
        return self._thumbnail

    @property
    def converted(self) -> PixelBuffer:
        return self._converted

    @property
    def converted_thumbnail(self) -> PixelBuffer:
        return self._converted_thumbnail

    @property
    def original_stats(self) -> PixelStats:
        return self._original_stats

    @property
    def converted_stats(self) -> PixelStats:
        return self._converted_stats

    @property
    def converted_thumbnail_stats(self) -> PixelStats:
        return self._converted_thumbnail_stats

    @property
    def original_black_pixel_percentage(self) -> int:
        return self._original_stats.black_percentage

    @property
    def converted_black_pixel_percentage(self) -> int:
        return self._converted_stats.black_percentage

    # ---- Экспорт ----
    def as_rgba_bytes(self) -> bytes:
        """Полноразмерный результат в порядке (red, green, blue, alpha)."""
        return _process_service.to_rgba_bytes(self._converted)

    def as_rgba_image(self) -> Image.Image:
        return _process_service.to_rgba_image(self._converted)

    def thumbnail_image(self) -> Image.Image:
        return _process_service.to_rgba_image(self._thumbnail)

    def converted_thumbnail_image(self) -> Image.Image:
        return _process_service.to_rgba_image(self._converted_thumbnail)

    def save(self, path: str | Path) -> Path:
        """Сохраняет полноразмерный результат.

        Raises:
            EncodeError: если запись не удалась.
        """
        return _image_service.save_rgba(self.as_rgba_bytes(), self.width, self.height, path)
