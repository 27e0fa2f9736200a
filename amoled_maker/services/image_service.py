"""Загрузка и сохранение изображений через Pillow.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и извлечение свойств.
- OCP: источники (файл, байты) добавлены отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from amoled_maker.models.image_model import ImageData
from amoled_maker.services.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c полностью загруженным `PIL.Image.Image` в исходном режиме.

        Raises:
            DecodeError: если файл не существует, не читается или не является изображением.
        """
        path = Path(file_path)
        if not path.is_file():
            raise DecodeError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as src:
                src.load()
                pil_image = src.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"Файл не является изображением: {path}") from exc
        except OSError as exc:
            raise DecodeError(f"Не удалось прочитать {path}: {exc}") from exc

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.info("Загружено %s (%dx%d, %s)", path, pil_image.width, pil_image.height, pil_image.mode)
        return self._to_image_data(path, pil_image, size_bytes)

    def load_image_bytes(self, data: bytes) -> ImageData:
        """Декодирует изображение из байтового буфера в памяти.

        Raises:
            DecodeError: если байты не распознаны как изображение.
        """
        try:
            with Image.open(io.BytesIO(data)) as src:
                src.load()
                pil_image = src.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise DecodeError("Данные не являются изображением") from exc
        except OSError as exc:
            raise DecodeError(f"Не удалось декодировать данные: {exc}") from exc

        return self._to_image_data(None, pil_image, len(data))

    def save_rgba(self, data: bytes, width: int, height: int, file_path: str | Path) -> Path:
        """Кодирует RGBA-буфер и записывает его на диск.

        Формат определяется по расширению файла; без расширения используется PNG.

        Raises:
            EncodeError: если длина буфера не совпадает с размерами или запись не удалась.
        """
        path = Path(file_path)
        expected = width * height * 4
        if len(data) != expected:
            raise EncodeError(f"Ожидается {expected} байт RGBA, получено {len(data)}")

        image = Image.frombytes("RGBA", (width, height), bytes(data))
        fmt = None if path.suffix else "PNG"
        try:
            image.save(path, format=fmt)
        except (OSError, ValueError) as exc:
            raise EncodeError(f"Не удалось сохранить {path}: {exc}") from exc

        logger.info("Сохранено %s (%dx%d)", path, width, height)
        return path

    def _to_image_data(self, path: Optional[Path], pil_image: Image.Image, size_bytes: Optional[int]) -> ImageData:
        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )
