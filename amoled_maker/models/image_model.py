"""Модели данных для исходных изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Декодированное изображение и его метаданные.

    Fields:
        path: Путь к исходному файлу (None для изображения из памяти).
        pil_image: Загруженное изображение PIL в исходном режиме.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB" или "RGBA".
        size_bytes: Размер исходных данных, если известен.
    """
    path: Optional[Path]
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
