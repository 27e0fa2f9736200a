from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

APP_NAME = "Amoled Maker"


def parse_black_point(text: str, current: int) -> int:
    """Разбирает порог из текстового поля.

    Пустая строка означает 0; всё, что не является десятичным целым 0..255
    из ASCII-цифр (пробелы и `_` тоже), игнорируется: возвращается текущее значение.
    """
    if not text:
        return 0
    if not re.fullmatch(r"\+?[0-9]+", text):
        return current
    value = int(text)
    if 0 <= value <= 255:
        return value
    return current


def window_title(path: Optional[str | Path]) -> str:
    if not path:
        return APP_NAME
    name = Path(path).name
    return f"{APP_NAME} - {name}" if name else APP_NAME


def format_size(size_bytes: Optional[int]) -> str:
    if size_bytes is None:
        return "—"
    size = float(size_bytes)
    for unit in ("Б", "КБ", "МБ"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "Б" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} ГБ"
