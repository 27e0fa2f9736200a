"""Настройки приложения."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class AppConfig:
    """Параметры окна, порога по умолчанию и журналирования.

    Fields:
        title: Заголовок окна без открытого файла.
        min_size: Минимальный размер окна (ширина, высота).
        appearance_mode: Режим оформления customtkinter: "system" | "dark" | "light".
        color_theme: Цветовая тема customtkinter.
        default_black_point: Порог при запуске (0..255).
        log_dir: Каталог файлов журнала.
        log_level: Уровень консольного журнала.
    """
    title: str = "Amoled Maker"
    min_size: Tuple[int, int] = (600, 400)
    appearance_mode: str = "dark"
    color_theme: str = "blue"
    default_black_point: int = 0
    log_dir: Path = field(default_factory=lambda: Path("./logs"))
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        if not 0 <= self.default_black_point <= 255:
            raise ValueError(f"default_black_point вне диапазона 0..255: {self.default_black_point}")
