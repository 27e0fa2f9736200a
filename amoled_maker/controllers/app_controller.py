"""Контроллер приложения: оркестрация UI и конвертера.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки пикселей).
- DIP: панели UI используются только через их публичные методы `set_*`/`on_*`.
Clean Code:
- Обработчики компактны; вычисления вынесены в `ImageConverter`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from tkinter import filedialog, TclError
from typing import Optional

import customtkinter as ctk

from amoled_maker.services.errors import AmoledConversionError
from amoled_maker.services.image_converter import ImageConverter
from amoled_maker.ui.control_bar import ControlBar
from amoled_maker.ui.preview_pane import PreviewPane
from amoled_maker.ui.sidebar import Sidebar
from amoled_maker.utils import parse_black_point, window_title

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с конвертером.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Создание/замена `ImageConverter` при открытии файла.
    - Пересчёт при смене порога и обновление обеих панелей предпросмотра.
    - Сохранение полноразмерного результата.
    """
    control_bar: ControlBar
    before_pane: PreviewPane
    after_pane: PreviewPane
    sidebar: Sidebar
    window: ctk.CTk

    black_point: int = 0
    _converter: Optional[ImageConverter] = None
    _path: Optional[Path] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.control_bar.on_open_file = self._handle_open_file
        self.control_bar.on_path_submit = self.open_path
        self.control_bar.on_black_point_change = self.set_black_point
        self.control_bar.on_black_point_text = self._handle_black_point_text
        self.sidebar.on_save_file = self._handle_save_file
        self.control_bar.set_black_point(self.black_point)

    @property
    def converter(self) -> Optional[ImageConverter]:
        return self._converter

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("image", "*.png *.jpg *.jpeg"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return
        self.control_bar.set_path(file_path)
        self.open_path(file_path)

    def _handle_black_point_text(self, text: str) -> None:
        value = parse_black_point(text, self.black_point)
        self.control_bar.set_black_point(value)
        if value != self.black_point:
            self.set_black_point(value)

    def _handle_save_file(self) -> None:
        if self._converter is None:
            return
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить изображение",
                defaultextension=".png",
                filetypes=(("png", "*.png"),),
            )
        except TclError:
            return

        if not file_path:
            return
        self.save_to(file_path)

    # ---- Operations ----
    def open_path(self, file_path: str | Path) -> None:
        """Открывает файл и заменяет текущий конвертер целиком.

        При ошибке декодирования текущее изображение сбрасывается.
        """
        path = Path(file_path)
        self._path = path
        logger.info("Открытие %s с порогом %d", path, self.black_point)
        try:
            converter = ImageConverter.from_path(path, self.black_point)
        except AmoledConversionError as exc:
            logger.exception("Не удалось открыть %s", path)
            self._converter = None
            self.sidebar.set_status(str(exc))
            self._refresh()
            return

        self._converter = converter
        self.sidebar.set_status("")
        self._refresh()

    def set_black_point(self, black_point: int) -> None:
        if black_point == self.black_point:
            return
        self.black_point = black_point
        if self._converter is not None:
            self._converter.set_black_point(black_point)
            self._refresh_panes()

    def save_to(self, file_path: str | Path) -> Optional[Path]:
        if self._converter is None:
            return None
        try:
            saved = self._converter.save(file_path)
        except AmoledConversionError as exc:
            logger.exception("Не удалось сохранить %s", file_path)
            self.sidebar.set_status(str(exc))
            return None
        self.sidebar.set_status(f"Сохранено: {saved}")
        return saved

    # ---- Helpers ----
    def _refresh(self) -> None:
        self.window.title(window_title(self._path))
        converter = self._converter
        self.sidebar.set_image_info(converter.source if converter is not None else None)
        self._refresh_panes()

    def _refresh_panes(self) -> None:
        converter = self._converter
        if converter is None:
            self.before_pane.clear()
            self.after_pane.clear()
            return
        self.before_pane.set_image(converter.thumbnail_image(), converter.original_black_pixel_percentage)
        self.after_pane.set_image(converter.converted_thumbnail_image(), converter.converted_black_pixel_percentage)
