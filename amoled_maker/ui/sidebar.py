"""Боковая панель: информация об изображении, статус и сохранение.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов.
- ISP: события через `on_*`, обновления через компактные методы `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from amoled_maker.models.image_model import ImageData
from amoled_maker.utils import format_size


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: информация, статус, сохранение."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=240, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_save_file: Optional[Callable[[], None]] = None

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=220, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=1, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=2, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=4, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Status
        self._status_val = ctk.StringVar(value="")
        self._status = ctk.CTkLabel(
            self, textvariable=self._status_val, wraplength=220, anchor="w", justify="left", text_color="#d9534f"
        )
        self._status.grid(row=5, column=0, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(98, weight=1)

        self._save_btn = ctk.CTkButton(self, text="Сохранить", command=self._emit_save_file, state="disabled")
        self._save_btn.grid(row=99, column=0, padx=8, pady=(8, 8), sticky="ew")

    # ---- Public API ----
    def set_image_info(self, data: Optional[ImageData]) -> None:
        if data is None:
            for var in (self._path_val, self._size_val, self._dims_val, self._mode_val):
                var.set("—")
            self._save_btn.configure(state="disabled")
            return
        self._path_val.set(f"Путь: {data.path}" if data.path is not None else "Путь: —")
        self._size_val.set(f"Размер файла: {format_size(data.size_bytes)}")
        self._dims_val.set(f"Размеры: {data.width}×{data.height}")
        self._mode_val.set(f"Режим: {data.mode}")
        self._save_btn.configure(state="normal")

    def set_status(self, text: str) -> None:
        self._status_val.set(text)

    # ---- Events ----
    def _emit_save_file(self) -> None:
        if self.on_save_file:
            self.on_save_file()
