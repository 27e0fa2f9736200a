from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class ControlBar(ctk.CTkFrame):
    """Путь к файлу с кнопкой «Открыть» и порог чёрного (ползунок + поле ввода)."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)

        # callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_path_submit: Optional[Callable[[str], None]] = None
        self.on_black_point_change: Optional[Callable[[int], None]] = None
        self.on_black_point_text: Optional[Callable[[str], None]] = None

        # layout
        self.grid_columnconfigure(0, weight=1)

        self._title = ctk.CTkLabel(self, text="amoled maker", font=ctk.CTkFont(size=40), text_color="#999999")
        self._title.grid(row=0, column=0, columnspan=2, padx=10, pady=(10, 6))

        # Path
        self._path_value = ctk.StringVar(value="")
        self._path_entry = ctk.CTkEntry(
            self, textvariable=self._path_value, placeholder_text="Выберите файл", height=36
        )
        self._path_entry.grid(row=1, column=0, padx=(10, 6), pady=6, sticky="ew")
        self._path_entry.bind("<Return>", self._on_path_commit)

        self._open_btn = ctk.CTkButton(self, text="Открыть", width=90, command=self._emit_open_file)
        self._open_btn.grid(row=1, column=1, padx=(6, 10), pady=6, sticky="e")

        # Black point
        bp_row = ctk.CTkFrame(self, fg_color="transparent")
        bp_row.grid(row=2, column=0, columnspan=2, padx=10, pady=(6, 10), sticky="ew")
        bp_row.grid_columnconfigure(1, weight=1)

        self._bp_label = ctk.CTkLabel(bp_row, text="Порог чёрного")
        self._bp_label.grid(row=0, column=0, padx=(0, 10), sticky="w")

        self._bp_slider = ctk.CTkSlider(bp_row, from_=0, to=255, number_of_steps=255, command=self._on_slider_change)
        self._bp_slider.set(0)
        self._bp_slider.grid(row=0, column=1, padx=6, sticky="ew")

        self._bp_value = ctk.StringVar(value="0")
        self._bp_entry = ctk.CTkEntry(bp_row, textvariable=self._bp_value, width=52)
        self._bp_entry.grid(row=0, column=2, padx=(10, 0), sticky="e")
        self._bp_entry.bind("<Return>", self._on_black_point_commit)
        self._bp_entry.bind("<FocusOut>", self._on_black_point_commit)

    # public API (sync from controller)
    def set_path(self, path: str) -> None:
        self._path_value.set(path)

    def set_black_point(self, value: int) -> None:
        self._bp_slider.set(value)
        self._bp_value.set(str(value))

    # events
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _on_path_commit(self, _event=None) -> None:
        if self.on_path_submit:
            self.on_path_submit(self._path_value.get())

    def _on_slider_change(self, value: float) -> None:
        black_point = int(round(value))
        self._bp_value.set(str(black_point))
        if self.on_black_point_change:
            self.on_black_point_change(black_point)

    def _on_black_point_commit(self, _event=None) -> None:
        if self.on_black_point_text:
            self.on_black_point_text(self._bp_value.get())
