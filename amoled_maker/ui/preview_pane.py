"""Панель предпросмотра: миниатюра и подпись с долей чёрных пикселей.

Принципы:
- SRP: только показ готовой миниатюры, без обработки и без масштабирования/панорамирования.
"""
from __future__ import annotations

from typing import Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image

PREVIEW_MAX_SIZE = 320


def fit_size(width: int, height: int, max_side: int = PREVIEW_MAX_SIZE) -> Tuple[int, int]:
    """Размер для показа с сохранением пропорций (не больше `max_side` по длинной стороне)."""
    scale = min(1.0, max_side / max(width, height))
    return max(1, int(width * scale)), max(1, int(height * scale))


class PreviewPane(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk | tk.Misc, caption: str = "", **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._caption = ctk.CTkLabel(self, text=caption, font=ctk.CTkFont(size=14, weight="bold"))
        self._caption.grid(row=0, column=0, padx=8, pady=(8, 4))

        self._image_label = self._make_image_label()

        self._percent_value = ctk.StringVar(value="")
        self._percent_label = ctk.CTkLabel(self, textvariable=self._percent_value)
        self._percent_label.grid(row=2, column=0, padx=8, pady=(4, 8))

        # keep a reference, otherwise Tk drops the image
        self._ctk_image: Optional[ctk.CTkImage] = None

    # ---- Public API ----
    def set_image(self, image: Image.Image, black_percentage: int) -> None:
        """Показывает миниатюру и подпись «N% Black»."""
        size = fit_size(*image.size)
        self._ctk_image = ctk.CTkImage(light_image=image, dark_image=image, size=size)
        self._image_label.configure(image=self._ctk_image)
        self._percent_value.set(f"{black_percentage}% Black")

    def clear(self) -> None:
        # CTkLabel cannot drop an image once set
        self._image_label.destroy()
        self._image_label = self._make_image_label()
        self._ctk_image = None
        self._percent_value.set("")

    def _make_image_label(self) -> ctk.CTkLabel:
        label = ctk.CTkLabel(self, text="")
        label.grid(row=1, column=0, padx=8, pady=4, sticky="nsew")
        return label
