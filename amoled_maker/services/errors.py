"""Ошибки преобразования изображений."""
from __future__ import annotations


class AmoledConversionError(Exception):
    """Базовая ошибка загрузки или сохранения изображения."""


class DecodeError(AmoledConversionError):
    """Источник не удалось прочитать или распознать как изображение."""


class EncodeError(AmoledConversionError):
    """Буфер не удалось закодировать или записать на диск."""
