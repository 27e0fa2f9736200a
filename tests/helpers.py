from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from amoled_maker.models.pixel_buffer import PixelBuffer

Rgba = Tuple[int, int, int, int]


def image_from_rows(rows: Sequence[Sequence[Rgba]]) -> Image.Image:
    """RGBA image from rows of (r, g, b, a) tuples."""
    return Image.fromarray(np.array(rows, dtype=np.uint8))


def bgra_buffer(rows: Sequence[Sequence[Tuple[int, int, int, int]]]) -> PixelBuffer:
    """Buffer from rows of (b, g, r, a) tuples."""
    return PixelBuffer(np.array(rows, dtype=np.uint8))
