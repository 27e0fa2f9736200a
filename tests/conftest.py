from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from amoled_maker.models.pixel_buffer import PixelBuffer
from amoled_maker.services.image_service import ImageService
from amoled_maker.services.process_service import ProcessService

from helpers import image_from_rows


@pytest.fixture
def process_service() -> ProcessService:
    return ProcessService()


@pytest.fixture
def image_service() -> ImageService:
    return ImageService()


@pytest.fixture
def random_bgra() -> PixelBuffer:
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(17, 23, 4), dtype=np.uint8))


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.png"
    rows = [[(0, 0, 0, 255), (10, 10, 10, 128)], [(200, 30, 5, 255), (255, 255, 255, 0)]]
    image_from_rows(rows).save(path)
    return path
