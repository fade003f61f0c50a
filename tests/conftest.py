"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from book_pictures.pixels import PixelSource


SAMPLE_TEXT = "It was a bright cold day in April,\nand the clocks were striking thirteen.\n"


def gradient_darkness(width: int = 16, height: int = 8) -> np.ndarray:
    """Darkness rising left to right from white to black."""
    row = np.linspace(0, 255, width).round().astype(np.uint8)
    return np.tile(row, (height, 1))


@pytest.fixture
def black_pixels() -> PixelSource:
    return PixelSource.from_arrays(np.full((2, 2), 255))


@pytest.fixture
def white_pixels() -> PixelSource:
    return PixelSource.from_arrays(np.zeros((2, 2)))


@pytest.fixture
def gradient_pixels() -> PixelSource:
    return PixelSource.from_arrays(gradient_darkness())


@pytest.fixture
def gradient_png(tmp_path) -> str:
    path = tmp_path / "gradient.png"
    luminance = 255 - gradient_darkness()
    Image.fromarray(luminance).convert('RGB').save(path)
    return str(path)


@pytest.fixture
def black_png(tmp_path) -> str:
    path = tmp_path / "black.png"
    Image.new('RGB', (3, 2), (0, 0, 0)).save(path)
    return str(path)


@pytest.fixture
def white_png(tmp_path) -> str:
    path = tmp_path / "white.png"
    Image.new('RGB', (3, 2), (255, 255, 255)).save(path)
    return str(path)


@pytest.fixture
def sample_text_path(tmp_path) -> str:
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT, encoding='utf-8')
    return str(path)
