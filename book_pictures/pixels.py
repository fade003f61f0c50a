"""
Book Pictures - Pixel Source
============================
Grayscale + alpha view of an image, as consumed by the halftone code.
"""

import logging
import os
from typing import Iterator, NamedTuple, Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from book_pictures.constants import MAX_CHANNEL_VALUE
from book_pictures.errors import InputNotFoundError, InputUnreadableError, InvalidConfigError

logger = logging.getLogger(__name__)


class PixelSample(NamedTuple):
    """One pixel: position, darkness (0 = white, 255 = black) and alpha."""
    x: int
    y: int
    darkness: int
    alpha: int


def open_image(path: str) -> Image.Image:
    """
    Open and decode an image file.

    Raises:
        InputNotFoundError: if ``path`` does not exist
        InputUnreadableError: if the file cannot be decoded as an image
    """
    if not os.path.exists(path):
        raise InputNotFoundError(path)
    try:
        image = Image.open(path)
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise InputUnreadableError(path, str(e)) from e

    logger.debug("Read image from: %s (size %s, mode %s)", path, image.size, image.mode)
    return image


def has_alpha(image: Image.Image) -> bool:
    """Whether the image carries transparency (premultiplied bands included)."""
    bands = image.getbands()
    return 'A' in bands or 'a' in bands or 'transparency' in image.info


def is_wide_grayscale(image: Image.Image) -> bool:
    """Whether the image holds 16 or 32 bit integer gray samples."""
    return image.mode == 'I' or image.mode.startswith('I;16')


def _narrow_grayscale(image: Image.Image) -> Image.Image:
    # 16-bit samples: round(v / 257) maps 0..65535 onto 0..255
    values = np.array(image).astype(np.int64)
    luminance = np.clip((values + 128) // 257, 0, MAX_CHANNEL_VALUE).astype(np.uint8)
    gray = Image.fromarray(luminance)

    transparency = image.info.get('transparency')
    if isinstance(transparency, int):
        alpha = np.where(values == transparency, 0, MAX_CHANNEL_VALUE).astype(np.uint8)
        return Image.merge('LA', (gray, Image.fromarray(alpha)))
    return gray


def to_grayscale(image: Image.Image) -> Image.Image:
    """Convert to grayscale, keeping the alpha channel when there is one."""
    if is_wide_grayscale(image):
        return _narrow_grayscale(image)
    if has_alpha(image):
        if image.mode not in ('RGBA', 'LA', 'La'):
            image = image.convert('RGBA')
        return image.convert('LA')
    return image.convert('L')


class PixelSource:
    """
    Grayscale + alpha pixels of one image.

    The arrays are indexed ``[y, x]``. Scanning is restartable: ``samples()``
    and ``weights()`` can be called any number of times.
    """

    def __init__(self, darkness: np.ndarray, alpha: np.ndarray):
        if darkness.ndim != 2:
            raise InvalidConfigError(f"Pixel data must be two dimensional, got shape {darkness.shape}")
        if alpha.shape != darkness.shape:
            raise InvalidConfigError(
                f"Alpha shape {alpha.shape} does not match darkness shape {darkness.shape}"
            )
        self.darkness = darkness.astype(np.uint8, copy=False)
        self.alpha = alpha.astype(np.uint8, copy=False)

    @classmethod
    def from_image(cls, image: Image.Image) -> 'PixelSource':
        """Build from a PIL image of any mode."""
        la = to_grayscale(image).convert('LA')
        arr = np.array(la, dtype=np.uint8)
        luminance = arr[:, :, 0]
        alpha = arr[:, :, 1]
        return cls(MAX_CHANNEL_VALUE - luminance, alpha)

    @classmethod
    def open(cls, path: str) -> 'PixelSource':
        """Read an image file."""
        return cls.from_image(open_image(path))

    @classmethod
    def from_arrays(cls, darkness, alpha: Optional[np.ndarray] = None) -> 'PixelSource':
        """Build from raw darkness values; alpha defaults to fully opaque."""
        darkness = np.asarray(darkness, dtype=np.uint8)
        if alpha is None:
            alpha = np.full(darkness.shape, MAX_CHANNEL_VALUE, dtype=np.uint8)
        return cls(darkness, np.asarray(alpha, dtype=np.uint8))

    @property
    def width(self) -> int:
        return self.darkness.shape[1]

    @property
    def height(self) -> int:
        return self.darkness.shape[0]

    def weights(self) -> np.ndarray:
        """Per-pixel ``darkness * alpha``, in ``[0, 255 * 255]``."""
        return self.darkness.astype(np.int64) * self.alpha.astype(np.int64)

    def samples(self) -> Iterator[PixelSample]:
        """Yield every pixel in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield PixelSample(x, y, int(self.darkness[y, x]), int(self.alpha[y, x]))

    def __repr__(self):
        return f"PixelSource(width={self.width}, height={self.height})"
