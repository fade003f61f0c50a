"""
Book Pictures - Halftone Grid
=============================
Turns every pixel of an image into a ``grid_size x grid_size`` block of
sub-cells, of which a number proportional to the pixel's darkness are ink.
Which cells of a block get the ink is chosen by a random shuffle so that no
fixed fill pattern shows up as banding.
"""

import logging
from typing import Optional

import numpy as np

from book_pictures.config import GridConfig
from book_pictures.constants import MAX_PIXEL_WEIGHT, PROGRESS_LOG_ROWS
from book_pictures.density import map_values_by_distribution, power_curve
from book_pictures.pixels import PixelSource

logger = logging.getLogger(__name__)


def pixel_ink_counts(pixels: PixelSource, grid_size: int, gamma: float) -> np.ndarray:
    """
    Number of ink cells for every pixel's block.

    Args:
        pixels: Image to scan
        grid_size: Sub-cells per pixel along each axis
        gamma: Exponent of the darkness curve

    Returns:
        int64 array of shape ``(height, width)``, values in ``[0, grid_size ** 2]``
    """
    return map_values_by_distribution(
        pixels.weights(),
        power_curve(gamma),
        MAX_PIXEL_WEIGHT,
        grid_size * grid_size,
    )


def count_ink(pixels: PixelSource, grid_size: int, gamma: float) -> int:
    """Total ink cells a grid would hold, without building the grid."""
    return int(pixel_ink_counts(pixels, grid_size, gamma).sum())


def shuffled_blocks(ink: np.ndarray, grid_area: int, rng: np.random.Generator) -> np.ndarray:
    """
    Build one shuffled block per entry of ``ink``.

    Each block starts as ``ink[i]`` true values followed by false ones and is
    then permuted independently of every other block.

    Returns:
        bool array of shape ``(len(ink), grid_area)``
    """
    base = np.arange(grid_area)[np.newaxis, :] < ink[:, np.newaxis]
    return rng.permuted(base, axis=1)


def create_picture_grid(pixels: PixelSource,
                        config: GridConfig,
                        rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Build the halftone grid of an image.

    Block index ``i`` of the pixel at ``(x, y)`` lands on grid cell
    ``(x * grid_size + i % grid_size, y * grid_size + i // grid_size)``.

    Args:
        pixels: Image to convert
        config: Grid size and gamma
        rng: Random generator shared by all blocks; a fresh unseeded one
            is used when omitted

    Returns:
        bool array of shape ``(height * grid_size, width * grid_size)``,
        indexed ``[y, x]``
    """
    if rng is None:
        rng = np.random.default_rng()

    n = config.grid_size
    width, height = pixels.width, pixels.height
    ink = pixel_ink_counts(pixels, n, config.gamma)

    grid = np.zeros((height * n, width * n), dtype=bool)

    for y in range(height):
        if y % PROGRESS_LOG_ROWS == 0:
            logger.debug("Processing pixel row %d of %d", y, height)

        # [x, dy, dx] -> [dy, x, dx] so each block row lines up with its neighbours
        blocks = shuffled_blocks(ink[y], config.grid_area, rng).reshape(width, n, n)
        grid[y * n:(y + 1) * n, :] = blocks.transpose(1, 0, 2).reshape(n, width * n)

    logger.debug("Generated image ink cell count is %d", int(ink.sum()))
    return grid
