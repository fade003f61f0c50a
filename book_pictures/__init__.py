"""
Book Pictures
=============
Pictures made of book text: halftone grids of an image whose ink cells are
filled with the characters of a text, plus the helpers to prepare both.

Example:
    from book_pictures import GridConfig, PixelSource, create_picture_grid, find_gamma

    pixels = PixelSource.open("portrait.png")
    solution = find_gamma(pixels, grid_size=4, target=120_000)
    grid = create_picture_grid(pixels, GridConfig(grid_size=4, gamma=solution.gamma))

For debug logging, enable with:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - silent unless the application configures logging
logger = logging.getLogger("book_pictures")
logger.addHandler(logging.NullHandler())

from book_pictures.config import GridConfig
from book_pictures.density import map_value_by_distribution, map_values_by_distribution, power_curve
from book_pictures.errors import (
    BookPicturesError,
    InputNotFoundError,
    InputUnreadableError,
    InvalidConfigError,
    InvalidPatternError,
    NoSolutionError,
    OutputWriteError,
)
from book_pictures.gamma import GammaSolution, find_gamma
from book_pictures.halftone import count_ink, create_picture_grid
from book_pictures.pixels import PixelSample, PixelSource
from book_pictures.renderers import render_grid_image, render_text_svg

__version__ = "0.1.0"

__all__ = [
    "BookPicturesError",
    "GammaSolution",
    "GridConfig",
    "InputNotFoundError",
    "InputUnreadableError",
    "InvalidConfigError",
    "InvalidPatternError",
    "NoSolutionError",
    "OutputWriteError",
    "PixelSample",
    "PixelSource",
    "count_ink",
    "create_picture_grid",
    "find_gamma",
    "map_value_by_distribution",
    "map_values_by_distribution",
    "power_curve",
    "render_grid_image",
    "render_text_svg",
]
