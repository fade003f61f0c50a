"""
Book Pictures - Operations
==========================
One function per command. Each takes a resolved configuration, reads its
inputs, and writes one output file or returns the value to report.
"""

import logging
from typing import List, Optional

import numpy as np

from book_pictures.config import (
    CreateCustomImageConfig,
    FindDistributionConfig,
    GenerateGridConfig,
    RemoveMatchingLinesConfig,
    ReplaceEntersConfig,
    StripWhitespacesConfig,
    TextLengthConfig,
    ToBlackAndWhiteConfig,
    TutorialConfig,
)
from book_pictures.errors import OutputWriteError
from book_pictures.gamma import GammaSolution, find_gamma
from book_pictures.halftone import create_picture_grid
from book_pictures.pixels import PixelSource, open_image, to_grayscale
from book_pictures.renderers import save_grid_image, save_text_svg
from book_pictures import text_tools

logger = logging.getLogger(__name__)


# =============================================================================
# IMAGE COMMANDS
# =============================================================================

def run_to_black_and_white(config: ToBlackAndWhiteConfig) -> None:
    """Save a grayscale copy of the source image."""
    image = open_image(config.source_path)

    gray = to_grayscale(image)
    logger.debug("Turned image to grayscale (%s)", gray.mode)

    try:
        gray.save(config.target_path)
    except (OSError, ValueError) as e:
        raise OutputWriteError(config.target_path, str(e)) from e
    logger.debug("Saved image to: %s", config.target_path)


def run_generate_grid(config: GenerateGridConfig,
                      rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Save the halftone grid of the source image as a black and white picture.

    Returns:
        The grid that was drawn
    """
    pixels = PixelSource.open(config.source_path)
    grid = create_picture_grid(pixels, config.grid, rng)
    save_grid_image(grid, config.target_path)
    return grid


def run_find_distribution(config: FindDistributionConfig) -> GammaSolution:
    """
    Find the gamma that gives the image just enough ink cells for the text.

    Raises:
        NoSolutionError: if the text has more characters than any gamma can hold
    """
    pixels = PixelSource.open(config.img_source_path)
    total_chars = text_tools.text_length(config.text_source_path)

    solution = find_gamma(pixels, config.grid_size, total_chars)
    logger.debug("Best gamma %r after %d scans", solution.gamma, solution.iterations)
    return solution


def run_create_custom_image(config: CreateCustomImageConfig,
                            rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Save the halftone grid of the image as an SVG written with the text's characters.

    Returns:
        The grid that was drawn
    """
    pixels = PixelSource.open(config.img_source_path)
    text = text_tools.read_text(config.text_source_path)

    grid = create_picture_grid(pixels, config.grid, rng)

    ink_cells = int(grid.sum())
    if ink_cells < len(text):
        logger.warning(
            "Only %d of %d characters fit in the picture, try a lower gamma",
            ink_cells, len(text),
        )

    save_text_svg(grid, text, config.target_path)
    return grid


# =============================================================================
# TEXT COMMANDS
# =============================================================================

def run_text_length(config: TextLengthConfig) -> int:
    """Number of characters in the source text."""
    return text_tools.text_length(config.source_path)


def run_strip_whitespaces(config: StripWhitespacesConfig) -> None:
    text = text_tools.read_text(config.source_path)
    text_tools.write_text(config.target_path, text_tools.strip_whitespaces(text))


def run_replace_enters(config: ReplaceEntersConfig) -> None:
    text = text_tools.read_text(config.source_path)
    text_tools.write_text(config.target_path, text_tools.replace_enters(text))


def run_remove_matching_lines(config: RemoveMatchingLinesConfig) -> int:
    """
    Copy the source text without the lines matching the regular expression.

    The pattern is checked before any file is touched.

    Returns:
        Number of lines removed
    """
    text_tools.compile_pattern(config.regex)

    lines = text_tools.split_lines(text_tools.read_text(config.source_path))
    kept = text_tools.remove_matching_lines(lines, config.regex)
    text_tools.write_text(config.target_path, ''.join(line + '\n' for line in kept))

    removed = len(lines) - len(kept)
    logger.debug("Removed %d of %d lines", removed, len(lines))
    return removed


def run_tutorial(config: TutorialConfig) -> List[str]:
    """Lines of the file that contain the query."""
    contents = text_tools.read_text(config.file_path)
    if config.ignore_case:
        return text_tools.search_case_insensitive(config.query, contents)
    return text_tools.search(config.query, contents)
