"""
Book Pictures - Grid Renderers
==============================
Writes a halftone grid either as a black and white raster image or as an SVG
in which every ink cell is a character of a text.
"""

import logging
from typing import Iterable, Iterator, List

import numpy as np
from PIL import Image

from book_pictures.constants import SVG_NAMESPACE, SVG_STYLE, SVG_TEXT_CLASS
from book_pictures.errors import InvalidConfigError, OutputWriteError

logger = logging.getLogger(__name__)


# =============================================================================
# RASTER OUTPUT
# =============================================================================

def render_grid_image(grid: np.ndarray, cell_size: int = 1) -> Image.Image:
    """
    Draw the grid as an RGB image: black ink cells on a white background.

    Args:
        grid: Boolean halftone grid indexed ``[y, x]``
        cell_size: Output pixels per grid cell along each axis

    Returns:
        PIL image of size ``(grid_width * cell_size, grid_height * cell_size)``
    """
    if cell_size < 1:
        raise InvalidConfigError(f"Cell size must be at least 1, got {cell_size}")

    cells = np.asarray(grid, dtype=bool)
    if cell_size > 1:
        cells = cells.repeat(cell_size, axis=0).repeat(cell_size, axis=1)

    gray = np.where(cells, 0, 255).astype(np.uint8)
    return Image.fromarray(gray).convert('RGB')


def save_grid_image(grid: np.ndarray, path: str, cell_size: int = 1) -> None:
    """Render the grid and save it; the format follows the file extension."""
    image = render_grid_image(grid, cell_size)
    try:
        image.save(path)
    except (OSError, ValueError) as e:
        raise OutputWriteError(path, str(e)) from e
    logger.debug("Saved grid image to: %s", path)


# =============================================================================
# TEXT AS SVG OUTPUT
# =============================================================================

def _is_xml_char(char: str) -> bool:
    code = ord(char)
    return (
        code in (0x9, 0xA, 0xD)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def escape_text(text: str) -> str:
    """Escape text for an XML text node; unrepresentable characters become spaces."""
    text = ''.join(char if _is_xml_char(char) else ' ' for char in text)
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def grid_text_lines(grid: np.ndarray, text: Iterable[str]) -> Iterator[str]:
    """
    Fill the ink cells of the grid with characters of ``text``, row by row.

    Each ink cell takes the next unused character, or a space once the text
    runs out. Every other cell is a space. Yields one string per grid row.
    """
    characters = iter(text)
    for row in np.asarray(grid, dtype=bool):
        line = []
        for is_filled in row:
            if is_filled:
                line.append(next(characters, ' '))
            else:
                line.append(' ')
        yield ''.join(line)


def render_text_svg(grid: np.ndarray, text: Iterable[str], style: str = SVG_STYLE) -> str:
    """
    Format the grid as an SVG document of text rows.

    Args:
        grid: Boolean halftone grid indexed ``[y, x]``
        text: Characters placed on the ink cells, in reading order
        style: CSS for the text rows

    Returns:
        SVG string
    """
    height, width = np.asarray(grid).shape

    svg = (
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {width} {height}" '
        f'style="background-color:white">\n'
        f'<style>{style}</style>\n'
    )

    lines: List[str] = []
    for index, line in enumerate(grid_text_lines(grid, text)):
        lines.append(
            f'<text x="0" y="{index + 1}" class="{SVG_TEXT_CLASS}">{escape_text(line)}</text>'
        )

    svg += '\n'.join(lines)
    if lines:
        svg += '\n'
    svg += '</svg>\n'

    return svg


def save_text_svg(grid: np.ndarray, text: Iterable[str], path: str) -> None:
    """Render the grid as text-as-SVG and write it to ``path``."""
    svg = render_text_svg(grid, text)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(svg)
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e
    logger.debug("Saved text image to: %s", path)
