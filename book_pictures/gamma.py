"""
Book Pictures - Gamma Search
============================
Finds the gamma for which the halftone grid of an image holds just enough
ink cells for a text of a given length.

The search bisects over ``(0, 100]`` and relies on the total ink count of the
``x ** gamma`` curve being non-increasing in gamma: for ``x`` in ``[0, 1]``
a smaller exponent pulls mid-tones up towards 1. Other curve shapes do not
have that guarantee, which is why the curve is not a parameter here.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from book_pictures.constants import (
    GAMMA_LOWER_BOUND,
    GAMMA_UPPER_BOUND,
    INITIAL_GAMMA,
    MAX_GAMMA_ITERATIONS,
)
from book_pictures.errors import InvalidConfigError, NoSolutionError
from book_pictures.halftone import count_ink
from book_pictures.pixels import PixelSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GammaSolution:
    """Result of a gamma search."""
    gamma: float
    ink_count: int                 # Ink cells produced with this gamma
    target: int                    # Requested ink cell count
    iterations: int = 0            # Image scans performed

    @property
    def error(self) -> int:
        """Surplus of ink cells over the target, never negative."""
        return self.ink_count - self.target


def find_gamma(pixels: PixelSource,
               grid_size: int,
               target: int,
               max_iterations: int = MAX_GAMMA_ITERATIONS) -> GammaSolution:
    """
    Search the gamma whose ink count is closest to ``target`` without going under.

    Every candidate is a full count-only scan of the image. A candidate hitting the
    target exactly ends the search; otherwise the smallest count seen above
    the target wins once the interval has collapsed or the iteration limit is
    reached.

    Args:
        pixels: Image to scan
        grid_size: Sub-cells per pixel along each axis
        target: Number of ink cells needed, e.g. the characters of a text
        max_iterations: Upper bound on image scans

    Returns:
        GammaSolution with ``ink_count >= target``

    Raises:
        NoSolutionError: if no candidate gamma reached the target
    """
    if grid_size < 1:
        raise InvalidConfigError(f"Grid size must be at least 1, got {grid_size}")
    if target < 0:
        raise InvalidConfigError(f"Target ink count cannot be negative, got {target}")

    low, high = GAMMA_LOWER_BOUND, GAMMA_UPPER_BOUND
    gamma = INITIAL_GAMMA

    # Always keep the "over" side of the two closest candidates: the whole text
    # has to fit in the image.
    last_over: Optional[Tuple[float, int]] = None
    best_count = 0
    iterations = 0

    logger.debug("Starting calculation of the best gamma for %d ink cells", target)

    while iterations < max_iterations and low < gamma < high:
        ink_count = count_ink(pixels, grid_size, gamma)
        iterations += 1
        best_count = max(best_count, ink_count)

        logger.debug("Gamma: %r, produced an ink count of: %d", gamma, ink_count)

        if ink_count == target:
            return GammaSolution(gamma, ink_count, target, iterations)

        if ink_count > target:
            last_over = (gamma, ink_count)
            low = gamma
        else:
            high = gamma
        gamma = (low + high) / 2

    if last_over is None:
        logger.debug("No candidate exceeded %d ink cells after %d scans", target, iterations)
        raise NoSolutionError(target, best_count)

    if iterations >= max_iterations:
        logger.debug("Gamma search stopped at the iteration limit (%d)", max_iterations)

    return GammaSolution(last_over[0], last_over[1], target, iterations)
