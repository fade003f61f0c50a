"""
Book Pictures - Density Mapping
===============================
Maps a pixel weight through a distribution curve onto a whole number of
ink cells.
"""

import math
from typing import Callable

import numpy as np

from book_pictures.errors import InvalidConfigError


Distribution = Callable[[float], float]


# =============================================================================
# DISTRIBUTION CURVES
# =============================================================================

def identity(x):
    return x


def square_root(x):
    return np.sqrt(x)


def power_curve(gamma: float) -> Distribution:
    """Curve ``x -> x ** gamma``. Works on floats and numpy arrays."""
    def curve(x):
        return np.power(x, gamma)
    return curve


# =============================================================================
# MAPPING
# =============================================================================

def _check_max_initial(max_initial_value) -> None:
    if max_initial_value <= 0:
        raise InvalidConfigError(f"Maximum input value must be positive, got {max_initial_value}")


def map_value_by_distribution(value: int,
                              distribution: Distribution,
                              max_initial_value: int,
                              max_final_value: int) -> int:
    """
    Map ``value`` from ``[0, max_initial_value]`` onto ``[0, max_final_value]``.

    The value is normalized, passed through ``distribution``, scaled, rounded
    half away from zero and clamped, so the result always lies in
    ``[0, max_final_value]`` even when ``value`` is out of range.

    Args:
        value: Input value, usually ``darkness * alpha``
        distribution: Curve applied to the normalized value
        max_initial_value: Value that normalizes to 1.0 (must be positive)
        max_final_value: Largest possible result

    Returns:
        Mapped integer
    """
    _check_max_initial(max_initial_value)

    normalized = value / max_initial_value
    distributed = float(distribution(normalized))
    if math.isnan(distributed):
        return 0
    scaled = distributed * max_final_value
    if scaled >= max_final_value:
        return max_final_value
    if scaled <= 0:
        return 0
    return min(max_final_value, int(math.floor(scaled + 0.5)))


def map_values_by_distribution(values: np.ndarray,
                               distribution: Distribution,
                               max_initial_value: int,
                               max_final_value: int) -> np.ndarray:
    """
    Array version of :func:`map_value_by_distribution`.

    ``distribution`` must accept numpy arrays. Returns an int64 array of the
    same shape as ``values``.
    """
    _check_max_initial(max_initial_value)

    normalized = np.asarray(values, dtype=np.float64) / max_initial_value
    distributed = np.asarray(distribution(normalized), dtype=np.float64)
    distributed = np.nan_to_num(distributed, nan=0.0, posinf=1.0, neginf=0.0)
    scaled = np.floor(distributed * max_final_value + 0.5)
    return np.clip(scaled, 0, max_final_value).astype(np.int64)
