"""
Book Pictures - Configuration
=============================
Fully resolved settings for every operation. Optional target paths are
replaced with the operation's default file name before anything runs.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

from book_pictures.constants import (
    BLACK_AND_WHITE_TARGET,
    CUSTOM_IMAGE_TARGET,
    DEFAULT_GAMMA,
    DEFAULT_GRID_SIZE,
    LOG_LEVEL_ENV,
    PIXEL_GRID_TARGET,
    REMOVED_LINES_TARGET,
    REPLACED_ENTERS_TARGET,
    STRIPPED_TEXT_TARGET,
)
from book_pictures.errors import InvalidConfigError


# =============================================================================
# HALFTONE GRID
# =============================================================================

@dataclass(frozen=True)
class GridConfig:
    """Halftone grid settings."""

    grid_size: int = DEFAULT_GRID_SIZE       # Sub-cells per pixel along each axis
    gamma: float = DEFAULT_GAMMA             # Exponent applied to normalized darkness

    def __post_init__(self):
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise InvalidConfigError(f"Grid size must be an integer, got {self.grid_size!r}")
        if self.grid_size < 1:
            raise InvalidConfigError(f"Grid size must be at least 1, got {self.grid_size}")
        if not math.isfinite(self.gamma) or self.gamma <= 0:
            raise InvalidConfigError(f"Gamma must be a positive number, got {self.gamma}")

    @property
    def grid_area(self) -> int:
        """Number of sub-cells in one halftone block."""
        return self.grid_size * self.grid_size


# =============================================================================
# IMAGE OPERATIONS
# =============================================================================

@dataclass
class ToBlackAndWhiteConfig:
    source_path: str
    target_path: str = BLACK_AND_WHITE_TARGET


@dataclass
class GenerateGridConfig:
    source_path: str
    target_path: str = PIXEL_GRID_TARGET
    grid: GridConfig = field(default_factory=GridConfig)


@dataclass
class FindDistributionConfig:
    img_source_path: str
    text_source_path: str
    grid_size: int = DEFAULT_GRID_SIZE

    def __post_init__(self):
        # Validated through GridConfig so both paths reject the same values
        GridConfig(grid_size=self.grid_size)


@dataclass
class CreateCustomImageConfig:
    img_source_path: str
    text_source_path: str
    target_path: str = CUSTOM_IMAGE_TARGET
    grid: GridConfig = field(default_factory=GridConfig)


# =============================================================================
# TEXT OPERATIONS
# =============================================================================

@dataclass
class TextLengthConfig:
    source_path: str


@dataclass
class StripWhitespacesConfig:
    source_path: str
    target_path: str = STRIPPED_TEXT_TARGET


@dataclass
class ReplaceEntersConfig:
    source_path: str
    target_path: str = REPLACED_ENTERS_TARGET


@dataclass
class RemoveMatchingLinesConfig:
    source_path: str
    regex: str
    target_path: str = REMOVED_LINES_TARGET


@dataclass
class TutorialConfig:
    query: str
    file_path: str
    ignore_case: bool = False


# =============================================================================
# HELPERS
# =============================================================================

def resolve_target(target_path: Optional[str], default: str) -> str:
    """Return the given target path, or the operation default when it is unset."""
    return target_path if target_path else default


def log_level_from_env(default: int = logging.WARNING) -> int:
    """
    Read the log level named in the environment.

    Accepts a level name (``debug``, ``INFO``...) or a number. Unknown values
    fall back to ``default``.
    """
    value = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default
