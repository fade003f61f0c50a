"""
Book Pictures - Constants
=========================
Default file names, value ranges and search bounds shared by the operations.
"""

# =============================================================================
# DEFAULT OUTPUT FILES
# =============================================================================

BLACK_AND_WHITE_TARGET = "black_and_white_img.png"
PIXEL_GRID_TARGET = "pixel_grid.png"
CUSTOM_IMAGE_TARGET = "custom-image.svg"
STRIPPED_TEXT_TARGET = "text_without_whitespaces.txt"
REPLACED_ENTERS_TARGET = "text_without_enters.txt"
REMOVED_LINES_TARGET = "text_with_lines_removed.txt"


# =============================================================================
# HALFTONE SETTINGS
# =============================================================================

DEFAULT_GRID_SIZE = 4
DEFAULT_GAMMA = 1.0

# Darkness and alpha are both bytes, so their product tops out at 255 * 255
MAX_CHANNEL_VALUE = 255
MAX_PIXEL_WEIGHT = MAX_CHANNEL_VALUE * MAX_CHANNEL_VALUE

# Rows of blocks logged between two progress messages
PROGRESS_LOG_ROWS = 100


# =============================================================================
# GAMMA SEARCH
# =============================================================================

GAMMA_LOWER_BOUND = 0.0
GAMMA_UPPER_BOUND = 100.0
INITIAL_GAMMA = 1.0
MAX_GAMMA_ITERATIONS = 64


# =============================================================================
# SVG OUTPUT
# =============================================================================

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_TEXT_CLASS = "l"
SVG_STYLE = """   .l {
        font-family: 'Courier New', Courier, monospace;
        font-size: 1px;
        white-space: pre;
        letter-spacing: 0.4px;
    }"""


# =============================================================================
# ENVIRONMENT
# =============================================================================

LOG_LEVEL_ENV = "BOOK_PICTURES_LOG"
