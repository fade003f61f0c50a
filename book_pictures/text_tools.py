"""
Book Pictures - Text Utilities
==============================
Small helpers to prepare the text that gets poured into a picture, plus the
line search from the command line tutorial.
"""

import logging
import os
import re
from typing import Iterable, List

from book_pictures.errors import (
    InputNotFoundError,
    InputUnreadableError,
    InvalidPatternError,
    OutputWriteError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FILE ACCESS
# =============================================================================

def read_text(path: str) -> str:
    """
    Read a UTF-8 text file. Invalid byte sequences become U+FFFD.

    Line endings are kept exactly as stored.
    """
    if not os.path.exists(path):
        raise InputNotFoundError(path)
    try:
        with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
            text = f.read()
    except OSError as e:
        raise InputUnreadableError(path, str(e)) from e

    logger.debug("Read %d characters from: %s", len(text), path)
    return text


def write_text(path: str, text: str) -> None:
    """Write ``text`` as UTF-8 without newline translation."""
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e

    logger.debug("Saved %d characters to: %s", len(text), path)


# =============================================================================
# TRANSFORMATIONS
# =============================================================================

def text_length(path: str) -> int:
    """Number of characters (code points, not bytes) in a text file."""
    return len(read_text(path))


def strip_whitespaces(text: str) -> str:
    """Drop every whitespace character."""
    return ''.join(char for char in text if not char.isspace())


def replace_enters(text: str) -> str:
    """Turn every line feed and carriage return into a single space."""
    return text.replace('\r', ' ').replace('\n', ' ')


def split_lines(text: str) -> List[str]:
    """
    Split on line feeds, dropping a trailing CR from each line.

    A final line feed does not start an extra empty line.
    """
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def compile_pattern(pattern: str) -> 're.Pattern':
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def remove_matching_lines(lines: Iterable[str], pattern: str) -> List[str]:
    """
    Keep the lines in which ``pattern`` matches nowhere.

    Raises:
        InvalidPatternError: if ``pattern`` is not a valid regular expression
    """
    regex = compile_pattern(pattern)
    return [line for line in lines if not regex.search(line)]


# =============================================================================
# LINE SEARCH
# =============================================================================

def search(query: str, contents: str) -> List[str]:
    """Lines of ``contents`` containing ``query``."""
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """Lines of ``contents`` containing ``query``, ignoring case."""
    query = query.casefold()
    return [line for line in split_lines(contents) if query in line.casefold()]
