"""
Book Pictures - Errors
======================
Exception types raised by the operations. The command line reports them and
chooses the exit status; nothing in the package exits the process itself.
"""

from typing import Optional


class BookPicturesError(Exception):
    """Base class for every failure an operation can report."""


class InputNotFoundError(BookPicturesError):
    """An input file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class InputUnreadableError(BookPicturesError):
    """An input file exists but could not be read or decoded."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot read input file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidPatternError(BookPicturesError):
    """A regular expression given on the command line does not compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")


class InvalidConfigError(BookPicturesError, ValueError):
    """A setting is out of range, e.g. a grid size of zero."""


class NoSolutionError(BookPicturesError):
    """No gamma makes the image dark enough to hold the requested ink count."""

    def __init__(self, target: int, best_count: int):
        self.target = target
        self.best_count = best_count
        super().__init__(
            f"No gamma can produce image dark enough for text of this size "
            f"({target} characters, at most {best_count} ink cells reached)."
        )


class OutputWriteError(BookPicturesError):
    """The output file could not be written."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot write output file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
