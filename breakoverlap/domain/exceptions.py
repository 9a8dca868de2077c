"""
Domain-specific exception hierarchy for the break overlap application.
"""

from pathlib import Path


class BreakOverlapError(Exception):
    """Base class for all application-level errors."""


class IntervalParseError(BreakOverlapError, ValueError):
    """Raised when a break time string cannot be turned into markers."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class InvalidFormatError(IntervalParseError):
    """Raised when a break time string has the wrong length or time pattern."""


class InvalidOrderingError(IntervalParseError):
    """Raised when a break ends before it starts."""


class BulkLoadError(BreakOverlapError):
    """Raised when an all-or-nothing load hits an unparseable line."""

    def __init__(self, line_number: int, cause: IntervalParseError):
        super().__init__(f"{cause} File line: {line_number}")
        self.line_number = line_number
        self.cause = cause


class BreakFileNotFoundError(BreakOverlapError, FileNotFoundError):
    """Raised when the requested break time file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Could not find file with specified path: {path}")
        self.path = path


class BreakFileReadError(BreakOverlapError):
    """Raised when the break time file exists but cannot be read or decoded."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Could not read break times from {path}: {cause}")
        self.path = path
        self.cause = cause
