"""
Exception types for wordplay.

Load failures are OSErrors so callers that only know about file I/O can
still catch them. Bad query input is a ValueError.
"""

from __future__ import annotations

from typing import Optional


class WordplayError(Exception):
    """Base class for every error raised by this package."""
    pass


class DictionaryLoadError(WordplayError, OSError):
    """Raised when the word list cannot be opened for reading."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "file not found"
        super().__init__(f"{self.reason}: {path}")


class GridLoadError(WordplayError, OSError):
    """Raised when the word search grid file cannot be opened."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f'invalid filepath "{path}"'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class GridFormatError(WordplayError, ValueError):
    """Raised when grid rows do not all have the same number of symbols."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"row {row} has {actual} symbols, expected {expected}"
        )


class SearchInputError(WordplayError, ValueError):
    """Raised when a search query has fewer than two symbols."""
    pass
