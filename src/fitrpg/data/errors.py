"""Exceptions raised while loading class and equipment definitions."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the definitions data layer."""


class DataLoadError(DataError):
    """Raised when a definition file cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataValidationError(DataError):
    """Raised when definition content has the wrong shape or types."""


class DataRangeError(DataValidationError):
    """Raised when a definition number is out of its allowed range.

    Covers negative attributes, non-positive reward multipliers and
    non-finite values.
    """
