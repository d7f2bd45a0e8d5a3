"""Data layer utilities for loading JSON definitions."""

from .errors import DataError, DataLoadError, DataRangeError, DataValidationError
from .paths import get_definitions_path, get_package_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataRangeError",
    "DataValidationError",
    "get_definitions_path",
    "get_package_root",
]
