"""Definition file reader shared by the repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_definitions(path: Path) -> dict[str, object]:
    """Read a definition file and return its top-level id -> payload object."""
    kind = path.stem
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"No {kind} definitions at {path}", path=path) from exc
    except OSError as exc:
        raise DataLoadError(f"Cannot read {kind} definitions at {path}: {exc}", path=path) from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {kind} definitions {path}: {exc}", path=path) from exc

    if not isinstance(raw, dict):
        raise DataValidationError(
            f"{kind} definitions in {path} must be an object keyed by id, got {type(raw).__name__}."
        )
    return raw
