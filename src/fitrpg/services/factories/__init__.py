"""Factory helpers for runtime entities."""

from .character_factory import create_character_from_class_id
from .equipment_factory import create_equipment_from_def_id

__all__ = [
    "create_character_from_class_id",
    "create_equipment_from_def_id",
]
