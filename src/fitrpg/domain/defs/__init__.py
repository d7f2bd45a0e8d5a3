"""Domain definition exports."""

from .class_def import ClassDef
from .equipment_def import EquipmentDef

__all__ = [
    "ClassDef",
    "EquipmentDef",
]
