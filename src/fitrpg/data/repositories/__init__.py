"""Repository exports."""

from .classes_repo import ClassesRepository
from .equipment_repo import EquipmentRepository

__all__ = [
    "ClassesRepository",
    "EquipmentRepository",
]
