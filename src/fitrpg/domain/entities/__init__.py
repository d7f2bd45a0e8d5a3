"""Runtime entity exports."""

from .character import Character
from .equipment import EquipmentItem
from .stats import CalculatedStats, StatBonuses

__all__ = [
    "CalculatedStats",
    "Character",
    "EquipmentItem",
    "StatBonuses",
]
