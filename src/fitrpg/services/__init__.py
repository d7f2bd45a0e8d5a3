"""Service layer exports."""

from .errors import FactoryError
from .progression_service import (
    LevelUpEvent,
    ProgressionEvent,
    ProgressionService,
    XpGainedEvent,
    XpGainOutcome,
)
from .stats_service import CharacterSheetView, CharacterStatsService, EquipmentSlotView

__all__ = [
    "FactoryError",
    "CharacterSheetView",
    "CharacterStatsService",
    "EquipmentSlotView",
    "LevelUpEvent",
    "ProgressionEvent",
    "ProgressionService",
    "XpGainedEvent",
    "XpGainOutcome",
]
