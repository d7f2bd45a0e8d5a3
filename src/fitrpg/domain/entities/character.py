"""Character snapshot consumed by the engine."""
from __future__ import annotations

from dataclasses import dataclass

from fitrpg.domain.attributes import AttributeVector

from .equipment import EquipmentItem


@dataclass(frozen=True, slots=True)
class Character:
    """Read-only view of a user's character.

    ``attributes`` holds the raw stored values (``health`` and ``energy`` are
    the stored maxima). They are only used when the class id cannot be
    resolved against the class catalog.
    """

    id: str
    name: str
    class_id: str
    level: int
    attributes: AttributeVector
    equipment: tuple[EquipmentItem, ...] = ()
    xp: int = 0
    total_xp: int = 0
    xp_to_next_level: int = 100
    coins: int = 0
    unlocked_abilities: tuple[str, ...] = ()
