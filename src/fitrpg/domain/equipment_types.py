"""Equipment slot and rarity enumerations."""
from __future__ import annotations

from enum import Enum


class EquipmentSlot(str, Enum):
    WEAPON = "weapon"
    HEAD = "head"
    CHEST = "chest"
    LEGS = "legs"
    FEET = "feet"
    ACCESSORY1 = "accessory1"
    ACCESSORY2 = "accessory2"


EQUIPMENT_SLOTS: tuple[EquipmentSlot, ...] = tuple(EquipmentSlot)

ITEM_TYPES: tuple[str, ...] = ("weapon", "armor", "accessory", "shield")


class Rarity(str, Enum):
    """Equipment quality tiers, declared from lowest to highest."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return RARITY_ORDER.index(self)

    @property
    def multiplier(self) -> float:
        return RARITY_MULTIPLIERS[self]


RARITY_ORDER: tuple[Rarity, ...] = tuple(Rarity)

RARITY_MULTIPLIERS: dict[Rarity, float] = {
    Rarity.COMMON: 1.0,
    Rarity.UNCOMMON: 1.5,
    Rarity.RARE: 2.5,
    Rarity.EPIC: 4.0,
    Rarity.LEGENDARY: 7.0,
}


def parse_rarity(value: Rarity | str) -> Rarity | None:
    """Return the matching Rarity, or None for a tier this build does not know."""
    if isinstance(value, Rarity):
        return value
    try:
        return Rarity(value)
    except ValueError:
        return None
