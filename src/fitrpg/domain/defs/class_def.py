"""Character class (archetype) definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from fitrpg.domain.attributes import AttributeVector


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Defines base attributes, per-level growth and reward multipliers for a class."""

    id: str
    name: str
    icon: str
    description: str
    base_stats: AttributeVector
    stat_growth: AttributeVector
    starting_abilities: tuple[str, ...] = ()
    class_abilities: tuple[str, ...] = ()
    bonus_xp_multiplier: float = 1.0
    bonus_coin_multiplier: float = 1.0
