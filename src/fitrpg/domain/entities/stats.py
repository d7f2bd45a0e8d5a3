"""Derived stat models."""
from __future__ import annotations

from dataclasses import dataclass

from fitrpg.domain.attributes import AttributeVector


@dataclass(frozen=True, slots=True)
class StatBonuses:
    xp_multiplier: float
    coin_multiplier: float
    health_regen: int
    energy_regen: int


@dataclass(frozen=True, slots=True)
class CalculatedStats:
    """Base, equipment and total attributes for a character, plus bonuses."""

    base: AttributeVector
    equipment: AttributeVector
    total: AttributeVector
    bonuses: StatBonuses
