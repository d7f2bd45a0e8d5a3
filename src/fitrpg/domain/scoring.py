"""Equipment scoring, combat power and power level."""
from __future__ import annotations

import logging
import math
from typing import Iterable

from fitrpg.domain.entities import CalculatedStats, Character, EquipmentItem
from fitrpg.domain.equipment_aggregation import equipped_items
from fitrpg.domain.equipment_types import Rarity, parse_rarity

logger = logging.getLogger(__name__)

# Combat power weights. Saved benchmarks depend on these exact values.
STRENGTH_WEIGHT = 2.0
AGILITY_WEIGHT = 1.5
INTELLIGENCE_WEIGHT = 1.2
DEFENSE_WEIGHT = 1.8
STAMINA_WEIGHT = 0.8

POWER_PER_LEVEL = 10
EQUIPMENT_SCORE_WEIGHT = 0.5
UNKNOWN_RARITY_MULTIPLIER = 1.0


def rarity_multiplier(rarity: Rarity | str) -> float:
    """Return the score multiplier for ``rarity``; unknown tiers score as common."""
    resolved = parse_rarity(rarity)
    if resolved is None:
        logger.warning("Unknown equipment rarity %r; scoring with multiplier 1.", rarity)
        return UNKNOWN_RARITY_MULTIPLIER
    return resolved.multiplier


def equipment_score(item: EquipmentItem) -> int:
    stat_sum = sum(value for value in item.stats.values() if value)
    return math.floor(stat_sum * rarity_multiplier(item.rarity))


def total_equipment_score(items: Iterable[EquipmentItem]) -> int:
    """Sum of scores over the equipped subset of ``items``."""
    return sum(equipment_score(item) for item in equipped_items(items))


def combat_power(stats: CalculatedStats) -> int:
    total = stats.total
    return math.floor(
        total.strength * STRENGTH_WEIGHT
        + total.agility * AGILITY_WEIGHT
        + total.intelligence * INTELLIGENCE_WEIGHT
        + total.defense * DEFENSE_WEIGHT
        + total.stamina * STAMINA_WEIGHT
    )


def power_level(character: Character, stats: CalculatedStats) -> int:
    """Combat power plus a flat level bonus plus half the equipped score.

    The equipment term is floored once, after halving. Combat power and the
    level bonus are already integers, so this equals flooring the whole sum.
    """
    equipment_bonus = math.floor(total_equipment_score(character.equipment) * EQUIPMENT_SCORE_WEIGHT)
    return combat_power(stats) + character.level * POWER_PER_LEVEL + equipment_bonus
