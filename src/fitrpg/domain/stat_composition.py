"""Compose class growth and equipment bonuses into calculated stats."""
from __future__ import annotations

import logging

from fitrpg.domain.defs import ClassDef
from fitrpg.domain.entities import CalculatedStats, Character, StatBonuses
from fitrpg.domain.equipment_aggregation import aggregate_equipped
from fitrpg.domain.level_curve import stats_for_level

logger = logging.getLogger(__name__)

BASE_HEALTH_REGEN = 1
STAMINA_PER_HEALTH_REGEN = 10
BASE_ENERGY_REGEN = 2
INTELLIGENCE_PER_ENERGY_REGEN = 8

# Flat per-class regen bonuses, keyed by class id. Classes not listed get 0.
HEALTH_REGEN_CLASS_BONUS: dict[str, int] = {
    "warrior": 2,
    "healer": 3,
}
ENERGY_REGEN_CLASS_BONUS: dict[str, int] = {
    "mage": 3,
    "healer": 2,
}

BASE_MAX_HEALTH = 100
HEALTH_PER_STAMINA = 5
HEALTH_PER_DEFENSE = 2
BASE_MAX_ENERGY = 50
ENERGY_PER_INTELLIGENCE = 3
ENERGY_PER_AGILITY = 1


def compute_health_regen(stamina: float, class_def: ClassDef | None) -> int:
    bonus = HEALTH_REGEN_CLASS_BONUS.get(class_def.id, 0) if class_def else 0
    return BASE_HEALTH_REGEN + int(stamina // STAMINA_PER_HEALTH_REGEN) + bonus


def compute_energy_regen(intelligence: float, class_def: ClassDef | None) -> int:
    bonus = ENERGY_REGEN_CLASS_BONUS.get(class_def.id, 0) if class_def else 0
    return BASE_ENERGY_REGEN + int(intelligence // INTELLIGENCE_PER_ENERGY_REGEN) + bonus


def compose_stats(character: Character, class_def: ClassDef | None) -> CalculatedStats:
    """Build base/equipment/total stats for ``character``.

    ``class_def`` is the resolved class for ``character.class_id``. When it is
    None the character's raw stored attributes stand in for the level curve,
    and both reward multipliers default to 1.
    """
    if class_def is None:
        logger.debug(
            "Class '%s' not found for character '%s'; using stored attributes.",
            character.class_id,
            character.id,
        )
        base = character.attributes
    else:
        base = stats_for_level(class_def, character.level)

    equipment = aggregate_equipped(character.equipment)
    total = base + equipment

    bonuses = StatBonuses(
        xp_multiplier=class_def.bonus_xp_multiplier if class_def else 1.0,
        coin_multiplier=class_def.bonus_coin_multiplier if class_def else 1.0,
        health_regen=compute_health_regen(total.stamina, class_def),
        energy_regen=compute_energy_regen(total.intelligence, class_def),
    )
    return CalculatedStats(base=base, equipment=equipment, total=total, bonuses=bonuses)


def max_health(stats: CalculatedStats) -> float:
    total = stats.total
    return BASE_MAX_HEALTH + total.stamina * HEALTH_PER_STAMINA + total.defense * HEALTH_PER_DEFENSE


def max_energy(stats: CalculatedStats) -> float:
    total = stats.total
    return (
        BASE_MAX_ENERGY
        + total.intelligence * ENERGY_PER_INTELLIGENCE
        + total.agility * ENERGY_PER_AGILITY
    )
