"""Forward progression window and experience gain rules."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List

from fitrpg.domain.entities import Character
from fitrpg.domain.level_curve import MAX_LEVEL, require_level, xp_required_for_level

DEFAULT_PROJECTION_COUNT = 5

REWARD_ACHIEVEMENT = "Special Achievement"
REWARD_BONUS_COINS = "Bonus Coins"
REWARD_NEW_ABILITY = "New Ability"
REWARD_STAT_POINTS = "Stat Points"

# (divisor, reward) checked in order; "Stat Points" is granted on every level.
LEVEL_REWARD_RULES: tuple[tuple[int, str], ...] = (
    (5, REWARD_ACHIEVEMENT),
    (3, REWARD_BONUS_COINS),
    (2, REWARD_NEW_ABILITY),
)

LEVEL_MILESTONES: Dict[int, str] = {
    10: "Novice Adventurer",
    25: "Seasoned Warrior",
    50: "Elite Champion",
    100: "Legendary Hero",
}

HEALTH_PER_LEVEL_UP = 10
ENERGY_PER_LEVEL_UP = 5


@dataclass(frozen=True, slots=True)
class ProgressionEntry:
    level: int
    xp_required: int
    cumulative_xp: int
    rewards: tuple[str, ...]
    milestones: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class XpGainResult:
    character: Character
    levels_reached: tuple[int, ...]

    @property
    def leveled_up(self) -> bool:
        return bool(self.levels_reached)


def _require_xp(value: object, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{context} must be a non-negative integer, got {value!r}.")
    return value


def rewards_for_level(level: int) -> tuple[str, ...]:
    rewards = [reward for divisor, reward in LEVEL_REWARD_RULES if level % divisor == 0]
    rewards.append(REWARD_STAT_POINTS)
    return tuple(rewards)


def milestones_for_level(level: int) -> tuple[str, ...]:
    milestone = LEVEL_MILESTONES.get(level)
    return (milestone,) if milestone else ()


def project_upcoming_levels(
    current_level: int,
    current_total_xp: int,
    count: int = DEFAULT_PROJECTION_COUNT,
) -> tuple[ProgressionEntry, ...]:
    """Project ``count`` levels starting at ``current_level``, ascending.

    ``cumulative_xp`` starts from ``current_total_xp`` and adds each level's
    requirement, so it strictly increases along the window.
    The window stops at MAX_LEVEL, so it is shorter near the level cap.
    """
    require_level(current_level)
    _require_xp(current_total_xp, "Total XP")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"Projection count must be a non-negative integer, got {count!r}.")
    last_level = min(current_level + count, MAX_LEVEL + 1)

    entries: List[ProgressionEntry] = []
    cumulative_xp = current_total_xp
    for level in range(current_level, last_level):
        xp_required = xp_required_for_level(level)
        cumulative_xp += xp_required
        entries.append(
            ProgressionEntry(
                level=level,
                xp_required=xp_required,
                cumulative_xp=cumulative_xp,
                rewards=rewards_for_level(level),
                milestones=milestones_for_level(level),
            )
        )
    return tuple(entries)


def apply_xp_gain(character: Character, amount: int) -> XpGainResult:
    """Return a copy of ``character`` with ``amount`` xp applied.

    Levels up as many times as the gained xp allows, carrying the remainder.
    Each level raises the stored health and energy maxima.
    Levelling stops at MAX_LEVEL; further xp accumulates at the cap.
    """
    _require_xp(amount, "XP gain")

    level = require_level(character.level)
    xp = character.xp + amount
    xp_to_next = character.xp_to_next_level
    if xp_to_next < 1:
        xp_to_next = xp_required_for_level(level)
    levels_reached: List[int] = []
    while level < MAX_LEVEL and xp >= xp_to_next:
        xp -= xp_to_next
        level += 1
        levels_reached.append(level)
        xp_to_next = xp_required_for_level(level)

    gained = len(levels_reached)
    attributes = replace(
        character.attributes,
        health=character.attributes.health + HEALTH_PER_LEVEL_UP * gained,
        energy=character.attributes.energy + ENERGY_PER_LEVEL_UP * gained,
    )
    updated = replace(
        character,
        level=level,
        xp=xp,
        total_xp=character.total_xp + amount,
        xp_to_next_level=xp_to_next,
        attributes=attributes,
    )
    return XpGainResult(character=updated, levels_reached=tuple(levels_reached))
