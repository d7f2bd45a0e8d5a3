"""Level projection and experience gain services."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from fitrpg.domain.entities import Character
from fitrpg.domain.progression import (
    DEFAULT_PROJECTION_COUNT,
    ProgressionEntry,
    apply_xp_gain,
    milestones_for_level,
    project_upcoming_levels,
    rewards_for_level,
)
from fitrpg.domain.validation import validate_character

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProgressionEvent:
    """Base class for progression events."""


@dataclass(slots=True)
class XpGainedEvent(ProgressionEvent):
    amount: int
    total_xp: int


@dataclass(slots=True)
class LevelUpEvent(ProgressionEvent):
    level: int
    rewards: tuple[str, ...]
    milestones: tuple[str, ...]


@dataclass(slots=True)
class XpGainOutcome:
    character: Character
    events: List[ProgressionEvent] = field(default_factory=list)


class ProgressionService:
    """Projects upcoming levels and applies experience gains."""

    def project_upcoming_levels(
        self,
        level: int,
        total_xp: int,
        count: int = DEFAULT_PROJECTION_COUNT,
    ) -> tuple[ProgressionEntry, ...]:
        return project_upcoming_levels(level, total_xp, count)

    def project_for_character(
        self,
        character: Character,
        count: int = DEFAULT_PROJECTION_COUNT,
    ) -> tuple[ProgressionEntry, ...]:
        validate_character(character)
        return project_upcoming_levels(character.level, character.total_xp, count)

    def gain_xp(self, character: Character, amount: int) -> XpGainOutcome:
        validate_character(character)
        result = apply_xp_gain(character, amount)
        events: List[ProgressionEvent] = [
            XpGainedEvent(amount=amount, total_xp=result.character.total_xp)
        ]
        for level in result.levels_reached:
            logger.info("Character '%s' reached level %d", character.id, level)
            events.append(
                LevelUpEvent(
                    level=level,
                    rewards=rewards_for_level(level),
                    milestones=milestones_for_level(level),
                )
            )
        return XpGainOutcome(character=result.character, events=events)
