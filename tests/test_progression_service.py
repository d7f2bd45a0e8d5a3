from __future__ import annotations

import pytest

from fitrpg.domain.errors import InvalidCharacterError
from fitrpg.services import LevelUpEvent, ProgressionService, XpGainedEvent
from tests.helpers.builders import make_character


def test_project_for_character_uses_level_and_total_xp() -> None:
    character = make_character(level=5, total_xp=1000)
    entries = ProgressionService().project_for_character(character)
    assert [entry.level for entry in entries] == [5, 6, 7, 8, 9]
    assert entries[0].cumulative_xp == 1506


def test_project_upcoming_levels_passthrough() -> None:
    entries = ProgressionService().project_upcoming_levels(9, 0, 2)
    assert [entry.level for entry in entries] == [9, 10]
    assert entries[1].milestones == ("Novice Adventurer",)


def test_gain_xp_emits_events_per_level() -> None:
    character = make_character(level=9, xp=3800, total_xp=9000, xp_to_next_level=2562)
    outcome = ProgressionService().gain_xp(character, 4000)

    assert isinstance(outcome.events[0], XpGainedEvent)
    assert outcome.events[0].amount == 4000
    assert outcome.events[0].total_xp == 13000
    level_ups = [event for event in outcome.events if isinstance(event, LevelUpEvent)]
    assert [event.level for event in level_ups] == [10, 11]
    assert level_ups[0].milestones == ("Novice Adventurer",)
    assert level_ups[0].rewards == ("Special Achievement", "New Ability", "Stat Points")
    assert outcome.character.level == 11


def test_gain_xp_without_level_up_only_reports_xp() -> None:
    outcome = ProgressionService().gain_xp(make_character(), 10)
    assert len(outcome.events) == 1
    assert outcome.character.xp == 10


def test_gain_xp_validates_character() -> None:
    with pytest.raises(InvalidCharacterError):
        ProgressionService().gain_xp(make_character(level=0), 10)


def test_gain_xp_rejects_nan_amount() -> None:
    with pytest.raises(ValueError):
        ProgressionService().gain_xp(make_character(), float("nan"))  # type: ignore[arg-type]


def test_project_for_character_rejects_negative_xp() -> None:
    with pytest.raises(InvalidCharacterError, match="non-negative integer"):
        ProgressionService().project_for_character(make_character(total_xp=-5000, xp=-7))
