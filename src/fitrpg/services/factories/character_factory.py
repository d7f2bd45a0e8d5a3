"""Factory for creating new characters from class definitions."""
from __future__ import annotations

from fitrpg.data.repositories import ClassesRepository
from fitrpg.domain.entities import Character
from fitrpg.domain.level_curve import xp_required_for_level
from fitrpg.services.errors import FactoryError

STARTING_LEVEL = 1


def create_character_from_class_id(
    class_id: str,
    character_id: str,
    name: str,
    classes_repo: ClassesRepository,
) -> Character:
    """Instantiate a level-1 character with the class's base attributes."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    return Character(
        id=character_id,
        name=name,
        class_id=class_id,
        level=STARTING_LEVEL,
        attributes=class_def.base_stats,
        equipment=(),
        xp=0,
        total_xp=0,
        xp_to_next_level=xp_required_for_level(STARTING_LEVEL),
        coins=0,
        unlocked_abilities=class_def.starting_abilities,
    )
