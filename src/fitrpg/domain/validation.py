"""Boundary checks for character data entering the engine."""
from __future__ import annotations

import math
from typing import Mapping

from fitrpg.domain.attributes import Attribute, AttributeVector
from fitrpg.domain.entities import Character, EquipmentItem
from fitrpg.domain.equipment_types import EquipmentSlot
from fitrpg.domain.errors import InvalidCharacterError, InvalidLevelError
from fitrpg.domain.level_curve import require_level


def is_valid_stat_value(value: object) -> bool:
    """True for non-negative finite real numbers (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def validate_attribute_vector(vector: AttributeVector, context: str) -> None:
    for attribute, value in vector.items():
        if not is_valid_stat_value(value):
            raise InvalidCharacterError(
                f"{context} {attribute.value} must be a non-negative finite number, got {value!r}."
            )


def validate_equipment_stats(stats: Mapping[Attribute, float], context: str) -> None:
    for key, value in stats.items():
        try:
            attribute = Attribute(key)
        except ValueError as exc:
            raise InvalidCharacterError(f"{context} has unknown attribute {key!r}.") from exc
        if not is_valid_stat_value(value):
            raise InvalidCharacterError(
                f"{context} {attribute.value} must be a non-negative finite number, got {value!r}."
            )


def validate_equipment_item(item: EquipmentItem) -> None:
    if not isinstance(item.slot, EquipmentSlot):
        try:
            EquipmentSlot(item.slot)
        except ValueError as exc:
            raise InvalidCharacterError(
                f"equipment '{item.id}' has unknown slot {item.slot!r}."
            ) from exc
    validate_equipment_stats(item.stats, f"equipment '{item.id}'")


def validate_experience(character: Character) -> None:
    """Stored experience counters must be non-negative integers."""
    for name in ("xp", "total_xp", "xp_to_next_level"):
        value = getattr(character, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidCharacterError(
                f"character '{character.id}' {name} must be a non-negative integer, got {value!r}."
            )


def validate_character(character: Character) -> Character:
    """Fail fast on malformed character data; return the character unchanged."""
    try:
        require_level(character.level)
    except InvalidLevelError as exc:
        raise InvalidCharacterError(f"character '{character.id}': {exc}") from exc
    validate_experience(character)
    validate_attribute_vector(character.attributes, f"character '{character.id}'")
    for item in character.equipment:
        validate_equipment_item(item)
    return character
