"""Character stat and power calculations over an injected class catalog."""
from __future__ import annotations

from dataclasses import dataclass

from fitrpg.data.repositories import ClassesRepository
from fitrpg.domain.attributes import AttributeVector
from fitrpg.domain.defs import ClassDef
from fitrpg.domain.entities import CalculatedStats, Character, EquipmentItem
from fitrpg.domain.equipment_aggregation import equipped_by_slot
from fitrpg.domain.equipment_types import EquipmentSlot
from fitrpg.domain.level_curve import stats_for_level
from fitrpg.domain.scoring import combat_power, equipment_score, power_level
from fitrpg.domain.stat_composition import compose_stats, max_health, max_energy
from fitrpg.domain.validation import validate_character, validate_equipment_item


@dataclass(frozen=True, slots=True)
class EquipmentSlotView:
    slot: EquipmentSlot
    item: EquipmentItem | None
    score: int | None


@dataclass(frozen=True, slots=True)
class CharacterSheetView:
    """Everything a character sheet renders, computed in one pass."""

    character_id: str
    class_id: str
    class_name: str | None
    level: int
    stats: CalculatedStats
    combat_power: int
    power_level: int
    max_health: float
    max_energy: float
    slots: tuple[EquipmentSlotView, ...]


class CharacterStatsService:
    """Derive stats, scores and power levels for character snapshots.

    The service reads the class catalog and the character it is given; it
    never mutates either, so one instance can serve any number of callers.
    """

    def __init__(self, *, classes_repo: ClassesRepository) -> None:
        self._classes_repo = classes_repo

    def get_archetype(self, class_id: str) -> ClassDef | None:
        return self._classes_repo.find(class_id)

    def stats_for_level(self, class_id: str, level: int) -> AttributeVector:
        return stats_for_level(self._classes_repo.get(class_id), level)

    def compose_stats(self, character: Character) -> CalculatedStats:
        validate_character(character)
        return compose_stats(character, self.get_archetype(character.class_id))

    def equipment_score(self, item: EquipmentItem) -> int:
        validate_equipment_item(item)
        return equipment_score(item)

    def combat_power(self, stats: CalculatedStats) -> int:
        return combat_power(stats)

    def power_level(self, character: Character) -> int:
        stats = self.compose_stats(character)
        return power_level(character, stats)

    def build_character_sheet(self, character: Character) -> CharacterSheetView:
        class_def = self.get_archetype(character.class_id)
        stats = self.compose_stats(character)
        slot_views = tuple(
            EquipmentSlotView(
                slot=slot,
                item=item,
                score=equipment_score(item) if item is not None else None,
            )
            for slot, item in equipped_by_slot(character.equipment).items()
        )
        return CharacterSheetView(
            character_id=character.id,
            class_id=character.class_id,
            class_name=class_def.name if class_def else None,
            level=character.level,
            stats=stats,
            combat_power=combat_power(stats),
            power_level=power_level(character, stats),
            max_health=max_health(stats),
            max_energy=max_energy(stats),
            slots=slot_views,
        )
