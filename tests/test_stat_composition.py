from __future__ import annotations

import pytest

from fitrpg.data.repositories import ClassesRepository
from fitrpg.domain.attributes import AttributeVector
from fitrpg.domain.equipment_types import EquipmentSlot, Rarity
from fitrpg.domain.stat_composition import (
    compose_stats,
    compute_energy_regen,
    compute_health_regen,
    max_energy,
    max_health,
)
from tests.helpers.builders import make_character, make_item

_classes_repo = ClassesRepository()


def test_warrior_level_five_with_rare_sword() -> None:
    warrior = _classes_repo.get("warrior")
    sword = make_item("sword", rarity=Rarity.RARE, stats={"strength": 5})
    character = make_character(level=5, equipment=(sword,))

    stats = compose_stats(character, warrior)

    assert stats.base.strength == 32
    assert stats.equipment == AttributeVector(strength=5)
    assert stats.total.strength == 37
    assert stats.total.stamina == 24
    assert stats.bonuses.health_regen == 5  # 1 + 24 // 10 + 2
    assert stats.bonuses.energy_regen == 3  # 2 + 10 // 8
    assert stats.bonuses.xp_multiplier == 1.0


def test_total_is_base_plus_equipment() -> None:
    rogue = _classes_repo.get("rogue")
    items = (
        make_item("bow", stats={"agility": 4}),
        make_item("cap", slot=EquipmentSlot.HEAD, stats={"defense": 2, "health": 5}),
    )
    stats = compose_stats(make_character(class_id="rogue", level=3, equipment=items), rogue)
    assert stats.total == stats.base + stats.equipment


@pytest.mark.parametrize(
    "class_id, health_regen, energy_regen",
    [
        ("warrior", 4, 2),  # stamina 16, intelligence 6
        ("mage", 2, 7),  # stamina 10, intelligence 20
        ("healer", 5, 6),  # stamina 12, intelligence 18
        ("rogue", 2, 3),  # stamina 14, intelligence 10
        ("archer", 2, 3),  # stamina 15, intelligence 12
    ],
)
def test_class_regen_bonuses_at_level_one(class_id: str, health_regen: int, energy_regen: int) -> None:
    class_def = _classes_repo.get(class_id)
    stats = compose_stats(make_character(class_id=class_id), class_def)
    assert stats.bonuses.health_regen == health_regen
    assert stats.bonuses.energy_regen == energy_regen


def test_regen_without_class_has_no_bonus() -> None:
    assert compute_health_regen(29, None) == 3
    assert compute_energy_regen(15, None) == 3


def test_unknown_class_falls_back_to_stored_attributes() -> None:
    stored = AttributeVector(health=90, energy=30, strength=11, stamina=20, intelligence=16)
    ring = make_item("ring", slot=EquipmentSlot.ACCESSORY2, stats={"strength": 1})
    character = make_character(class_id="paladin", level=7, attributes=stored, equipment=(ring,))

    stats = compose_stats(character, None)

    assert stats.base == stored
    assert stats.total.strength == 12
    assert stats.bonuses.xp_multiplier == 1.0
    assert stats.bonuses.coin_multiplier == 1.0
    assert stats.bonuses.health_regen == 3  # 1 + 20 // 10
    assert stats.bonuses.energy_regen == 4  # 2 + 16 // 8


def test_class_multipliers_are_copied() -> None:
    mage = _classes_repo.get("mage")
    stats = compose_stats(make_character(class_id="mage"), mage)
    assert stats.bonuses.xp_multiplier == 1.2
    assert stats.bonuses.coin_multiplier == 0.9


def test_recomposition_is_identical() -> None:
    warrior = _classes_repo.get("warrior")
    character = make_character(
        level=12,
        equipment=(make_item("sword", rarity=Rarity.EPIC, stats={"strength": 6, "agility": 2}),),
    )
    assert compose_stats(character, warrior) == compose_stats(character, warrior)


def test_max_health_and_energy() -> None:
    warrior = _classes_repo.get("warrior")
    stats = compose_stats(make_character(level=5), warrior)
    assert max_health(stats) == 266  # 100 + 24 * 5 + 23 * 2
    assert max_energy(stats) == 92  # 50 + 10 * 3 + 12
