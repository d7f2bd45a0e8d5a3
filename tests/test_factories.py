from pathlib import Path

import pytest

from fitrpg.data.repositories import ClassesRepository, EquipmentRepository
from fitrpg.domain.attributes import Attribute
from fitrpg.domain.equipment_aggregation import aggregate_equipped
from fitrpg.domain.equipment_types import EquipmentSlot, Rarity
from fitrpg.services.errors import FactoryError
from fitrpg.services.factories import create_character_from_class_id, create_equipment_from_def_id
from tests.helpers.builders import class_payload, make_definitions_dir, write_json


def test_create_character_from_class_starts_at_level_one(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    write_json(definitions_dir / "classes.json", {"warrior": class_payload()})
    classes_repo = ClassesRepository(base_path=definitions_dir)

    character = create_character_from_class_id(
        class_id="warrior",
        character_id="user_42",
        name="Aldric",
        classes_repo=classes_repo,
    )

    assert character.id == "user_42"
    assert character.name == "Aldric"
    assert character.level == 1
    assert character.attributes == classes_repo.get("warrior").base_stats
    assert character.equipment == ()
    assert character.xp == character.total_xp == 0
    assert character.xp_to_next_level == 100
    assert character.unlocked_abilities == ("shield_bash",)


def test_create_character_missing_class_raises_clean_error(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    write_json(definitions_dir / "classes.json", {"warrior": class_payload()})

    with pytest.raises(FactoryError):
        create_character_from_class_id(
            class_id="paladin",
            character_id="user_1",
            name="Nobody",
            classes_repo=ClassesRepository(base_path=definitions_dir),
        )


def test_create_equipment_copies_catalog_entry() -> None:
    sword = create_equipment_from_def_id(
        "weapon_sword_magic", EquipmentRepository(), is_equipped=True
    )

    assert sword.slot is EquipmentSlot.WEAPON
    assert sword.rarity is Rarity.RARE
    assert sword.item_type == "weapon"
    assert sword.is_equipped
    assert aggregate_equipped([sword]).get(Attribute.STRENGTH) == 5
    assert aggregate_equipped([sword]).get(Attribute.INTELLIGENCE) == 2


def test_create_equipment_defaults_to_unequipped() -> None:
    sword = create_equipment_from_def_id("weapon_sword_magic", EquipmentRepository())
    assert not sword.is_equipped
    assert aggregate_equipped([sword]).get(Attribute.STRENGTH) == 0


def test_create_equipment_missing_definition_raises_clean_error() -> None:
    with pytest.raises(FactoryError, match="weapon_unknown"):
        create_equipment_from_def_id("weapon_unknown", EquipmentRepository())
