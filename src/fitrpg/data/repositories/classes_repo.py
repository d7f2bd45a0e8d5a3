"""Class catalog repository with attribute validation."""
from __future__ import annotations

from typing import Dict

from fitrpg.data.errors import DataRangeError, DataValidationError
from fitrpg.data.repositories.base import RepositoryBase
from fitrpg.domain.attributes import ATTRIBUTE_ORDER, AttributeVector
from fitrpg.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads character classes; every class carries a full attribute vector."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Class IDs must be strings.")
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(
                class_data,
                {"name", "base_stats", "stat_growth", "bonus_xp_multiplier", "bonus_coin_multiplier"},
                f"class '{raw_id}'",
                optional_fields={"icon", "description", "starting_abilities", "class_abilities"},
            )

            name = self._require_str(class_data["name"], f"class '{raw_id}' name")
            icon = self._require_str(class_data.get("icon", ""), f"class '{raw_id}' icon")
            description = self._require_str(
                class_data.get("description", ""), f"class '{raw_id}' description"
            )
            base_stats = self._require_attribute_vector(
                class_data["base_stats"], f"class '{raw_id}' base_stats"
            )
            stat_growth = self._require_attribute_vector(
                class_data["stat_growth"], f"class '{raw_id}' stat_growth"
            )
            starting_abilities = tuple(
                self._require_str_list(
                    class_data.get("starting_abilities", []), f"class '{raw_id}' starting_abilities"
                )
            )
            class_abilities = tuple(
                self._require_str_list(
                    class_data.get("class_abilities", []), f"class '{raw_id}' class_abilities"
                )
            )
            bonus_xp_multiplier = self._require_multiplier(
                class_data["bonus_xp_multiplier"], f"class '{raw_id}' bonus_xp_multiplier"
            )
            bonus_coin_multiplier = self._require_multiplier(
                class_data["bonus_coin_multiplier"], f"class '{raw_id}' bonus_coin_multiplier"
            )

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=name,
                icon=icon,
                description=description,
                base_stats=base_stats,
                stat_growth=stat_growth,
                starting_abilities=starting_abilities,
                class_abilities=class_abilities,
                bonus_xp_multiplier=bonus_xp_multiplier,
                bonus_coin_multiplier=bonus_coin_multiplier,
            )
        return classes

    def _require_attribute_vector(self, value: object, context: str) -> AttributeVector:
        data = self._require_mapping(value, context)
        self._assert_exact_fields(data, {attribute.value for attribute in ATTRIBUTE_ORDER}, context)
        values: dict[str, float] = {}
        for attribute in ATTRIBUTE_ORDER:
            number = self._require_number(data[attribute.value], f"{context} {attribute.value}")
            if number < 0:
                raise DataRangeError(f"{context} {attribute.value} must be non-negative.")
            values[attribute.value] = number
        return AttributeVector.from_mapping(values)

    def _require_multiplier(self, value: object, context: str) -> float:
        number = self._require_number(value, context)
        if number <= 0:
            raise DataRangeError(f"{context} must be positive.")
        return float(number)
