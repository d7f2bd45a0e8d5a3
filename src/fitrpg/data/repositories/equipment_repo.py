"""Equipment catalog repository."""
from __future__ import annotations

from typing import Dict

from fitrpg.data.errors import DataRangeError, DataValidationError
from fitrpg.data.repositories.base import RepositoryBase
from fitrpg.domain.attributes import Attribute
from fitrpg.domain.defs import EquipmentDef
from fitrpg.domain.equipment_types import ITEM_TYPES, EquipmentSlot, Rarity, parse_rarity


class EquipmentRepository(RepositoryBase[EquipmentDef]):
    """Loads and validates equipment definitions.

    Unknown rarities are kept as plain strings so newer content still loads;
    scoring treats them as common.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("equipment.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EquipmentDef]:
        equipment: Dict[str, EquipmentDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Equipment IDs must be strings.")
            item_data = self._require_mapping(payload, f"equipment '{raw_id}'")
            self._assert_exact_fields(
                item_data,
                {"name", "type", "slot", "rarity", "stats"},
                f"equipment '{raw_id}'",
                optional_fields={"description", "icon"},
            )

            name = self._require_str(item_data["name"], f"equipment '{raw_id}' name")
            item_type = self._require_item_type(item_data["type"], f"equipment '{raw_id}' type")
            slot = self._require_slot(item_data["slot"], f"equipment '{raw_id}' slot")
            rarity = self._require_rarity(item_data["rarity"], f"equipment '{raw_id}' rarity")
            stats = self._require_stats(item_data["stats"], f"equipment '{raw_id}' stats")
            description = self._require_str(
                item_data.get("description", ""), f"equipment '{raw_id}' description"
            )
            icon = self._require_str(item_data.get("icon", ""), f"equipment '{raw_id}' icon")

            equipment[raw_id] = EquipmentDef(
                id=raw_id,
                name=name,
                item_type=item_type,
                slot=slot,
                rarity=rarity,
                stats=stats,
                description=description,
                icon=icon,
            )
        return equipment

    def for_slot(self, slot: EquipmentSlot | str) -> list[EquipmentDef]:
        """Return all definitions for ``slot`` sorted by id."""
        target = EquipmentSlot(slot)
        return [definition for definition in self.all() if definition.slot is target]

    def _require_item_type(self, value: object, context: str) -> str:
        item_type = self._require_str(value, context)
        if item_type not in ITEM_TYPES:
            raise DataValidationError(f"{context} must be one of {', '.join(ITEM_TYPES)}.")
        return item_type

    def _require_slot(self, value: object, context: str) -> EquipmentSlot:
        slot = self._require_str(value, context)
        try:
            return EquipmentSlot(slot)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in EquipmentSlot)
            raise DataValidationError(f"{context} must be one of {allowed}.") from exc

    def _require_rarity(self, value: object, context: str) -> Rarity | str:
        rarity = self._require_str(value, context)
        if not rarity:
            raise DataValidationError(f"{context} must not be empty.")
        return parse_rarity(rarity) or rarity

    def _require_stats(self, value: object, context: str) -> dict[Attribute, float]:
        data = self._require_mapping(value, context)
        stats: dict[Attribute, float] = {}
        for key, raw_value in data.items():
            try:
                attribute = Attribute(key)
            except ValueError as exc:
                raise DataValidationError(f"{context} has unknown attribute '{key}'.") from exc
            number = self._require_number(raw_value, f"{context} {key}")
            if number < 0:
                raise DataRangeError(f"{context} {key} must be non-negative.")
            stats[attribute] = number
        return stats
