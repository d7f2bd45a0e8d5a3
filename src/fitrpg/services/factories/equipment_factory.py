"""Factory for inventory items built from the equipment catalog."""
from __future__ import annotations

from fitrpg.data.repositories import EquipmentRepository
from fitrpg.domain.entities import EquipmentItem
from fitrpg.services.errors import FactoryError


def create_equipment_from_def_id(
    def_id: str,
    equipment_repo: EquipmentRepository,
    *,
    is_equipped: bool = False,
) -> EquipmentItem:
    """Instantiate an inventory item from the equipment catalog."""
    try:
        definition = equipment_repo.get(def_id)
    except KeyError as exc:
        raise FactoryError(f"Equipment '{def_id}' not found.") from exc
    return EquipmentItem.from_def(definition, is_equipped=is_equipped)
