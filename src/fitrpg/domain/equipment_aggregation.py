"""Equipment stat aggregation and comparison helpers.

Only pieces flagged ``is_equipped`` contribute. At most one equipped piece
per slot is a caller precondition; nothing here detects duplicates.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

from fitrpg.domain.attributes import ATTRIBUTE_ORDER, Attribute, AttributeVector
from fitrpg.domain.entities import EquipmentItem
from fitrpg.domain.equipment_types import EQUIPMENT_SLOTS, EquipmentSlot


@dataclass(frozen=True, slots=True)
class StatComparison:
    current: float
    new: float
    difference: float


def equipped_items(items: Iterable[EquipmentItem]) -> list[EquipmentItem]:
    return [item for item in items if item.is_equipped]


def aggregate_equipped(items: Iterable[EquipmentItem]) -> AttributeVector:
    """Sum the stats of equipped items; absent keys count as zero."""
    totals: Dict[Attribute, float] = {attribute: 0 for attribute in ATTRIBUTE_ORDER}
    for item in equipped_items(items):
        for key, value in item.stats.items():
            totals[Attribute(key)] += value
    return AttributeVector.from_mapping(totals)


def equipped_by_slot(items: Sequence[EquipmentItem]) -> Dict[EquipmentSlot, EquipmentItem | None]:
    """Map every slot to its equipped item, or None when the slot is empty."""
    slots: Dict[EquipmentSlot, EquipmentItem | None] = {slot: None for slot in EQUIPMENT_SLOTS}
    for item in equipped_items(items):
        slot = EquipmentSlot(item.slot)
        if slots[slot] is None:
            slots[slot] = item
    return slots


def compare_equipment(
    current: EquipmentItem | None,
    candidate: EquipmentItem,
) -> Dict[Attribute, StatComparison]:
    """Per-attribute difference between the current piece and a candidate.

    Attributes appear in canonical order and only when either item has them.
    """
    current_stats = {Attribute(key): value for key, value in (current.stats if current else {}).items()}
    candidate_stats = {Attribute(key): value for key, value in candidate.stats.items()}
    comparison: Dict[Attribute, StatComparison] = {}
    for attribute in ATTRIBUTE_ORDER:
        if attribute not in current_stats and attribute not in candidate_stats:
            continue
        current_value = current_stats.get(attribute, 0)
        new_value = candidate_stats.get(attribute, 0)
        comparison[attribute] = StatComparison(
            current=current_value,
            new=new_value,
            difference=new_value - current_value,
        )
    return comparison
