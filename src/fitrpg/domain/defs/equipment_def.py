"""Equipment definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from fitrpg.domain.attributes import Attribute
from fitrpg.domain.equipment_types import EquipmentSlot, Rarity


@dataclass(frozen=True, slots=True)
class EquipmentDef:
    """Catalog entry for an equipment piece before it enters an inventory."""

    id: str
    name: str
    item_type: str
    slot: EquipmentSlot
    rarity: Rarity | str
    stats: Mapping[Attribute, float] = field(default_factory=dict, hash=False)
    description: str = ""
    icon: str = ""

    def __post_init__(self) -> None:
        # Catalog entries are shared; their stats stay read-only.
        object.__setattr__(self, "stats", MappingProxyType(dict(self.stats)))
