"""Equipment runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from fitrpg.domain.attributes import Attribute
from fitrpg.domain.defs import EquipmentDef
from fitrpg.domain.equipment_types import EquipmentSlot, Rarity


@dataclass(frozen=True, slots=True)
class EquipmentItem:
    """An owned equipment piece; only equipped pieces contribute stats.

    ``stats`` is copied into a read-only mapping and left out of the hash,
    so items (and characters holding them) can be used as dict keys.
    """

    id: str
    name: str
    slot: EquipmentSlot
    rarity: Rarity | str
    stats: Mapping[Attribute, float] = field(default_factory=dict, hash=False)
    is_equipped: bool = False
    item_type: str = "armor"
    description: str = ""
    icon: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "stats", MappingProxyType(dict(self.stats)))

    @classmethod
    def from_def(cls, definition: EquipmentDef, *, is_equipped: bool = False) -> EquipmentItem:
        """Instantiate an inventory item from a catalog definition."""
        return cls(
            id=definition.id,
            name=definition.name,
            slot=definition.slot,
            rarity=definition.rarity,
            stats=definition.stats,
            is_equipped=is_equipped,
            item_type=definition.item_type,
            description=definition.description,
            icon=definition.icon,
        )
