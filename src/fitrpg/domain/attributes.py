"""Attribute vector shared by classes, equipment and calculated stats."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterator, Mapping


class Attribute(str, Enum):
    """The seven character attributes."""

    HEALTH = "health"
    ENERGY = "energy"
    STRENGTH = "strength"
    AGILITY = "agility"
    INTELLIGENCE = "intelligence"
    STAMINA = "stamina"
    DEFENSE = "defense"


ATTRIBUTE_ORDER: tuple[Attribute, ...] = tuple(Attribute)


@dataclass(frozen=True, slots=True)
class AttributeVector:
    """Dense 7-tuple of attribute values; missing values are zero."""

    health: float = 0
    energy: float = 0
    strength: float = 0
    agility: float = 0
    intelligence: float = 0
    stamina: float = 0
    defense: float = 0

    @classmethod
    def zero(cls) -> AttributeVector:
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[Attribute | str, float]) -> AttributeVector:
        """Build a vector from a sparse mapping keyed by Attribute or its name."""
        kwargs: dict[str, float] = {}
        for key, value in values.items():
            attribute = Attribute(key)
            kwargs[attribute.value] = value
        return cls(**kwargs)

    def get(self, attribute: Attribute | str) -> float:
        return getattr(self, Attribute(attribute).value)

    def plus(self, other: AttributeVector) -> AttributeVector:
        return AttributeVector(
            **{name: getattr(self, name) + getattr(other, name) for name in _FIELD_NAMES}
        )

    def scaled(self, factor: float) -> AttributeVector:
        return AttributeVector(**{name: getattr(self, name) * factor for name in _FIELD_NAMES})

    def items(self) -> Iterator[tuple[Attribute, float]]:
        for attribute in ATTRIBUTE_ORDER:
            yield attribute, getattr(self, attribute.value)

    def as_dict(self) -> dict[str, float]:
        return {attribute.value: value for attribute, value in self.items()}

    def __add__(self, other: object) -> AttributeVector:
        if not isinstance(other, AttributeVector):
            return NotImplemented
        return self.plus(other)


_FIELD_NAMES: tuple[str, ...] = tuple(field.name for field in fields(AttributeVector))
