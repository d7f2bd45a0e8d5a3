"""Level-based attribute growth and the shared experience curve."""
from __future__ import annotations

import math

from fitrpg.domain.attributes import AttributeVector
from fitrpg.domain.defs import ClassDef
from fitrpg.domain.errors import InvalidLevelError

BASE_XP_REQUIREMENT = 100
XP_GROWTH_RATE = 1.5
# The curve overflows a float a little above level 1750.
MAX_LEVEL = 1000


def require_level(level: object) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(f"Level must be an integer, got {level!r}.")
    if level < 1:
        raise InvalidLevelError(f"Level must be at least 1, got {level}.")
    if level > MAX_LEVEL:
        raise InvalidLevelError(f"Level must be at most {MAX_LEVEL}, got {level}.")
    return level


def stats_for_level(class_def: ClassDef, level: int) -> AttributeVector:
    """Return ``base + growth * (level - 1)`` for every attribute."""
    levels_gained = require_level(level) - 1
    return class_def.base_stats + class_def.stat_growth.scaled(levels_gained)


def xp_required_for_level(level: int) -> int:
    """Experience needed to advance from ``level`` to the next one."""
    exponent = require_level(level) - 1
    return math.floor(BASE_XP_REQUIREMENT * XP_GROWTH_RATE**exponent)
