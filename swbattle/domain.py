"""Components that describe units, the map and active effects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Map:
    width: int = 0
    height: int = 0

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass
class Health:
    hp: int = 0


@dataclass
class Melee:
    strength: int = 0


@dataclass
class MeleeAttackable:
    """Marks a unit as a valid melee target."""


@dataclass(frozen=True)
class PositionOffset:
    x: int = 0
    y: int = 0


@dataclass
class PositionOccupier:
    """Cells a unit occupies, as offsets from its anchor position."""

    offsets: list[PositionOffset] = field(default_factory=lambda: [PositionOffset(0, 0)])


@dataclass
class Ranged:
    agility: int = 0
    range: int = 0


@dataclass
class RangedAttackable:
    min_range_modifier: int = 0
    max_range_modifier: int = 0


@dataclass
class RangedPoisoning:
    chance: int = 0
    poison: int = 0


@dataclass
class RendingAbility:
    chance: int = 0
    rending: int = 0


@dataclass
class MarchTarget:
    position: Position = field(default_factory=Position)


@dataclass
class RendingEffectData:
    damage: int = 0


@dataclass
class PoisonEffectData:
    total_damage: int = 0
    applied_ticks: int = 0


EffectApplyFn = Callable[[Any, int, "ActiveEffect"], None]


@dataclass
class ActiveEffect:
    """An effect currently applied to a unit."""

    data: Any = None
    remaining_ticks: int = 0
    source_unit_id: int = 0
    apply_fn: Optional[EffectApplyFn] = None

    @property
    def data_type(self) -> type:
        return type(self.data)


@dataclass
class EffectImmunity:
    """Marks a unit as immune to effects."""


@dataclass
class EffectList:
    active: list[ActiveEffect] = field(default_factory=list)


class PendingPoisonDamage(dict):
    """Poison damage waiting to be dealt to one target, keyed by source unit."""


def create_effect(data: Any, ticks: int, source_unit_id: int, apply_fn: Optional[EffectApplyFn]) -> ActiveEffect:
    return ActiveEffect(data=data, remaining_ticks=ticks, source_unit_id=source_unit_id, apply_fn=apply_fn)