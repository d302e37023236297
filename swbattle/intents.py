"""Intents produced by the planners and consumed by the executors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from swbattle.domain import Position
from swbattle.pipeline import Intent


class EffectType(Enum):
    POISON = "poison"
    RENDING = "rending"


@dataclass
class AddEffectIntent(Intent):
    """Apply an effect from one unit to another."""

    source_id: int
    target_id: int
    effect_type: EffectType
    duration: int
    damage: int


@dataclass
class DamageIntent(Intent):
    """Deal damage to a unit; attack_type is e.g. "melee", "ranged", "poison"."""

    attacker_id: int
    target_id: int
    damage: int
    attack_type: str


@dataclass
class DeathIntent(Intent):
    unit_id: int


@dataclass
class EffectsTickIntent(Intent):
    unit_id: int


@dataclass
class MarchIntent(Intent):
    unit_id: int
    pos_from: Position
    pos_to: Position


@dataclass
class MeleeAttackIntent(Intent):
    attacker_id: int
    target_id: int


@dataclass
class RangedAttackIntent(Intent):
    attacker_id: int
    target_id: int