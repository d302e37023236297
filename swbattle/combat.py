"""Melee and ranged attacks, poisoning, damage and death."""

from __future__ import annotations

from typing import Optional

from swbattle.domain import (
    Health,
    Melee,
    MeleeAttackable,
    Position,
    Ranged,
    RangedAttackable,
    RangedPoisoning,
    RendingAbility,
)
from swbattle.events import UnitAbilityUsed, UnitAttacked
from swbattle.intents import (
    AddEffectIntent,
    DamageIntent,
    DeathIntent,
    EffectType,
    MeleeAttackIntent,
    RangedAttackIntent,
)
from swbattle.march import find_targets, occupied_cells

ROLL_SIDES = 1000
MIN_RANGED_DISTANCE = 2
POISON_DURATION = 5


def _roll(world) -> int:
    """A chance roll from 1 to 1000, compared against ability chances."""
    return world.rng.randint(1, ROLL_SIDES)


def _can_act(world, attacker_id: int, weapon: type) -> bool:
    health = world.component(Health).get(attacker_id)
    if health is None or attacker_id not in world.component(weapon) or health.hp == 0:
        return False
    return attacker_id in world.component(Position)


def _is_alive(world, unit_id: int) -> bool:
    health = world.component(Health).get(unit_id)
    return health is not None and health.hp > 0


def plan_melee(world, attacker_id: int) -> Optional[MeleeAttackIntent]:
    """Pick a random living, melee-attackable neighbour to strike."""
    if not _can_act(world, attacker_id, Melee):
        return None

    attackable = world.component(MeleeAttackable)
    alive = [
        unit_id
        for unit_id in find_targets(world, attacker_id)
        if _is_alive(world, unit_id) and unit_id in attackable
    ]
    if not alive:
        return None
    return MeleeAttackIntent(attacker_id, world.rng.choice(alive))


def execute_melee(world, intent: MeleeAttackIntent) -> None:
    """Strike the target, possibly with a rending blow."""
    attacker_id, target_id = intent.attacker_id, intent.target_id
    melee = world.component(Melee).setdefault(attacker_id, Melee())

    damage = melee.strength
    attack_type = "melee"
    ability = world.component(RendingAbility).get(attacker_id)
    if ability is not None and _roll(world) <= ability.chance:
        damage = ability.rending
        attack_type = "rending"
        world.push_intent(AddEffectIntent(attacker_id, target_id, EffectType.RENDING, 1, 0))
        world.events.event(world.tick, UnitAbilityUsed(attacker_id, target_id, "rending"))

    world.push_intent(DamageIntent(attacker_id, target_id, damage, attack_type))


def chebyshev_distance(lhs: Position, rhs: Position) -> int:
    return max(abs(lhs.x - rhs.x), abs(lhs.y - rhs.y))


def distance_between_units(world, lhs_id: int, rhs_id: int) -> int:
    """Smallest Chebyshev distance between any cells of two units; 0 if either is absent."""
    lhs_cells = occupied_cells(world, lhs_id)
    rhs_cells = occupied_cells(world, rhs_id)
    if not lhs_cells or not rhs_cells:
        return 0
    return min(chebyshev_distance(lhs, rhs) for lhs in lhs_cells for rhs in rhs_cells)


def plan_ranged(world, attacker_id: int) -> Optional[RangedAttackIntent]:
    """Pick a random target within range, unless a living enemy stands adjacent."""
    if not _can_act(world, attacker_id, Ranged):
        return None

    if any(_is_alive(world, unit_id) for unit_id in find_targets(world, attacker_id)):
        return None

    ranged = world.component(Ranged)[attacker_id]
    attackable = world.component(RangedAttackable)
    targets = []
    for target_id in world.component(Position):
        if target_id == attacker_id or not _is_alive(world, target_id):
            continue
        modifiers = attackable.get(target_id)
        if modifiers is None:
            continue

        min_range = max(0, MIN_RANGED_DISTANCE + modifiers.min_range_modifier)
        max_range = max(0, ranged.range + modifiers.max_range_modifier)
        if max_range < min_range:
            continue

        if min_range <= distance_between_units(world, attacker_id, target_id) <= max_range:
            targets.append(target_id)

    if not targets:
        return None
    return RangedAttackIntent(attacker_id, world.rng.choice(targets))


def execute_ranged(world, intent: RangedAttackIntent) -> None:
    ranged = world.component(Ranged).setdefault(intent.attacker_id, Ranged())
    world.push_intent(DamageIntent(intent.attacker_id, intent.target_id, ranged.agility, "ranged"))


def poison_before_ranged(world, intent: RangedAttackIntent) -> None:
    """May replace a ranged shot with a poisoning of the target."""
    ability = world.component(RangedPoisoning).get(intent.attacker_id)
    if ability is None:
        return
    if _roll(world) > ability.chance:
        return

    intent.cancel("ranged_poisoning")
    world.push_intent(
        AddEffectIntent(intent.attacker_id, intent.target_id, EffectType.POISON, POISON_DURATION, ability.poison)
    )
    world.events.event(world.tick, UnitAbilityUsed(intent.attacker_id, intent.target_id, "poison"))


def apply_damage(world, intent: DamageIntent) -> None:
    """Lower the target's health; a unit brought to zero dies."""
    health = world.component(Health).get(intent.target_id)
    if health is None or health.hp == 0:
        return

    health.hp = max(health.hp - intent.damage, 0)
    world.events.event(
        world.tick,
        UnitAttacked(intent.attacker_id, intent.target_id, intent.damage, health.hp, intent.attack_type),
    )
    if health.hp == 0:
        world.push_intent(DeathIntent(intent.target_id))


def plan_death(world, unit_id: int) -> Optional[DeathIntent]:
    health = world.component(Health).get(unit_id)
    if health is not None and health.hp == 0:
        return DeathIntent(unit_id)
    return None


def execute_death(world, intent: DeathIntent) -> None:
    world.destroy(intent.unit_id)