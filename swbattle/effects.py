"""Lasting effects: applying them, ticking them and dealing their damage."""

from __future__ import annotations

from typing import Optional

from swbattle.domain import (
    ActiveEffect,
    EffectImmunity,
    EffectList,
    PendingPoisonDamage,
    PoisonEffectData,
    RendingEffectData,
    create_effect,
)
from swbattle.intents import AddEffectIntent, DamageIntent, EffectsTickIntent, EffectType

POISON_TICKS = 5


def has_effect(world, unit_id: int, data_type: type) -> bool:
    effect_list = world.component(EffectList).get(unit_id)
    if effect_list is None:
        return False
    return any(effect.data_type is data_type for effect in effect_list.active)


def apply_poison(world, target_id: int, effect: ActiveEffect) -> None:
    """Queue one tick's share of the poison, doubled while the target is rent."""
    data: PoisonEffectData = effect.data
    base, remainder = divmod(data.total_damage, POISON_TICKS)
    tick_damage = base + (1 if data.applied_ticks < remainder else 0)

    if target_id in world.component(RendingEffectData):
        tick_damage *= 2

    if tick_damage > 0:
        pending = world.component(PendingPoisonDamage).setdefault(target_id, PendingPoisonDamage())
        pending[effect.source_unit_id] = pending.get(effect.source_unit_id, 0) + tick_damage

    data.applied_ticks += 1


def apply_rending(world, target_id: int, effect: ActiveEffect) -> None:
    """Rending only marks the target; its damage is dealt by the attack itself."""


def _flush_pending_poison(world, target_id: int) -> None:
    pending = world.component(PendingPoisonDamage).pop(target_id, None)
    if pending is None:
        return
    for source_id, damage in dict(pending).items():
        world.push_intent(DamageIntent(source_id, target_id, damage, "poison"))


def plan_tick(world, unit_id: int) -> Optional[EffectsTickIntent]:
    effect_list = world.component(EffectList).get(unit_id)
    if effect_list is None or not effect_list.active:
        return None
    return EffectsTickIntent(unit_id)


def _apply_and_age(world, target_id: int, effect: ActiveEffect) -> bool:
    """Apply an effect once and count down; True while it remains active."""
    if effect.apply_fn is not None:
        effect.apply_fn(world, target_id, effect)
    if effect.remaining_ticks > 0:
        effect.remaining_ticks -= 1
    return effect.remaining_ticks > 0


def execute_tick(world, intent: EffectsTickIntent) -> None:
    target_id = intent.unit_id
    effect_list = world.component(EffectList).get(target_id)
    if effect_list is None:
        return

    effect_list.active[:] = [effect for effect in effect_list.active if _apply_and_age(world, target_id, effect)]

    if not any(effect.data_type is RendingEffectData for effect in effect_list.active):
        world.component(RendingEffectData).pop(target_id, None)

    _flush_pending_poison(world, target_id)


def add_effect(world, intent: AddEffectIntent) -> None:
    """Attach an effect to the target unless it is immune; poison bites at once."""
    if intent.target_id in world.component(EffectImmunity):
        return

    active = world.component(EffectList).setdefault(intent.target_id, EffectList()).active

    if intent.effect_type is EffectType.POISON:
        effect = create_effect(
            PoisonEffectData(intent.damage, 0), intent.duration, intent.source_id, apply_poison
        )
        active.append(effect)
        if not _apply_and_age(world, intent.target_id, effect):
            active.remove(effect)
        _flush_pending_poison(world, intent.target_id)
    elif intent.effect_type is EffectType.RENDING:
        active.append(
            create_effect(RendingEffectData(intent.damage), intent.duration, intent.source_id, apply_rending)
        )
        world.component(RendingEffectData)[intent.target_id] = RendingEffectData(intent.damage)