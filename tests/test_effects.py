import io

import pytest

from swbattle import effects
from swbattle.domain import EffectImmunity, EffectList, PendingPoisonDamage, PoisonEffectData, RendingEffectData
from swbattle.events import EventSystem
from swbattle.intents import AddEffectIntent, DamageIntent, EffectsTickIntent, EffectType
from swbattle.world import World


@pytest.fixture
def world():
    return World(EventSystem(io.StringIO()))


@pytest.fixture
def damage_log(world):
    captured = []
    world.resolver.set_executor(DamageIntent, lambda w, i: captured.append(i))
    return captured


def run_ticks(world, unit_id):
    while (intent := effects.plan_tick(world, unit_id)) is not None:
        effects.execute_tick(world, intent)


def test_poison_deals_total_damage_over_ticks(world, damage_log):
    effects.add_effect(world, AddEffectIntent(1, 2, EffectType.POISON, 5, 7))
    assert len(damage_log) == 1
    run_ticks(world, 2)
    assert sum(i.damage for i in damage_log) == 7
    assert all(i.attack_type == "poison" and i.attacker_id == 1 and i.target_id == 2 for i in damage_log)
    assert [i.damage for i in damage_log] == [2, 2, 1, 1, 1]
    assert world.component(EffectList)[2].active == []
    assert 2 not in world.component(PendingPoisonDamage)


def test_poison_doubled_while_rent(world, damage_log):
    world.component(RendingEffectData)[2] = RendingEffectData(0)
    effects.add_effect(world, AddEffectIntent(1, 2, EffectType.POISON, 5, 5))
    assert [i.damage for i in damage_log] == [2]


def test_small_poison_skips_zero_ticks(world, damage_log):
    effects.add_effect(world, AddEffectIntent(1, 2, EffectType.POISON, 5, 2))
    run_ticks(world, 2)
    assert sum(i.damage for i in damage_log) == 2
    assert all(i.damage > 0 for i in damage_log)


def test_immune_target_gets_nothing(world, damage_log):
    world.component(EffectImmunity)[2] = EffectImmunity()
    effects.add_effect(world, AddEffectIntent(1, 2, EffectType.POISON, 5, 10))
    assert damage_log == []
    assert 2 not in world.component(EffectList)
    assert effects.plan_tick(world, 2) is None


def test_rending_marks_and_expires(world, damage_log):
    effects.add_effect(world, AddEffectIntent(1, 2, EffectType.RENDING, 1, 0))
    assert 2 in world.component(RendingEffectData)
    assert effects.has_effect(world, 2, RendingEffectData)
    assert not effects.has_effect(world, 2, PoisonEffectData)
    assert effects.plan_tick(world, 2) == EffectsTickIntent(2)
    run_ticks(world, 2)
    assert 2 not in world.component(RendingEffectData)
    assert not effects.has_effect(world, 2, RendingEffectData)
    assert damage_log == []


def test_has_effect_unknown_unit(world):
    assert effects.has_effect(world, 42, PoisonEffectData) is False


def test_execute_tick_without_list_is_harmless(world, damage_log):
    effects.execute_tick(world, EffectsTickIntent(9))
    assert damage_log == []
    assert 9 not in world.component(EffectList)


def test_apply_poison_accumulates_per_source(world):
    effect = effects.create_effect(PoisonEffectData(10, 0), 5, 3, effects.apply_poison)
    effects.apply_poison(world, 2, effect)
    effects.apply_poison(world, 2, effect)
    assert effect.data.applied_ticks == 2
    assert dict(world.component(PendingPoisonDamage)[2]) == {3: 4}


def test_apply_rending_changes_nothing(world):
    effect = effects.create_effect(RendingEffectData(5), 1, 1, effects.apply_rending)
    effects.apply_rending(world, 2, effect)
    assert effect.remaining_ticks == 1
    assert world.component(PendingPoisonDamage) == {}