"""Scenario commands: creating the map, spawning units and ordering marches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from swbattle.domain import (
    Health,
    Map,
    MarchTarget,
    Melee,
    MeleeAttackable,
    Position,
    PositionOccupier,
    Ranged,
    RangedAttackable,
    RangedPoisoning,
    RendingAbility,
)
from swbattle.events import MapCreated, MarchStarted
from swbattle.intents import MarchIntent, MeleeAttackIntent, RangedAttackIntent
from swbattle.pipeline import IntentChain


@dataclass
class CreateMap:
    NAME: ClassVar[str] = "CREATE_MAP"
    width: int = 0
    height: int = 0

    def execute(self, world) -> None:
        world.map = Map(self.width, self.height)
        world.events.event(world.tick, MapCreated(self.width, self.height))


@dataclass
class March:
    NAME: ClassVar[str] = "MARCH"
    unit_id: int = 0
    target_x: int = 0
    target_y: int = 0

    def execute(self, world) -> None:
        current = world.component(Position).get(self.unit_id)
        if current is None:
            return
        target = Position(self.target_x, self.target_y)
        world.component(MarchTarget)[self.unit_id] = MarchTarget(target)
        world.events.event(
            world.tick, MarchStarted(self.unit_id, current.x, current.y, target.x, target.y)
        )


def _chain(world, unit_id: int) -> IntentChain:
    return world.intent_chains.setdefault(unit_id, IntentChain())


@dataclass
class SpawnHunter:
    NAME: ClassVar[str] = "SPAWN_HUNTER"
    unit_id: int = 0
    x: int = 0
    y: int = 0
    hp: int = 0
    agility: int = 0
    strength: int = 0
    range: int = 0
    chance: int = 0
    poison: int = 0

    def execute(self, world) -> None:
        def setup() -> None:
            uid = self.unit_id
            world.component(PositionOccupier)[uid] = PositionOccupier()
            world.component(MarchTarget)[uid] = MarchTarget(Position(self.x, self.y))
            world.component(Health)[uid] = Health(self.hp)
            world.component(Melee)[uid] = Melee(self.strength)
            world.component(Ranged)[uid] = Ranged(self.agility, self.range)
            world.component(MeleeAttackable)[uid] = MeleeAttackable()
            world.component(RangedAttackable)[uid] = RangedAttackable()
            world.component(RangedPoisoning)[uid] = RangedPoisoning(self.chance, self.poison)
            _chain(world, uid).add(RangedAttackIntent).add(MeleeAttackIntent).add(MarchIntent)

        world.spawn(self.unit_id, "hunter", Position(self.x, self.y), setup)


@dataclass
class SpawnSwordsman:
    NAME: ClassVar[str] = "SPAWN_SWORDSMAN"
    unit_id: int = 0
    x: int = 0
    y: int = 0
    hp: int = 0
    strength: int = 0
    chance: int = 0
    rending: int = 0

    def execute(self, world) -> None:
        def setup() -> None:
            uid = self.unit_id
            world.component(PositionOccupier)[uid] = PositionOccupier()
            world.component(MarchTarget)[uid] = MarchTarget(Position(self.x, self.y))
            world.component(Health)[uid] = Health(self.hp)
            world.component(Melee)[uid] = Melee(self.strength)
            world.component(MeleeAttackable)[uid] = MeleeAttackable()
            world.component(RangedAttackable)[uid] = RangedAttackable()
            world.component(RendingAbility)[uid] = RendingAbility(self.chance, self.rending)
            _chain(world, uid).add(MeleeAttackIntent).add(MarchIntent)

        world.spawn(self.unit_id, "swordsman", Position(self.x, self.y), setup)


COMMANDS = (CreateMap, March, SpawnHunter, SpawnSwordsman)


def register_commands(world, parser) -> None:
    """Make every scenario command known to the parser, acting on the world."""
    for command_type in COMMANDS:
        parser.add(command_type, lambda command: command.execute(world))