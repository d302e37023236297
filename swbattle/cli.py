"""Command line entry: read a scenario and run the battle to its end."""

from __future__ import annotations

import random
import sys
from typing import Iterable, Optional, TextIO

from swbattle import combat, effects, march
from swbattle.commands import register_commands
from swbattle.events import EventSystem
from swbattle.intents import (
    AddEffectIntent,
    DamageIntent,
    DeathIntent,
    EffectsTickIntent,
    MarchIntent,
    MeleeAttackIntent,
    RangedAttackIntent,
)
from swbattle.parser import CommandParser
from swbattle.world import World


def build_world(events: EventSystem, rng: Optional[random.Random] = None) -> tuple[World, CommandParser]:
    """A world with every system wired in, and a parser that knows every command."""
    world = World(events, rng)
    parser = CommandParser()
    register_commands(world, parser)

    resolver = world.resolver

    resolver.set_planner(EffectsTickIntent, effects.plan_tick)
    resolver.set_executor(EffectsTickIntent, effects.execute_tick)
    world.register_tick_system(EffectsTickIntent)

    resolver.set_planner(DeathIntent, combat.plan_death)
    resolver.set_executor(DeathIntent, combat.execute_death)
    world.register_tick_system(DeathIntent)
    world.register_tick_system(DeathIntent, True)

    resolver.set_planner(RangedAttackIntent, combat.plan_ranged)
    resolver.subscribe(RangedAttackIntent, combat.poison_before_ranged, False)
    resolver.set_executor(RangedAttackIntent, combat.execute_ranged)

    resolver.set_planner(MeleeAttackIntent, combat.plan_melee)
    resolver.set_executor(MeleeAttackIntent, combat.execute_melee)

    resolver.set_planner(MarchIntent, march.plan)
    resolver.set_executor(MarchIntent, march.execute)
    resolver.subscribe(MarchIntent, march.on_after_move)

    resolver.set_executor(DamageIntent, combat.apply_damage)
    resolver.set_executor(AddEffectIntent, effects.add_effect)

    return world, parser


def run(lines: Iterable[str], stream: Optional[TextIO] = None, rng: Optional[random.Random] = None) -> World:
    """Run a scenario until no unit can act; events go to the stream."""
    world, parser = build_world(EventSystem(stream), rng)
    parser.parse(lines)
    while not world.is_game_over():
        world.next_tick()
    return world


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("Error: No file specified in command line argument")

    path = args[0]
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Error: File not found - {path}") from exc

    with handle:
        run(handle)
    return 0


if __name__ == "__main__":
    sys.exit(main())