"""The world: components, units, turn order and the tick loop."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, Optional

from swbattle.domain import Map, Position
from swbattle.events import EventSystem, UnitDied, UnitSpawned
from swbattle.pipeline import Intent, IntentChain, IntentResolver


class World:
    """Holds every unit's components and advances the simulation tick by tick."""

    def __init__(self, events: EventSystem, rng: Optional[random.Random] = None) -> None:
        self.events = events
        self.rng = rng if rng is not None else random.Random()
        self.map = Map(0, 0)
        self.resolver = IntentResolver()
        self.creation_order: list[int] = []
        self.intent_chains: dict[int, IntentChain] = {}
        self.tick_system_order: list[type] = []
        self.post_tick_system_order: list[type] = []
        self._tick = 0
        self._next_unit_cursor = 0
        self._components: dict[type, dict[int, Any]] = {}

    @property
    def tick(self) -> int:
        return self._tick

    def component(self, kind: type) -> dict[int, Any]:
        """The table of components of one kind, keyed by unit id."""
        return self._components.setdefault(kind, {})

    def register_tick_system(self, intent_type: type, post_action: bool = False) -> None:
        (self.post_tick_system_order if post_action else self.tick_system_order).append(intent_type)

    def _is_alive(self, unit_id: int) -> bool:
        return unit_id in self.component(Position)

    def _execute_chain(self, unit_id: int, chain: Iterable[type], stop_on_success: bool) -> None:
        for intent_type in chain:
            planner = self.resolver.get_planner(intent_type)
            if planner is None:
                continue
            intent = planner(self, unit_id)
            if intent is None:
                continue
            if self.resolver.resolve(self, intent) and stop_on_success:
                break

    def _can_plan_any(self, unit_id: int, chain: Iterable[type]) -> bool:
        for intent_type in chain:
            planner = self.resolver.get_planner(intent_type)
            if planner is not None and planner(self, unit_id) is not None:
                return True
        return False

    def next_tick(self) -> None:
        """Run tick systems for every unit, then let the next unit in turn act."""
        self._tick += 1

        if not self.creation_order:
            self._next_unit_cursor = 0
            return

        for unit_id in list(self.creation_order):
            if self._is_alive(unit_id):
                self._execute_chain(unit_id, self.tick_system_order, False)

        count = len(self.creation_order)
        if count == 0:
            self._next_unit_cursor = 0
            return
        self._next_unit_cursor %= count

        for step in range(count):
            index = (self._next_unit_cursor + step) % count
            unit_id = self.creation_order[index]
            # Units no longer alive are skipped by the round-robin cursor.
            if not self._is_alive(unit_id):
                continue

            self._next_unit_cursor = (index + 1) % count
            chain = self.intent_chains.get(unit_id)
            if chain is not None:
                self._execute_chain(unit_id, chain, True)
            self._execute_chain(unit_id, self.post_tick_system_order, False)
            return

        self._next_unit_cursor = 0

    def is_game_over(self) -> bool:
        """True when no living unit can plan any tick-system or chain intent."""
        for unit_id in self.creation_order:
            if not self._is_alive(unit_id):
                continue
            if self._can_plan_any(unit_id, self.tick_system_order):
                return False
            chain = self.intent_chains.get(unit_id)
            if chain is not None and self._can_plan_any(unit_id, chain):
                return False
        return True

    def remove_all_components(self, unit_id: int) -> None:
        for table in self._components.values():
            table.pop(unit_id, None)

    def push_intent(self, intent: Intent) -> None:
        self.resolver.resolve(self, intent)

    def spawn(
        self,
        unit_id: int,
        unit_type: str,
        position: Position,
        setup: Optional[Callable[[], None]] = None,
    ) -> None:
        """Place a new unit, run its setup and announce it."""
        self.component(Position)[unit_id] = position
        self.creation_order.append(unit_id)
        if setup is not None:
            setup()
        self.events.event(self._tick, UnitSpawned(unit_id, unit_type, position.x, position.y))

    def destroy(self, unit_id: int) -> None:
        """Remove a unit and everything attached to it, and announce its death."""
        self.creation_order[:] = [uid for uid in self.creation_order if uid != unit_id]
        self.intent_chains.pop(unit_id, None)
        self.remove_all_components(unit_id)
        self.events.event(self._tick, UnitDied(unit_id))