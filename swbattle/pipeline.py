"""Intents and the resolver that plans, vets and executes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Planner = Callable[[Any, int], Optional["Intent"]]
Handler = Callable[[Any, Any], None]


class Intent:
    """Base of every intent; a pre-hook may cancel it before it executes."""

    cancelled: bool = False
    cancel_reason: str = ""

    def cancel(self, reason: str) -> None:
        self.cancelled = True
        self.cancel_reason = reason


class IntentChain:
    """Ordered list of intent types a unit tries on its turn."""

    def __init__(self) -> None:
        self._chain: list[type] = []

    def add(self, intent_type: type) -> "IntentChain":
        self._chain.append(intent_type)
        return self

    def __iter__(self) -> Iterator[type]:
        return iter(self._chain)

    def __len__(self) -> int:
        return len(self._chain)


@dataclass
class _Hooks:
    planner: Optional[Planner] = None
    pre: list[Handler] = field(default_factory=list)
    executor: Optional[Handler] = None
    post: list[Handler] = field(default_factory=list)


class IntentResolver:
    """Registry of planners, hooks and executors keyed by intent type."""

    def __init__(self) -> None:
        self._registry: dict[type, _Hooks] = {}

    def _hooks(self, intent_type: type) -> _Hooks:
        return self._registry.setdefault(intent_type, _Hooks())

    def get_planner(self, intent_type: type) -> Optional[Planner]:
        hooks = self._registry.get(intent_type)
        return hooks.planner if hooks is not None else None

    def set_planner(self, intent_type: type, func: Planner) -> None:
        self._hooks(intent_type).planner = func

    def set_executor(self, intent_type: type, func: Handler) -> None:
        self._hooks(intent_type).executor = func

    def subscribe(self, intent_type: type, func: Handler, is_post: bool = True) -> None:
        hooks = self._hooks(intent_type)
        (hooks.post if is_post else hooks.pre).append(func)

    def resolve(self, world: Any, intent: Intent) -> bool:
        """Run pre-hooks, the executor and post-hooks; True if the intent was handled."""
        hooks = self._registry.get(type(intent))
        if hooks is None:
            return False

        for hook in hooks.pre:
            hook(world, intent)
        if intent.cancelled:
            return True

        if hooks.executor is None:
            raise LookupError(f"No executor registered for {type(intent).__name__}")
        hooks.executor(world, intent)

        for hook in hooks.post:
            hook(world, intent)
        return True