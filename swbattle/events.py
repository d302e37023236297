"""Simulation events and the log they are written to."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Optional, TextIO


def _field(label: str, default: Any = 0) -> Any:
    return field(default=default, metadata={"label": label})


@dataclass(frozen=True)
class MapCreated:
    NAME: ClassVar[str] = "MAP_CREATED"
    width: int = _field("width")
    height: int = _field("height")


@dataclass(frozen=True)
class UnitDied:
    NAME: ClassVar[str] = "UNIT_DIED"
    unit_id: int = _field("unitId")


@dataclass(frozen=True)
class UnitMoved:
    NAME: ClassVar[str] = "UNIT_MOVED"
    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")


@dataclass(frozen=True)
class UnitSpawned:
    NAME: ClassVar[str] = "UNIT_SPAWNED"
    unit_id: int = _field("unitId")
    unit_type: str = _field("unitType", "")
    x: int = _field("x")
    y: int = _field("y")


@dataclass(frozen=True)
class MarchStarted:
    NAME: ClassVar[str] = "MARCH_STARTED"
    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")
    target_x: int = _field("targetX")
    target_y: int = _field("targetY")


@dataclass(frozen=True)
class MarchEnded:
    NAME: ClassVar[str] = "MARCH_ENDED"
    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")


@dataclass(frozen=True)
class UnitAbilityUsed:
    NAME: ClassVar[str] = "UNIT_ABILITY_USED"
    ability_unit_id: int = _field("abilityUnitId")
    target_unit_id: int = _field("targetUnitId")
    ability_name: str = _field("abilityName", "")


@dataclass(frozen=True)
class UnitAttacked:
    NAME: ClassVar[str] = "UNIT_ATTACKED"
    attacker_unit_id: int = _field("attackerUnitId")
    target_unit_id: int = _field("targetUnitId")
    damage: int = _field("damage")
    target_hp: int = _field("targetHp")
    attack_type: str = _field("attackType", "")


def format_event(tick: int, event: Any) -> str:
    """Render one log line (without the newline) for an event at a tick."""
    body = "".join(f"{f.metadata['label']}={getattr(event, f.name)} " for f in fields(event))
    return f"[{tick}] {event.NAME} {body}"


class EventSystem:
    """Writes events as log lines to a text stream (standard output by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def event(self, tick: int, event: Any) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        out.write(format_event(tick, event) + "\n")
        out.flush()