"""Reads scenario lines and hands each command to its registered handler."""

from __future__ import annotations

import re
from dataclasses import Field, fields
from typing import Any, Callable, Iterable

_UINT32_MAX = 2**32 - 1
_INT = re.compile(r"\s*([+-]?)(\d+)")
_WORD = re.compile(r"\s*(\S+)")


class CommandError(ValueError):
    """A scenario names an unknown command, or a command is registered twice."""


def _is_text_field(field: Field) -> bool:
    """True for fields declared as str, whether the annotation is a type or a string."""
    return field.type is str or field.type == "str"


def _read_fields(command_type: type, text: str) -> dict[str, Any]:
    """Read whitespace-separated field values in declaration order, as a stream would."""
    values: dict[str, Any] = {}
    pos = 0
    for f in fields(command_type):
        if _is_text_field(f):
            match = _WORD.match(text, pos)
            if match is None:
                break
            values[f.name] = match.group(1)
            pos = match.end()
            continue

        match = _INT.match(text, pos)
        if match is None:
            values[f.name] = 0
            break
        magnitude = int(match.group(2))
        if magnitude > _UINT32_MAX:
            values[f.name] = _UINT32_MAX
            break
        values[f.name] = (-magnitude) % 2**32 if match.group(1) == "-" else magnitude
        pos = match.end()
    return values


class CommandParser:
    """Maps command names to handlers and dispatches scenario lines."""

    def __init__(self) -> None:
        self._commands: dict[str, Callable[[str], None]] = {}

    def add(self, command_type: type, handler: Callable[[Any], None]) -> None:
        name = command_type.NAME
        if name in self._commands:
            raise CommandError(f"Command already exists: {name}")

        def dispatch(text: str) -> None:
            handler(command_type(**_read_fields(command_type, text)))

        self._commands[name] = dispatch

    def parse(self, lines: Iterable[str]) -> None:
        """Run every command in the lines; blank lines and // comments are skipped."""
        for raw in lines:
            line = raw[:-1] if raw.endswith("\n") else raw
            if not line or line.startswith("//"):
                continue
            match = _WORD.match(line)
            if match is None:
                continue
            name = match.group(1)
            dispatch = self._commands.get(name)
            if dispatch is None:
                raise CommandError(f"Unknown command: {name}")
            dispatch(line[match.end():])