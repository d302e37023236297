import io
from dataclasses import dataclass
from typing import ClassVar

import pytest

from swbattle.parser import CommandError, CommandParser


@dataclass
class Move:
    NAME: ClassVar[str] = "MOVE"
    unit_id: int = 0
    label: str = ""
    steps: int = 0


@dataclass
class Halt:
    NAME: ClassVar[str] = "HALT"
    unit_id: int = 0


def _make_parser(received):
    parser = CommandParser()
    parser.add(Move, received.append)
    parser.add(Halt, received.append)
    return parser


def _parse(lines):
    received = []
    _make_parser(received).parse(lines)
    return received


@pytest.fixture
def received():
    return []


@pytest.fixture
def parser(received):
    return _make_parser(received)


def test_parses_fields_in_order():
    assert _parse(["MOVE 1 north 3"]) == [Move(1, "north", 3)]


def test_skips_comments_and_blank_lines():
    assert _parse(["// setup", "", "   ", "HALT 4"]) == [Halt(4)]


def test_reads_from_text_stream():
    assert _parse(io.StringIO("HALT 1\nMOVE 2 east 5\n")) == [Halt(1), Move(2, "east", 5)]


def test_missing_values_keep_defaults():
    assert _parse(["MOVE 1"]) == [Move(1, "", 0)]


def test_non_numeric_value_stops_reading():
    assert _parse(["MOVE x north 3"]) == [Move(0, "", 0)]


def test_number_followed_by_text_is_split():
    assert _parse(["MOVE 7abc north"]) == [Move(7, "abc", 0)]


def test_negative_number_wraps_to_unsigned():
    assert _parse(["HALT -1"]) == [Halt(2**32 - 1)]


def test_overflow_saturates():
    assert _parse(["HALT 99999999999"]) == [Halt(2**32 - 1)]


def test_unknown_command_raises(parser):
    with pytest.raises(CommandError, match="Unknown command: JUMP"):
        parser.parse(["JUMP 1 2"])


def test_commands_before_error_still_run(parser, received):
    with pytest.raises(CommandError):
        parser.parse(["HALT 1", "BOGUS", "HALT 2"])
    assert received == [Halt(1)]


def test_duplicate_registration_raises(parser):
    with pytest.raises(CommandError, match="Command already exists: MOVE"):
        parser.add(Move, lambda command: None)


def test_comment_must_start_line(parser):
    with pytest.raises(CommandError):
        parser.parse(["X // not a comment"])