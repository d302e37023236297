# swbattle

A small turn-based battle simulator. Units are placed on a rectangular grid,
march towards targets, fight in melee and at range, and suffer lasting
effects such as poison and rending. The simulation reads a scenario file of
commands, runs tick by tick until no unit can act any more, and prints every
event as it happens.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running a scenario

```
swbattle scenario.txt
```

The program takes exactly one argument, the path of a scenario file, and
writes the event log to standard output. With no argument, more than one, or
a file that cannot be opened, it prints an error message and exits with
status 1.

## Scenario format

One command per line, fields separated by whitespace. Empty lines and lines
starting with `//` are ignored. An unknown command raises
`swbattle.parser.CommandError`.

```
// a 10x10 field
CREATE_MAP 10 10
SPAWN_SWORDSMAN 1 0 0 5 2 0 0
SPAWN_HUNTER 2 9 0 10 5 1 4 0 0
MARCH 1 9 0
```

| Command           | Fields                                                          |
|-------------------|-----------------------------------------------------------------|
| `CREATE_MAP`      | width height                                                    |
| `SPAWN_SWORDSMAN` | unitId x y hp strength chance rending                           |
| `SPAWN_HUNTER`    | unitId x y hp agility strength range chance poison              |
| `MARCH`           | unitId targetX targetY                                          |

Fields are unsigned integers. A missing field reads as 0.

`chance` is out of 1000: a swordsman with chance 1000 always uses its rending
strike, a hunter with chance 1000 always poisons instead of shooting.

## How a battle runs

- Each tick, every living unit first has its effects applied and dead units
  removed; then one unit, in turn by creation order, acts.
- A hunter shoots a random target at distance 2 up to its range, unless a
  living unit stands next to it; otherwise it fights in melee or marches.
- A swordsman strikes a random adjacent unit, or marches.
- Poison deals its damage over five ticks, doubled while the target is
  under rending.
- The battle ends when no living unit can do anything more.

## Event log

Each line has the form `[tick] NAME field=value ...`, with a space after every
field, for example:

```
[0] MAP_CREATED width=10 height=10 
[1] UNIT_MOVED unitId=1 x=1 y=0 
```

Event names are `MAP_CREATED`, `UNIT_SPAWNED`, `MARCH_STARTED`,
`UNIT_MOVED`, `MARCH_ENDED`, `UNIT_ATTACKED`, `UNIT_ABILITY_USED` and
`UNIT_DIED`.

## Using it from Python

```python
import io
import random
from swbattle.cli import run

out = io.StringIO()
run(["CREATE_MAP 5 5", "SPAWN_SWORDSMAN 1 0 0 5 2 0 0"], out, rng=random.Random(1))
print(out.getvalue())
```

`run(lines, stream=None, rng=None)` returns the finished `World`; events go to
`stream`, or to standard output when it is omitted. Passing a
`random.Random` instance as `rng` makes battles reproducible.
`swbattle.cli.build_world(events, rng=None)` returns a wired `World` and
`CommandParser` pair for driving the simulation step by step with
`World.next_tick()` and `World.is_game_over()`.

## Limits

The simulator only writes a text event log; it has no graphical display and
does not save or load the state of a battle.