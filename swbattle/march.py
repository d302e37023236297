"""Movement towards a march target, cell occupancy and adjacency."""

from __future__ import annotations

from typing import Optional

from swbattle.domain import MarchTarget, Position, PositionOccupier
from swbattle.events import MarchEnded, UnitMoved
from swbattle.intents import MarchIntent


def occupied_cells(world, unit_id: int, anchor: Optional[Position] = None) -> list[Position]:
    """Cells a unit covers, anchored at its own position unless an anchor is given."""
    if anchor is None:
        anchor = world.component(Position).get(unit_id)
        if anchor is None:
            return []

    occupier = world.component(PositionOccupier).get(unit_id)
    if occupier is None:
        return [anchor]

    cells = [
        Position(anchor.x + offset.x, anchor.y + offset.y)
        for offset in occupier.offsets
        if anchor.x + offset.x >= 0 and anchor.y + offset.y >= 0
    ]
    return cells or [anchor]


def is_passable(world, unit_id: int, pos: Position) -> bool:
    """True if the unit fits on the map at pos without overlapping another occupier."""
    next_cells = occupied_cells(world, unit_id, pos)
    if any(cell.x >= world.map.width or cell.y >= world.map.height for cell in next_cells):
        return False

    for other_id in world.component(PositionOccupier):
        if other_id == unit_id:
            continue
        other_cells = occupied_cells(world, other_id)
        if any(cell in other_cells for cell in next_cells):
            return False
    return True


def are_neighbors(lhs: Position, rhs: Position) -> bool:
    return abs(lhs.x - rhs.x) <= 1 and abs(lhs.y - rhs.y) <= 1


def find_targets(world, self_id: int) -> list[int]:
    """Occupiers with a cell adjacent to (or shared with) any cell of the unit."""
    self_cells = occupied_cells(world, self_id)
    targets = []
    for other_id in world.component(PositionOccupier):
        if other_id == self_id:
            continue
        other_cells = occupied_cells(world, other_id)
        if any(are_neighbors(mine, theirs) for mine in self_cells for theirs in other_cells):
            targets.append(other_id)
    return targets


def _toward(current: int, target: int) -> int:
    if target < current:
        return current - 1
    if target > current:
        return current + 1
    return current


def next_step(current: Position, target: Position) -> Position:
    """One diagonal-capable step from current towards target."""
    return Position(_toward(current.x, target.x), _toward(current.y, target.y))


def plan(world, unit_id: int) -> Optional[MarchIntent]:
    target = world.component(MarchTarget).get(unit_id)
    if target is None:
        return None
    current = world.component(Position).get(unit_id)
    if current is None or current == target.position:
        return None

    step = next_step(current, target.position)
    if is_passable(world, unit_id, step):
        return MarchIntent(unit_id, current, step)
    return None


def execute(world, intent: MarchIntent) -> None:
    world.component(Position)[intent.unit_id] = intent.pos_to
    world.events.event(world.tick, UnitMoved(intent.unit_id, intent.pos_to.x, intent.pos_to.y))


def on_after_move(world, intent: MarchIntent) -> None:
    """End the march once the unit stands on its target."""
    targets = world.component(MarchTarget)
    target = targets.get(intent.unit_id)
    if target is not None and target.position == intent.pos_to:
        world.events.event(world.tick, MarchEnded(intent.unit_id, intent.pos_to.x, intent.pos_to.y))
        del targets[intent.unit_id]