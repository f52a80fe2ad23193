"""Move resolution for Pushbox boards.

Turns a direction intent into one of three transitions and applies it to the
board in place:

- blocked: wall ahead, or a box that cannot move (nothing changes)
- step: free cell ahead, the person advances one cell
- push: box ahead with a free cell beyond it, both advance one cell

Row wrap and out-of-bounds indices never need checking here because every
Grid is closed by a wall border; the last cell a legal index can reach in any
direction is a wall.
"""

from __future__ import annotations

from enum import Enum

from .grid import CellKind, Grid
from .schemas import TransitionKind, TransitionResult


class Direction(str, Enum):
    """Direction intents understood by the move engine."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def delta(self, width: int) -> int:
        """Index offset of one step in this direction on a board ``width`` cells wide."""
        if self is Direction.RIGHT:
            return 1
        if self is Direction.LEFT:
            return -1
        if self is Direction.UP:
            return -width
        return width


def resolve_move(grid: Grid, direction: Direction) -> TransitionResult:
    """Resolve one direction intent and mutate ``grid`` unless the move is blocked.

    Target membership is never touched; only which kind sits on a target changes.

    Raises:
        EngineIntegrityError: If the board does not hold exactly one person. The
            board is left unchanged.
    """
    direction = Direction(direction)
    person_index = grid.index_of_person()
    delta = direction.delta(grid.width)
    ahead_index = person_index + delta
    ahead = grid.get(ahead_index)

    if ahead == CellKind.SPACE:
        grid.set(person_index, CellKind.SPACE)
        grid.set(ahead_index, CellKind.PERSON)
        return TransitionResult.step(person_index, ahead_index)

    if ahead == CellKind.BOX:
        beyond_index = ahead_index + delta
        # Only a free cell can take the box; walls and other boxes stop the push
        if grid.get(beyond_index) != CellKind.SPACE:
            return TransitionResult.blocked()
        grid.set(person_index, CellKind.SPACE)
        grid.set(ahead_index, CellKind.PERSON)
        grid.set(beyond_index, CellKind.BOX)
        return TransitionResult.push(person_index, ahead_index, ahead_index, beyond_index)

    # Wall ahead. A second person ahead is impossible once index_of_person passed.
    return TransitionResult.blocked()


class MoveResolver:
    """Resolver bound to one board that keeps move and push counters.

    Blocked intents are not counted; a push counts as both a move and a push.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.moves = 0
        self.pushes = 0

    def resolve(self, direction: Direction) -> TransitionResult:
        result = resolve_move(self.grid, direction)
        if result.kind != TransitionKind.BLOCKED:
            self.moves += 1
        if result.kind == TransitionKind.PUSH:
            self.pushes += 1
        return result

    def reset(self, grid: Grid) -> None:
        """Rebind to a fresh board and zero the counters."""
        self.grid = grid
        self.moves = 0
        self.pushes = 0
