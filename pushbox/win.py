"""Completion check for Pushbox boards."""

from __future__ import annotations

from .grid import CellKind, Grid


def is_solved(grid: Grid) -> bool:
    """True when every target holds a box.

    A board without targets counts as solved. Whether authors may publish such
    a board is left to authoring policy.
    """
    return all(grid.get(index) == CellKind.BOX for index in grid.targets)


def boxes_on_targets(grid: Grid) -> int:
    """Number of targets currently covered by a box."""
    return sum(1 for index in grid.targets if grid.get(index) == CellKind.BOX)
