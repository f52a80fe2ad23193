"""Level construction and play validation.

LevelBuilder creates walled blank boards within configured size bounds,
applies single-cell authoring edits, and decides whether a board is ready to
be handed to a play session.
"""

from __future__ import annotations

from typing import List, Optional

from .config import Config
from .grid import CellKind, Grid
from .schemas import ValidationResult


class LevelBuilder:
    """Builds and checks boards for the level maker.

    Bounds apply to both rows and columns and are inclusive. They default to
    ``Config.MIN_BOARD_SIZE`` / ``Config.MAX_BOARD_SIZE``.
    """

    def __init__(self, min_size: Optional[int] = None, max_size: Optional[int] = None):
        self.min_size = Config.MIN_BOARD_SIZE if min_size is None else min_size
        self.max_size = Config.MAX_BOARD_SIZE if max_size is None else max_size
        if self.min_size < 3:
            raise ValueError(f"Minimum board size must be at least 3 (got {self.min_size})")
        if self.min_size > self.max_size:
            raise ValueError(
                f"Minimum board size {self.min_size} exceeds maximum {self.max_size}"
            )

    def size_options(self) -> List[int]:
        """Selectable dimensions, smallest first."""
        return list(range(self.min_size, self.max_size + 1))

    def create_blank(self, rows: int, cols: int) -> Grid:
        """Return a ``rows`` x ``cols`` board: walls on the border, free cells inside.

        Raises:
            ValueError: If either dimension is outside the configured bounds
        """
        for label, value in (("rows", rows), ("columns", cols)):
            if not self.min_size <= value <= self.max_size:
                raise ValueError(
                    f"Board {label} must be between {self.min_size} and {self.max_size} "
                    f"(got {value})"
                )
        return Grid.blank(rows, cols)

    def apply_edit(self, grid: Grid, index: int, kind: CellKind) -> CellKind:
        """Paint ``kind`` onto one cell, or clear it to space if it already holds ``kind``.

        Border cells are not guarded here; LevelMaker refuses them before calling in.
        Returns the cell's new kind.
        """
        kind = CellKind(kind)
        new_kind = CellKind.SPACE if grid.get(index) == kind else kind
        grid.set(index, new_kind)
        return new_kind

    def validate_for_play(self, grid: Grid) -> ValidationResult:
        return validate_for_play(grid)


def validate_for_play(grid: Grid) -> ValidationResult:
    """Classify a board by its person count; only ``OK`` may start a session."""
    persons = grid.count(CellKind.PERSON)
    if persons == 0:
        return ValidationResult.NO_PERSON
    if persons == 1:
        return ValidationResult.OK
    return ValidationResult.MULTIPLE_PERSONS
