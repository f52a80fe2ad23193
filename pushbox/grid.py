"""Board storage for Pushbox.

A board is a flat, row-major list of cell kinds plus a fixed set of target
indices. Targets are an overlay: a person or box can stand on a target while
the target itself is remembered in ``Grid.targets``.

Every board is closed by a ring of walls. Moves are resolved with plain index
arithmetic (``±1`` horizontally, ``±width`` vertically), so the border is what
turns every out-of-bounds or row-wrapping step into a wall hit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Tuple


class CellKind(str, Enum):
    """Occupancy tag of a single board cell."""

    SPACE = "space"
    WALL = "wall"
    PERSON = "person"
    BOX = "box"


class EngineIntegrityError(Exception):
    """Raised when a board handed to the engine does not hold exactly one person."""

    def __init__(self, *, person_count: int) -> None:
        self.person_count = person_count
        message = (
            f"Board holds {person_count} person cells; the move engine needs exactly one.\n\n"
            "The board reached the engine without passing play validation.\n"
            "Remediation tips:\n"
            "  - Run LevelBuilder.validate_for_play() before starting a session\n"
            "  - Start sessions through LevelMaker.play() or LevelLoader.load()"
        )
        super().__init__(message)


@dataclass
class Grid:
    """Mutable row-major board with an immutable target overlay."""

    width: int
    height: int
    cells: List[CellKind]
    targets: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError(
                f"Board must be at least 3x3 to hold a wall border (got {self.width}x{self.height})"
            )
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Board of {self.width}x{self.height} needs {self.width * self.height} cells, "
                f"got {len(self.cells)}"
            )
        # Accept plain tags ("wall") as well as CellKind members
        self.cells = [CellKind(kind) for kind in self.cells]
        self.targets = frozenset(self.targets)

        for index in self.targets:
            if not 0 <= index < len(self.cells) or self.is_border(index):
                raise ValueError(f"Target index {index} is outside the board interior")

        open_border = [
            index for index in self.border_indices() if self.cells[index] != CellKind.WALL
        ]
        if open_border:
            raise ValueError(f"Board border must be all walls; open cells at {open_border}")

    @classmethod
    def blank(cls, rows: int, cols: int) -> "Grid":
        """Return a walled board of ``rows`` x ``cols`` with a free interior and no targets."""
        cells = [
            CellKind.WALL
            if row in (0, rows - 1) or col in (0, cols - 1)
            else CellKind.SPACE
            for row in range(rows)
            for col in range(cols)
        ]
        return cls(width=cols, height=rows, cells=cells)

    def __len__(self) -> int:
        return len(self.cells)

    def get(self, index: int) -> CellKind:
        return self.cells[self._checked(index)]

    def set(self, index: int, kind: CellKind) -> None:
        self.cells[self._checked(index)] = CellKind(kind)

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def _checked(self, index: int) -> int:
        # Negative indices would silently wrap to the end of the board
        if not self.contains(index):
            raise IndexError(f"Cell index {index} is outside a board of {len(self.cells)} cells")
        return index

    def is_target(self, index: int) -> bool:
        return index in self.targets

    def count(self, kind: CellKind) -> int:
        return sum(1 for cell in self.cells if cell == kind)

    def indices_of(self, kind: CellKind) -> List[int]:
        return [index for index, cell in enumerate(self.cells) if cell == kind]

    def index_of_person(self) -> int:
        """Return the index of the single person cell.

        Raises:
            EngineIntegrityError: If the board has zero or several person cells
        """
        persons = self.indices_of(CellKind.PERSON)
        if len(persons) != 1:
            raise EngineIntegrityError(person_count=len(persons))
        return persons[0]

    def index_at(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside a {self.height}x{self.width} board")
        return row * self.width + col

    def position_of(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.width)

    def is_border(self, index: int) -> bool:
        row, col = self.position_of(index)
        return row in (0, self.height - 1) or col in (0, self.width - 1)

    def border_indices(self) -> Iterable[int]:
        return (index for index in range(len(self.cells)) if self.is_border(index))

    def rows(self) -> List[List[CellKind]]:
        return [
            self.cells[row * self.width:(row + 1) * self.width] for row in range(self.height)
        ]

    def copy(self) -> "Grid":
        return Grid(
            width=self.width,
            height=self.height,
            cells=list(self.cells),
            targets=self.targets,
        )
