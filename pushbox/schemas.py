"""
Pydantic schemas for Pushbox.

Structures that cross the engine boundary are defined here:
- TransitionResult: what a single move did, consumed by board renderers
- ValidationResult: outcome of the play-readiness check for an authored board
- LevelData: the interchange form of a board (width, height, cell tags, targets)

The mutable board itself lives in ``grid.py`` as a plain dataclass; LevelData
mirrors it so boards can be stored and exchanged as validated JSON.
"""

from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pushbox.grid import CellKind, Grid


# ============================================================================
# Move Results
# ============================================================================


class TransitionKind(str, Enum):
    """The three possible outcomes of a move intent."""

    BLOCKED = "blocked"
    STEP = "step"
    PUSH = "push"


class TransitionResult(BaseModel):
    """Outcome of resolving one direction intent against a board.

    Renderers use this to repaint only the affected cells instead of redrawing
    the whole board. Index fields are unset for blocked moves; ``box_from`` and
    ``box_to`` are only set for pushes (``box_from`` always equals ``person_to``).
    """

    model_config = ConfigDict(frozen=True)

    kind: TransitionKind
    person_from: Optional[int] = Field(None, description="Person index before the move")
    person_to: Optional[int] = Field(None, description="Person index after the move")
    box_from: Optional[int] = Field(None, description="Pushed box index before the move")
    box_to: Optional[int] = Field(None, description="Pushed box index after the move")

    @classmethod
    def blocked(cls) -> "TransitionResult":
        return cls(kind=TransitionKind.BLOCKED)

    @classmethod
    def step(cls, person_from: int, person_to: int) -> "TransitionResult":
        return cls(kind=TransitionKind.STEP, person_from=person_from, person_to=person_to)

    @classmethod
    def push(
        cls, person_from: int, person_to: int, box_from: int, box_to: int
    ) -> "TransitionResult":
        return cls(
            kind=TransitionKind.PUSH,
            person_from=person_from,
            person_to=person_to,
            box_from=box_from,
            box_to=box_to,
        )

    @property
    def is_blocked(self) -> bool:
        return self.kind == TransitionKind.BLOCKED

    @property
    def changed_indices(self) -> List[int]:
        """Indices whose cell kind changed, in board order without duplicates."""
        indices = {self.person_from, self.person_to, self.box_from, self.box_to}
        return sorted(index for index in indices if index is not None)


# ============================================================================
# Authoring Validation
# ============================================================================


class ValidationResult(str, Enum):
    """Play-readiness of an authored board, keyed on its person count."""

    OK = "ok"
    NO_PERSON = "no_person"
    MULTIPLE_PERSONS = "multiple_persons"

    @property
    def is_playable(self) -> bool:
        return self is ValidationResult.OK

    @property
    def message(self) -> str:
        """User-facing notification text (empty when the board is playable)."""
        return _VALIDATION_MESSAGES[self]


_VALIDATION_MESSAGES = {
    ValidationResult.OK: "",
    ValidationResult.NO_PERSON: "Please add a person to the board.",
    ValidationResult.MULTIPLE_PERSONS: "There should be only one person on the board.",
}


# ============================================================================
# Level Interchange
# ============================================================================


class LevelData(BaseModel):
    """Serializable level: dimensions, row-major cell tags and target indices.

    Border closure is checked when the data is turned into a Grid, so a
    document with an open border parses here but fails in ``to_grid()``.
    """

    name: Optional[str] = Field(None, description="Display name of the level")
    description: Optional[str] = Field(None, description="Optional notes for the player")
    width: int = Field(..., ge=3, description="Columns, border included")
    height: int = Field(..., ge=3, description="Rows, border included")
    cells: List[CellKind] = Field(..., description="Row-major cell tags")
    targets: Set[int] = Field(default_factory=set, description="Indices of target cells")

    @model_validator(mode="after")
    def _check_shape(self) -> "LevelData":
        expected = self.width * self.height
        if len(self.cells) != expected:
            raise ValueError(
                f"Level of {self.width}x{self.height} needs {expected} cells, got {len(self.cells)}"
            )
        out_of_range = sorted(index for index in self.targets if not 0 <= index < expected)
        if out_of_range:
            raise ValueError(f"Target indices outside the board: {out_of_range}")
        return self

    @classmethod
    def from_grid(cls, grid: Grid, *, name: Optional[str] = None) -> "LevelData":
        return cls(
            name=name,
            width=grid.width,
            height=grid.height,
            cells=list(grid.cells),
            targets=set(grid.targets),
        )

    def to_grid(self) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            cells=list(self.cells),
            targets=frozenset(self.targets),
        )
