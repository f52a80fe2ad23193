"""Board rendering collaborators.

The engine never draws anything. Sessions hand observers an initial snapshot
and then one TransitionResult per move so a view can repaint only the cells
that changed. ``AsciiBoard`` is the text implementation used by the terminal
example and the tests.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Protocol, Sequence

from .grid import CellKind, Grid
from .schemas import TransitionResult


class BoardObserver(Protocol):
    """Protocol for views that follow a play session."""

    def render_board(self, grid: Grid) -> None:
        """Draw the whole board once, targets included."""
        ...

    def apply_transition(self, result: TransitionResult, grid: Grid) -> None:
        """Repaint the cells named in ``result``; ``grid`` is already updated."""
        ...

    def show_solved(self, moves: int, pushes: int) -> None:
        ...

    def clear(self) -> None:
        """Drop the drawn board when the session is released."""
        ...


_DEFAULT_SYMBOLS: Dict[str, str] = {
    "wall": "#",
    "space": " ",
    "person": "@",
    "box": "$",
    "target": ".",
    "box_on_target": "*",
    "person_on_target": "+",
}


def cell_symbol(
    kind: CellKind, on_target: bool, symbols: Optional[Dict[str, str]] = None
) -> str:
    """Symbol for one cell, taking the target overlay into account."""
    mapping = symbols or _DEFAULT_SYMBOLS
    if on_target:
        if kind == CellKind.BOX:
            return mapping["box_on_target"]
        if kind == CellKind.PERSON:
            return mapping["person_on_target"]
        if kind == CellKind.SPACE:
            return mapping["target"]
    return mapping[kind.value]


def render_ascii(grid: Grid, *, symbols: Optional[Dict[str, str]] = None) -> str:
    """Render a full board as text, one line per row."""
    symbols = {**_DEFAULT_SYMBOLS, **(symbols or {})}
    lines: List[str] = []
    for row in range(grid.height):
        start = row * grid.width
        lines.append(
            "".join(
                cell_symbol(grid.get(index), grid.is_target(index), symbols)
                for index in range(start, start + grid.width)
            )
        )
    return "\n".join(lines)


class AsciiBoard:
    """Text view that keeps its own character buffer and patches it per transition."""

    def __init__(self, *, symbols: Optional[Dict[str, str]] = None, echo: bool = False):
        self.symbols = {**_DEFAULT_SYMBOLS, **(symbols or {})}
        self.echo = echo
        self.width = 0
        self.targets: FrozenSet[int] = frozenset()
        self.buffer: List[str] = []
        self.solved = False
        self.repainted: List[int] = []

    def render_board(self, grid: Grid) -> None:
        self.width = grid.width
        self.targets = grid.targets
        self.buffer = [
            cell_symbol(grid.get(index), grid.is_target(index), self.symbols)
            for index in range(len(grid))
        ]
        self.solved = False
        self._echo()

    def apply_transition(self, result: TransitionResult, grid: Grid) -> None:
        self.repainted = result.changed_indices
        for index in self.repainted:
            self.buffer[index] = cell_symbol(grid.get(index), index in self.targets, self.symbols)
        if not result.is_blocked:
            self._echo()

    def show_solved(self, moves: int, pushes: int) -> None:
        self.solved = True
        if self.echo:
            print(f"Solved in {moves} moves ({pushes} pushes)!")

    def clear(self) -> None:
        self.buffer = []
        self.targets = frozenset()
        self.width = 0

    def text(self) -> str:
        return "\n".join(self._lines(self.buffer))

    def _lines(self, buffer: Sequence[str]) -> List[str]:
        if not self.width:
            return []
        return [
            "".join(buffer[start:start + self.width])
            for start in range(0, len(buffer), self.width)
        ]

    def _echo(self) -> None:
        if self.echo:
            print(self.text(), flush=True)
