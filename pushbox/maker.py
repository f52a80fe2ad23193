"""Level maker: the authoring surface for hand-built boards.

Mirrors what the level maker screen offers an author:
- pick board dimensions within the configured range
- pick a paint kind and toggle cells with it
- mark target cells
- ask to play, which validates the board and starts a fresh session

Only one session exists at a time. Asking to play again releases the previous
session (board and input adapter) before anything else happens.
"""

from __future__ import annotations

from typing import List, Optional, Set

from .builder import LevelBuilder
from .config import Config
from .grid import CellKind, Grid
from .logging_utils import log_info
from .renderers import BoardObserver
from .schemas import LevelData, ValidationResult
from .session import PlaySession


class LevelMaker:
    """Holds the draft board, the paint selection and the current play session."""

    def __init__(self, builder: Optional[LevelBuilder] = None):
        self.builder = builder or LevelBuilder()
        self.paint_kind = CellKind(Config.DEFAULT_PAINT)
        self.draft: Optional[Grid] = None
        self.draft_targets: Set[int] = set()
        self.notification = ""
        self.session: Optional[PlaySession] = None

    def size_options(self) -> List[int]:
        return self.builder.size_options()

    def new_board(self, rows: int, cols: int) -> Grid:
        """Replace the draft with a blank board of the chosen size."""
        self.draft = self.builder.create_blank(rows, cols)
        self.draft_targets = set()
        return self.draft

    def select_paint(self, kind: CellKind) -> None:
        self.paint_kind = CellKind(kind)

    def paint(self, index: int) -> Optional[CellKind]:
        """Toggle one interior cell with the current paint kind.

        Border cells keep their walls; painting them, or an index off the
        board, is ignored and returns None.
        """
        draft = self._require_draft()
        if not self._is_interior(draft, index):
            return None
        return self.builder.apply_edit(draft, index, self.paint_kind)

    def toggle_target(self, index: int) -> bool:
        """Mark or unmark an interior cell as a target. Returns the new target state."""
        draft = self._require_draft()
        if not self._is_interior(draft, index):
            return False
        if index in self.draft_targets:
            self.draft_targets.discard(index)
            return False
        self.draft_targets.add(index)
        return True

    def validate(self) -> ValidationResult:
        return self.builder.validate_for_play(self._require_draft())

    def compose(self) -> Grid:
        """Current draft as a board with its targets frozen in."""
        draft = self._require_draft()
        return Grid(
            width=draft.width,
            height=draft.height,
            cells=list(draft.cells),
            targets=frozenset(self.draft_targets),
        )

    def export(self, name: Optional[str] = None) -> LevelData:
        return LevelData.from_grid(self.compose(), name=name)

    def play(self, observers: Optional[List[BoardObserver]] = None) -> Optional[PlaySession]:
        """Start a session on the current draft.

        The previous session is closed first, whatever the validation outcome.
        On failure the user-facing message is stored in ``notification`` and
        None is returned.
        """
        self.stop()

        result = self.validate()
        if not result.is_playable:
            self.notification = result.message
            log_info(self.notification)
            return None

        self.notification = ""
        self.session = PlaySession(self.compose(), observers=observers)
        return self.session

    def stop(self) -> None:
        """Release the current session, if any."""
        if self.session is not None:
            self.session.close()
            self.session = None

    @staticmethod
    def _is_interior(draft: Grid, index: int) -> bool:
        return draft.contains(index) and not draft.is_border(index)

    def _require_draft(self) -> Grid:
        if self.draft is None:
            raise RuntimeError("No board yet; call new_board(rows, cols) first")
        return self.draft
