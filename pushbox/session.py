"""
Play session for a single Pushbox board.

A session owns one validated Grid, resolves direction intents against it one
at a time, and reports every transition to its observers. After each move
that changes the board, the completion check runs and observers are told once
when the board becomes solved.

Sessions are synchronous: ``handle`` returns only after the board, counters
and observers are all up to date, so intents are applied strictly in the
order they arrive.
"""

from __future__ import annotations

from typing import List, Optional

from .builder import validate_for_play
from .config import Config
from .grid import EngineIntegrityError, Grid
from .keys import KeyboardAdapter, direction_for_key
from .logging_utils import log_error, log_move, log_success
from .moves import Direction, MoveResolver
from .renderers import BoardObserver
from .schemas import TransitionKind, TransitionResult
from .win import is_solved


class SessionClosedError(RuntimeError):
    """Raised when a released session is asked to resolve a move."""

    def __init__(self) -> None:
        super().__init__(
            "Play session has been closed. Start a new session to keep playing."
        )


class PlaySession:
    """
    One active board plus its move engine, completion check and input adapter.

    The board passed in is copied twice: once as the live board that moves
    mutate, once as the pristine start position used by ``restart()``.
    """

    def __init__(
        self,
        grid: Grid,
        observers: Optional[List[BoardObserver]] = None,
        verbose: Optional[bool] = None,
    ):
        """Initialize a session over a playable board.

        Args:
            grid: Board to play. Must hold exactly one person.
            observers: Optional views notified of the initial board, each
                transition, the solved signal and the final release.
            verbose: Print one line per move. Defaults to ``Config.VERBOSE``.

        Raises:
            ValueError: If the board does not pass play validation
        """
        validation = validate_for_play(grid)
        if not validation.is_playable:
            raise ValueError(f"Board is not playable: {validation.message}")

        self._initial = grid.copy()
        self.grid = grid.copy()
        self.observers: List[BoardObserver] = list(observers or [])
        self.verbose = Config.VERBOSE if verbose is None else verbose
        self.resolver = MoveResolver(self.grid)
        self.keyboard = KeyboardAdapter(self)
        self.closed = False
        self._solved = is_solved(self.grid)

        for observer in self.observers:
            observer.render_board(self.grid)

    @property
    def moves(self) -> int:
        return self.resolver.moves

    @property
    def pushes(self) -> int:
        return self.resolver.pushes

    @property
    def solved(self) -> bool:
        return self._solved

    def handle(self, direction: Direction) -> TransitionResult:
        """Resolve one intent, notify observers, then re-check completion.

        Raises:
            SessionClosedError: If the session has been released
            EngineIntegrityError: If the board lost its single person
        """
        if self.closed:
            raise SessionClosedError()

        try:
            result = self.resolver.resolve(direction)
        except EngineIntegrityError as exc:
            log_error(f"Move engine refused board with {exc.person_count} person cells")
            raise

        if self.verbose:
            log_move(self._describe(Direction(direction), result))

        for observer in self.observers:
            observer.apply_transition(result, self.grid)

        if result.kind != TransitionKind.BLOCKED:
            was_solved = self._solved
            self._solved = is_solved(self.grid)
            if self._solved and not was_solved:
                log_success(f"Board solved in {self.moves} moves ({self.pushes} pushes)")
                for observer in self.observers:
                    observer.show_solved(self.moves, self.pushes)

        return result

    def handle_key(self, code: int) -> Optional[TransitionResult]:
        """Translate a raw key code; keys other than the arrows produce no intent."""
        direction = direction_for_key(code)
        if direction is None:
            return None
        return self.handle(direction)

    def restart(self) -> None:
        """Put the board back to its start position and zero the counters."""
        if self.closed:
            raise SessionClosedError()
        self.grid = self._initial.copy()
        self.resolver.reset(self.grid)
        self._solved = is_solved(self.grid)
        for observer in self.observers:
            observer.clear()
            observer.render_board(self.grid)

    def close(self) -> None:
        """Stop accepting moves, stop the input adapter and clear observers. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        self.keyboard.stop()
        for observer in self.observers:
            observer.clear()

    @staticmethod
    def _describe(direction: Direction, result: TransitionResult) -> str:
        if result.kind == TransitionKind.STEP:
            return f"{direction.value}: step {result.person_from} -> {result.person_to}"
        if result.kind == TransitionKind.PUSH:
            return (
                f"{direction.value}: push box {result.box_from} -> {result.box_to}"
            )
        return f"{direction.value}: blocked"
