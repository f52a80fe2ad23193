"""
Pushbox - box-pushing puzzle engine.

Resolves direction intents on a walled board into blocked moves, steps and
pushes, detects completion, and builds and validates hand-authored levels.

No rendering and no input wiring inside the engine.
Views and key sources plug in through small observer/adapter seams.
"""

__version__ = "0.1.0"

# Board and engine
from .grid import CellKind, Grid, EngineIntegrityError
from .moves import Direction, MoveResolver, resolve_move
from .win import is_solved, boxes_on_targets

# Authoring
from .builder import LevelBuilder, validate_for_play
from .maker import LevelMaker

# Sessions and collaborators
from .session import PlaySession, SessionClosedError
from .keys import KEY_CODES, KeyboardAdapter, direction_for_key
from .renderers import AsciiBoard, BoardObserver, render_ascii

# Schemas
from .schemas import (
    TransitionKind,
    TransitionResult,
    ValidationResult,
    LevelData,
)

# Level loader helpers
from .levels import LevelLoader, load_level

__all__ = [
    # Board and engine
    "CellKind",
    "Grid",
    "EngineIntegrityError",
    "Direction",
    "MoveResolver",
    "resolve_move",
    "is_solved",
    "boxes_on_targets",
    # Authoring
    "LevelBuilder",
    "LevelMaker",
    "validate_for_play",
    # Sessions
    "PlaySession",
    "SessionClosedError",
    "KEY_CODES",
    "KeyboardAdapter",
    "direction_for_key",
    "AsciiBoard",
    "BoardObserver",
    "render_ascii",
    # Schemas
    "TransitionKind",
    "TransitionResult",
    "ValidationResult",
    "LevelData",
    # Level helpers
    "LevelLoader",
    "load_level",
]
