"""
Level loading from JSON interchange files.

Each level file holds one LevelData document:
```json
{
  "name": "First Push",
  "width": 6,
  "height": 5,
  "cells": ["wall", "wall", ..., "person", "box", "space", ...],
  "targets": [16]
}
```

Loading runs the same checks as the level maker before a board reaches a
session: pydantic validates the shape, Grid enforces the wall border, and the
board must hold exactly one person.

Usage:
    loader = LevelLoader()
    grid = loader.load("first_push")
    session = PlaySession(grid)
"""

import json
from pathlib import Path
from typing import List, Optional

from .builder import validate_for_play
from .config import Config
from .grid import Grid
from .schemas import LevelData


class LevelLoader:
    """Load and validate levels stored as ``{name}.json`` files.

    Directory:
    - Default: ``Config.LEVELS_DIR`` ({PROJECT_ROOT}/examples/levels)
    - Override via constructor: LevelLoader(Path("/custom/levels"))
    """

    def __init__(self, levels_dir: Optional[Path] = None):
        self.levels_dir = Path(levels_dir) if levels_dir is not None else Config.LEVELS_DIR

    def available(self) -> List[str]:
        """Names of the level files in the levels directory, sorted."""
        if not self.levels_dir.is_dir():
            return []
        return sorted(path.stem for path in self.levels_dir.glob("*.json"))

    def load_data(self, level_name: str) -> LevelData:
        """Read and validate one level document.

        Raises:
            FileNotFoundError: If the level file doesn't exist
            pydantic.ValidationError: If the document is malformed
            json.JSONDecodeError: If the file contains invalid JSON
        """
        level_path = self.levels_dir / f"{level_name}.json"

        if not level_path.exists():
            raise FileNotFoundError(f"Level '{level_name}' not found at {level_path}")

        data = json.loads(level_path.read_text())
        return LevelData.model_validate(data)

    def load(self, level_name: str) -> Grid:
        """Load a level and return a board ready for a play session.

        Raises:
            ValueError: If the border is open or the board is not playable
        """
        grid = self.load_data(level_name).to_grid()

        result = validate_for_play(grid)
        if not result.is_playable:
            raise ValueError(f"Level '{level_name}' is not playable: {result.message}")

        return grid


def load_level(level_name: str, levels_dir: Optional[Path] = None) -> Grid:
    """Convenience wrapper around ``LevelLoader(levels_dir).load(level_name)``."""
    return LevelLoader(levels_dir).load(level_name)
