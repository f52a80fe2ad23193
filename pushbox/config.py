"""
Pushbox Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Level maker board bounds (inclusive, applied to both rows and columns)
    MIN_BOARD_SIZE: int = int(os.getenv("PUSHBOX_MIN_BOARD_SIZE", "6"))
    MAX_BOARD_SIZE: int = int(os.getenv("PUSHBOX_MAX_BOARD_SIZE", "18"))

    # Cell kind selected in the level maker before the author picks one
    DEFAULT_PAINT: str = os.getenv("PUSHBOX_DEFAULT_PAINT", "wall")

    # Print one line per resolved move
    VERBOSE: bool = os.getenv("PUSHBOX_VERBOSE", "false").lower() in _TRUTHY

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LEVELS_DIR: Path = Path(
        os.getenv("PUSHBOX_LEVELS_DIR", str(PROJECT_ROOT / "examples" / "levels"))
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are inconsistent."""
        if cls.MIN_BOARD_SIZE < 3:
            raise ValueError(
                "PUSHBOX_MIN_BOARD_SIZE must be at least 3 "
                "(a walled board needs at least one interior cell)"
            )

        if cls.MIN_BOARD_SIZE > cls.MAX_BOARD_SIZE:
            raise ValueError(
                f"PUSHBOX_MIN_BOARD_SIZE ({cls.MIN_BOARD_SIZE}) is larger than "
                f"PUSHBOX_MAX_BOARD_SIZE ({cls.MAX_BOARD_SIZE})"
            )

        if cls.DEFAULT_PAINT not in {"space", "wall", "person", "box"}:
            raise ValueError(
                f"PUSHBOX_DEFAULT_PAINT must be one of space, wall, person, box "
                f"(got '{cls.DEFAULT_PAINT}')"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Pushbox Configuration:",
            f"  Board Size: {cls.MIN_BOARD_SIZE}..{cls.MAX_BOARD_SIZE}",
            f"  Default Paint: {cls.DEFAULT_PAINT}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Levels: {cls.LEVELS_DIR}",
        ]
        return "\n".join(lines)
