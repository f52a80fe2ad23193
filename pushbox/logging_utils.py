"""Logging utilities for Pushbox sessions.

Provides color-coded output to distinguish engine events, authoring notices and failures.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for event types
    BLUE = "\033[94m"      # Engine transitions (steps, pushes, blocked moves)
    RED = "\033[91m"       # Integrity errors
    GREEN = "\033[92m"     # Solved boards
    CYAN = "\033[96m"      # Info/authoring notices

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if PUSHBOX_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("PUSHBOX_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_move(message: str) -> None:
    """Log an engine transition (blue)."""
    print(colored(f"{TAG_MOVE} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{TAG_SUCCESS} {message}", Color.GREEN, bold=True))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{TAG_INFO} {message}", Color.CYAN))


# Markers for event types (color-blind accessible)
TAG_MOVE = "[•]"
TAG_ERROR = "[!]"
TAG_SUCCESS = "[✓]"
TAG_INFO = "[i]"
