"""Input adapter: raw key codes to direction intents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from .moves import Direction
from .schemas import TransitionResult

if TYPE_CHECKING:  # pragma: no cover
    from .session import PlaySession

# Browser keyCode values for the arrow keys
KEY_CODES: Dict[int, Direction] = {
    37: Direction.LEFT,
    38: Direction.UP,
    39: Direction.RIGHT,
    40: Direction.DOWN,
}


def direction_for_key(code: int) -> Optional[Direction]:
    """Return the direction for an arrow key code, or None for any other key."""
    return KEY_CODES.get(code)


class KeyboardAdapter:
    """Feeds key codes into one play session until stopped.

    Keys are handled one at a time in arrival order; nothing is queued. After
    ``stop()`` every key is dropped, which is how a released session stops
    receiving input.
    """

    def __init__(self, session: "PlaySession"):
        self.session = session
        self.active = True

    def press(self, code: int) -> Optional[TransitionResult]:
        """Forward one key. Returns the transition, or None if no intent was produced."""
        if not self.active:
            return None
        direction = direction_for_key(code)
        if direction is None:
            return None
        return self.session.handle(direction)

    def stop(self) -> None:
        self.active = False
