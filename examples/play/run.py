"""
Terminal Pushbox

Plays a stored level in the terminal. Letter keys are mapped onto the arrow
key codes the input adapter understands, so the session sees exactly what a
keyboard would send.

Controls:
    w / a / s / d   move up / left / down / right
    r               restart the level
    q               quit

Run: uv run python examples/play/run.py [level_name]
"""

import sys

from pushbox import AsciiBoard, LevelLoader, PlaySession
from pushbox.config import Config

# Letters -> browser arrow key codes
LETTER_KEYS = {
    "a": 37,
    "w": 38,
    "d": 39,
    "s": 40,
}


def choose_level(loader: LevelLoader) -> str:
    names = loader.available()
    if not names:
        raise SystemExit(f"No levels found in {loader.levels_dir}")
    if len(sys.argv) > 1:
        return sys.argv[1]
    print("Available levels: " + ", ".join(names))
    return names[0]


def main() -> None:
    Config.validate()
    loader = LevelLoader()
    level_name = choose_level(loader)

    board = AsciiBoard(echo=True)
    session = PlaySession(loader.load(level_name), observers=[board])

    try:
        while not session.solved:
            try:
                line = input("move (w/a/s/d, r, q)> ").strip().lower()
            except (KeyboardInterrupt, EOFError):
                break
            if line == "q":
                break
            if line == "r":
                session.restart()
                continue
            for letter in line:
                code = LETTER_KEYS.get(letter)
                if code is not None:
                    session.keyboard.press(code)
                if session.solved:
                    break
    finally:
        session.close()

    print(f"Moves: {session.moves}  Pushes: {session.pushes}")


if __name__ == "__main__":
    main()
