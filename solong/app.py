"""Command-line entry points that load a map and start the game."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from solong.game import Game
from solong.grid import MapError
from solong.level import load_level
from solong.window import Window

USAGE = "Invalid format, try: [./program] [map_filename]"


def _fail(message: str) -> int:
    sys.stdout.write(f"Error\n{message}")
    sys.stdout.flush()
    return 1


def run(argv: Sequence[str], bonus: bool = False) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(argv)
    if len(args) != 1:
        return _fail(USAGE)
    try:
        level = load_level(args[0], bonus)
    except MapError as exc:
        return _fail(str(exc))
    except OSError as exc:
        return _fail(exc.strerror or str(exc))
    try:
        Window(Game(level)).run()
    except (pygame.error, OSError) as exc:
        return _fail(str(exc))
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the plain game."""
    return run(sys.argv[1:] if argv is None else argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Start the bonus game with enemies and animations."""
    return run(sys.argv[1:] if argv is None else argv, bonus=True)