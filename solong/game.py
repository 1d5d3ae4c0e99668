"""Player movement and the rules that end a game."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from solong.constants import LOSS_MESSAGE, VICTORY_MESSAGE, Key
from solong.level import Level, Point


class Outcome(Enum):
    """What a key press or a move led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"
    IGNORED = "ignored"


class Game:
    """A running game on a validated level.

    Move counts and end-of-game messages are written to ``out``, which
    defaults to standard output.
    """

    def __init__(self, level: Level, out: TextIO | None = None) -> None:
        self.level = level
        self.facing: int = Key.S
        self.outcome: Outcome | None = None
        self._out = out

    @property
    def over(self) -> bool:
        """True once the game has been won, lost or quit."""
        return self.outcome is not None

    @property
    def moves(self) -> int:
        return self.level.player.moves

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def _can_enter(self, tile: str) -> bool:
        level = self.level
        here = level.player.position
        if tile == "C":
            level.collects -= 1
        elif (tile == "E" and not level.collects) or (level.bonus and tile == "N"):
            return True
        elif tile != "0":
            return False
        level.grid[here.y, here.x] = "0"
        return True

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to step the player by (dx, dy) and return what happened."""
        if self.over:
            raise RuntimeError("the game is already over")
        level = self.level
        player = level.player
        target = Point(player.position.x + dx, player.position.y + dy)
        tile = level.grid[target.y, target.x]
        if not self._can_enter(tile):
            return Outcome.BLOCKED
        player.position = target
        player.moves += 1
        self._write(f"{player.moves} Moves\n")
        if tile == "E":
            self._write(VICTORY_MESSAGE)
            self.outcome = Outcome.WON
            return self.outcome
        if level.bonus and tile == "N":
            self._write(LOSS_MESSAGE)
            self.outcome = Outcome.LOST
            return self.outcome
        level.grid[target.y, target.x] = "P"
        return Outcome.MOVED

    def press(self, key: int) -> Outcome:
        """Handle a key code: move, quit, or ignore it."""
        self.facing = key
        try:
            known = Key(key)
        except ValueError:
            return Outcome.IGNORED
        if known is Key.ESC:
            self.outcome = Outcome.QUIT
            return self.outcome
        return self.move(*known.delta())