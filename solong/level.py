"""Checking a map grid and turning it into a playable level."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from solong.grid import Grid, MapError, open_map

INVALID_MAP = "Invalid map!!"


@dataclass(frozen=True)
class Point:
    """A position on the map: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass
class Player:
    """The player's position and the number of moves made so far."""

    position: Point
    moves: int = 0


@dataclass
class Level:
    """A validated map with its player, exit and item counts."""

    grid: Grid
    player: Player
    exit: Point
    collects: int
    enemies: int = 0
    bonus: bool = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height


@dataclass
class _Scan:
    player: Point | None = None
    exit: Point | None = None
    collects: int = 0
    enemies: int = 0
    seen: list[str] = field(default_factory=list)


def flood_fill(rows: list[list[str]], row: int, col: int, bonus: bool = False) -> None:
    """Turn every cell reachable from (row, col) into a wall, in place.

    Exits, and enemies in the bonus game, are marked as reached but not
    walked through.
    """
    stoppers = {"E", "N"} if bonus else {"E"}
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if rows[r][c] in stoppers:
            rows[r][c] = "1"
        if rows[r][c] == "1":
            continue
        rows[r][c] = "1"
        pending.extend(((r, c - 1), (r + 1, c), (r, c + 1), (r - 1, c)))


def scan(grid: Grid, bonus: bool = False) -> Level:
    """Check the tiles of ``grid`` and collect the level's items.

    Raises MapError when the border is not all walls, when the player or the
    exit is missing or repeated, when there is no collectible, or, in the
    bonus game, when there is no enemy.
    """
    found = _Scan()
    last_row, last_col = grid.height - 1, grid.width - 1
    for r, line in enumerate(grid):
        for c, tile in enumerate(line):
            on_border = r in (0, last_row) or c in (0, last_col)
            if on_border and tile != "1":
                raise MapError(INVALID_MAP)
            if tile == "P" and found.player is None:
                found.player = Point(c, r)
            elif tile == "C":
                found.collects += 1
            elif tile == "E" and found.exit is None:
                found.exit = Point(c, r)
            elif bonus and tile == "N":
                found.enemies += 1
            elif tile in ("E", "P"):
                raise MapError(INVALID_MAP)
    if found.player is None or found.exit is None or not found.collects:
        raise MapError(INVALID_MAP)
    if bonus and not found.enemies:
        raise MapError(INVALID_MAP)
    return Level(
        grid=grid,
        player=Player(found.player),
        exit=found.exit,
        collects=found.collects,
        enemies=found.enemies,
        bonus=bonus,
    )


def all_reachable(level: Level, bonus: bool = False) -> bool:
    """Return True when the exit and every collectible can be reached."""
    rows = [list(line) for line in level.grid]
    start = level.player.position
    flood_fill(rows, start.y, start.x, bonus)
    return not any(tile in ("E", "C") for row in rows for tile in row)


def build_level(grid: Grid, bonus: bool = False) -> Level:
    """Validate ``grid`` fully and return the level it describes."""
    level = scan(grid, bonus)
    if not all_reachable(level, bonus):
        raise MapError(INVALID_MAP)
    return level


def load_level(path: str | os.PathLike[str], bonus: bool = False) -> Level:
    """Read the map file at ``path`` and return the validated level."""
    return build_level(open_map(path, bonus), bonus)