"""Reading ``.ber`` map files into a rectangular grid of tiles."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

PLAIN_CHARSET = frozenset("01ECP\n")
BONUS_CHARSET = frozenset("01ECNP\n")
EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file or its content is not acceptable."""


@dataclass
class Grid:
    """A rectangular map of one-character tiles, indexed by (row, col)."""

    cells: list[list[str]]

    def __post_init__(self) -> None:
        if not self.cells:
            raise MapError("Invalid map dimensions")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise MapError("Invalid map dimensions")

    @classmethod
    def from_text(cls, text: str) -> Grid:
        """Split map text on newlines, skipping empty pieces, into a grid."""
        return cls([list(row) for row in text.split("\n") if row])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def copy(self) -> Grid:
        """Return an independent copy of the grid."""
        return Grid([list(row) for row in self.cells])

    def __getitem__(self, pos: tuple[int, int]) -> str:
        row, col = pos
        return self.cells[row][col]

    def __setitem__(self, pos: tuple[int, int], tile: str) -> None:
        row, col = pos
        self.cells[row][col] = tile

    def __iter__(self) -> Iterator[str]:
        return ("".join(row) for row in self.cells)

    def __str__(self) -> str:
        return "\n".join(self)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` one by one, keeping their newlines."""
    yield from iter(stream.readline, "")


def collect_map_text(lines: Iterable[str], bonus: bool = False) -> str:
    """Validate map lines and join them into one text.

    Every line must start with a wall and hold only map characters, and the
    whole text must end with a wall.
    """
    charset = BONUS_CHARSET if bonus else PLAIN_CHARSET
    error = "Empty file or Extra characters included"
    parts = []
    for line in lines:
        if not line.startswith("1") or not set(line) <= charset:
            raise MapError(error)
        parts.append(line)
    content = "".join(parts)
    if not content.endswith("1"):
        raise MapError(error)
    return content


def check_extension(path: str | os.PathLike[str]) -> None:
    """Raise MapError unless ``path`` names a ``.ber`` file."""
    name = os.fspath(path)
    if len(name) < len(EXTENSION) or not name.endswith(EXTENSION):
        raise MapError("Allowed extension: *.ber")


def open_map(path: str | os.PathLike[str], bonus: bool = False) -> Grid:
    """Read and validate the map file at ``path`` into a Grid."""
    check_extension(path)
    with open(path, encoding="latin-1", newline="") as stream:
        text = collect_map_text(read_lines(stream), bonus)
    return Grid.from_text(text)