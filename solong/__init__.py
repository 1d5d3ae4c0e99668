"""Tile-based puzzle game: collect every coin, then reach the exit."""

__version__ = "1.0.0"