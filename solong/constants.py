"""Game-wide constants: key codes, texture paths and messages."""

from __future__ import annotations

from enum import IntEnum

WINDOW_TITLE = "Sooo loooooong!"
VICTORY_MESSAGE = "Congratulations!!"
LOSS_MESSAGE = "Game over!!"

BLOCK_SIZE = 32

IMG_SPACE = "textures/SPACE.xpm"
IMG_WALL = "textures/WALL.xpm"
IMG_PLAYER = "textures/PLAYER.xpm"
IMG_COLLECTIBLE = "textures/COLLECTIBLE.xpm"
IMG_EXIT = "textures/EXIT.xpm"
IMG_ENEMY = "textures/ENEMY.xpm"

BONUS_IMG_SPACE = "bonus/textures/SPACE.xpm"
BONUS_IMG_WALL = "bonus/textures/WALL.xpm"
BONUS_IMG_EXIT = "bonus/textures/EXIT.xpm"
BONUS_IMG_PLAYER_W = "bonus/textures/player/PLAYER_UP.xpm"
BONUS_IMG_PLAYER_A = "bonus/textures/player/PLAYER_LEFT.xpm"
BONUS_IMG_PLAYER_S = "bonus/textures/player/PLAYER_DOWN.xpm"
BONUS_IMG_PLAYER_D = "bonus/textures/player/PLAYER_RIGHT.xpm"
BONUS_IMG_ENEMY = "bonus/textures/ENEMY.xpm"

COIN_FRAME_DIR = "bonus/textures/collectible"
COIN_FRAMES = 15
# Seconds of processor time between two coin animation frames.
COIN_FRAME_INTERVAL = 0.01


class Key(IntEnum):
    """Key codes understood by the game."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53

    def delta(self) -> tuple[int, int]:
        """Return the (dx, dy) step this key asks for; (0, 0) for ESC."""
        return _DELTAS.get(self, (0, 0))


_DELTAS: dict[Key, tuple[int, int]] = {
    Key.A: (-1, 0),
    Key.D: (1, 0),
    Key.W: (0, -1),
    Key.S: (0, 1),
}

_BONUS_PLAYER = {
    Key.W: BONUS_IMG_PLAYER_W,
    Key.A: BONUS_IMG_PLAYER_A,
    Key.S: BONUS_IMG_PLAYER_S,
    Key.D: BONUS_IMG_PLAYER_D,
}


def texture_path(tile: str, facing: int = Key.S, bonus: bool = False) -> str | None:
    """Return the texture file drawn for ``tile``.

    In the plain game every unknown tile is drawn as the exit. In the bonus
    game collectibles are drawn by the coin animation, so ``None`` is returned
    for them and for anything else without a texture.
    """
    if not bonus:
        return {
            "1": IMG_WALL,
            "0": IMG_SPACE,
            "P": IMG_PLAYER,
            "C": IMG_COLLECTIBLE,
        }.get(tile, IMG_EXIT)
    if tile == "1":
        return BONUS_IMG_WALL
    if tile == "0":
        return BONUS_IMG_SPACE
    if tile == "P":
        for key, path in _BONUS_PLAYER.items():
            if facing == key:
                return path
        return None
    if tile == "N":
        return BONUS_IMG_ENEMY
    if tile == "E":
        return BONUS_IMG_EXIT
    return None


def coin_frame_path(index: int) -> str:
    """Return the texture file of coin animation frame ``index`` (two digits)."""
    if not 0 <= index <= 99:
        raise ValueError(f"coin frame index out of range: {index}")
    return f"{COIN_FRAME_DIR}/c{index:02d}.xpm"