"""Drawing a level with pygame and feeding key presses to the game."""

from __future__ import annotations

import time
from collections.abc import Callable

import pygame

from solong.constants import (
    BLOCK_SIZE,
    COIN_FRAME_INTERVAL,
    COIN_FRAMES,
    WINDOW_TITLE,
    Key,
    coin_frame_path,
    texture_path,
)
from solong.game import Game, Outcome

# Width in pixels of the banner that shows the move count in the bonus game.
BANNER_WIDTH = 130
BANNER_COLOUR = (0, 0, 0)
TEXT_COLOUR = (255, 255, 255)
TEXT_OFFSET = (5, 5)
FONT_SIZE = 20

_KEYMAP = {
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_ESCAPE: Key.ESC,
}

Draw = tuple[str, tuple[int, int]]


def translate_key(pygame_key: int) -> Key | None:
    """Return the game key for a pygame key code, or None if it has none."""
    return _KEYMAP.get(pygame_key)


def _load_texture(path: str) -> pygame.Surface:
    return pygame.image.load(path)


class Window:
    """Draws a game's map and turns key presses into moves.

    ``surface`` is drawn on; when it is None, ``run`` opens a window.
    ``load_image`` turns a texture path into a surface, and ``clock`` gives
    the processor time used to pace the coin animation.
    """

    def __init__(
        self,
        game: Game,
        surface: pygame.Surface | None = None,
        load_image: Callable[[str], pygame.Surface] | None = None,
        clock: Callable[[], float] = time.process_time,
    ) -> None:
        self.game = game
        self.surface = surface
        self.banner: str | None = None
        self._load = load_image or _load_texture
        self._clock = clock
        self._textures: dict[str, pygame.Surface] = {}
        self._font: pygame.font.Font | None = None
        self._coin_time: float | None = None
        self._coin_index = 0

    @property
    def bonus(self) -> bool:
        return self.game.level.bonus

    def _texture(self, path: str) -> pygame.Surface:
        if path not in self._textures:
            self._textures[path] = self._load(path)
        return self._textures[path]

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("the window has no surface to draw on")
        return self.surface

    def render(self) -> list[Draw]:
        """Draw every tile of the map; return the textures drawn and where."""
        target = self._target()
        draws: list[Draw] = []
        for row, line in enumerate(self.game.level.grid):
            for col, tile in enumerate(line):
                path = texture_path(tile, self.game.facing, self.bonus)
                if path is None:
                    continue
                position = (col * BLOCK_SIZE, row * BLOCK_SIZE)
                target.blit(self._texture(path), position)
                draws.append((path, position))
        if self.bonus:
            self._print_moves()
        return draws

    def _print_moves(self) -> None:
        target = self._target()
        target.fill(BANNER_COLOUR, pygame.Rect(0, 0, BANNER_WIDTH, BLOCK_SIZE))
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        self.banner = f"Moves: {self.game.moves}"
        text = self._font.render(self.banner, True, TEXT_COLOUR)
        target.blit(text, TEXT_OFFSET)

    def animate_coins(self, now: float) -> str | None:
        """Draw the next coin frame over every collectible when it is due.

        Returns the frame texture drawn, or None when nothing was drawn.
        """
        level = self.game.level
        if not level.collects:
            return None
        due = (
            self._coin_time is None
            or now - self._coin_time >= COIN_FRAME_INTERVAL
        )
        if not due:
            return None
        if self._coin_index == COIN_FRAMES:
            self._coin_index = 0
        path = coin_frame_path(self._coin_index)
        image = self._texture(path)
        target = self._target()
        for row, line in enumerate(level.grid):
            for col, tile in enumerate(line):
                if tile == "C":
                    target.blit(image, (col * BLOCK_SIZE, row * BLOCK_SIZE))
        self._coin_time = now
        self._coin_index += 1
        return path

    def handle_key(self, key: int) -> Outcome:
        """Pass a key to the game and redraw the map after a move."""
        outcome = self.game.press(key)
        if outcome is Outcome.MOVED:
            self.render()
        return outcome

    def run(self) -> Outcome:
        """Open the window and play until the game ends or it is closed."""
        pygame.init()
        try:
            if self.surface is None:
                level = self.game.level
                size = (level.width * BLOCK_SIZE, level.height * BLOCK_SIZE)
                self.surface = pygame.display.set_mode(size)
                pygame.display.set_caption(WINDOW_TITLE)
            self.render()
            pygame.display.flip()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return Outcome.QUIT
                    if event.type != pygame.KEYDOWN:
                        continue
                    key = translate_key(event.key)
                    if key is None:
                        continue
                    outcome = self.handle_key(key)
                    if self.game.over:
                        return outcome
                if self.bonus:
                    self.animate_coins(self._clock())
                pygame.display.flip()
                pygame.time.wait(5)
        finally:
            pygame.quit()