# solong

A small top-down puzzle game played on a grid of tiles. Walk around the
map, pick up every collectible, and then step onto the exit. Each move is
counted and printed as you go.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
so-long maps/map.ber
```

The bonus edition adds enemies, a player sprite that faces the direction
of the last key pressed, animated collectibles and an on-screen move
counter (`Moves: N` in a banner at the top left):

```
so-long-bonus maps/map_bonus.ber
```

Both commands take exactly one argument, the path of a map file. The game
window is opened with pygame, sized 32 pixels per tile.

### Controls

| Key      | Action          |
|----------|-----------------|
| W        | move up         |
| A        | move left       |
| S        | move down       |
| D        | move right      |
| Esc      | quit            |

Closing the window also quits. Every successful move prints a line such as
`3 Moves`. The exit cannot be entered while collectibles remain. Stepping
onto it once every collectible has been taken prints `Congratulations!!`
and ends the game; in the bonus edition, walking into an enemy prints
`Game over!!` and ends it too.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row
of tiles:

| Character | Tile                         |
|-----------|------------------------------|
| `1`       | wall                         |
| `0`       | empty floor                  |
| `P`       | player start                 |
| `C`       | collectible                  |
| `E`       | exit                         |
| `N`       | enemy (bonus edition only)   |

A map is accepted only if:

- it contains no other characters, and every line starts with `1`;
- the file does not end with a trailing newline (its last character is `1`);
- all rows have the same length;
- it is closed on all four sides by walls;
- it has exactly one `P`, exactly one `E` and at least one `C`
  (the bonus edition also needs at least one `N`);
- every collectible and the exit can be reached from the start without
  passing through the exit or, in the bonus edition, an enemy.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

When a map is rejected, the file cannot be opened, or the window cannot be
set up, the game prints `Error` followed by the reason and exits with
status 1.

## What is not included

The package contains no images. The game loads its textures from these
paths, relative to the directory you start it from, and they must be
supplied separately:

- plain edition: `textures/WALL.xpm`, `textures/SPACE.xpm`,
  `textures/PLAYER.xpm`, `textures/COLLECTIBLE.xpm`, `textures/EXIT.xpm`;
- bonus edition: `bonus/textures/WALL.xpm`, `bonus/textures/SPACE.xpm`,
  `bonus/textures/EXIT.xpm`, `bonus/textures/ENEMY.xpm`,
  `bonus/textures/player/PLAYER_UP.xpm`, `PLAYER_LEFT.xpm`,
  `PLAYER_DOWN.xpm`, `PLAYER_RIGHT.xpm`, and the coin frames
  `bonus/textures/collectible/c00.xpm` to `c14.xpm`.

No map files are shipped either; write your own as described above.

## Using it from Python

The pieces behind the commands can be used directly:

- `solong.grid.open_map(path, bonus)` reads a `.ber` file into a `Grid`;
  `Grid.from_text(text)` builds one from text. Invalid files raise
  `solong.grid.MapError`.
- `solong.level.load_level(path, bonus)` (or `build_level(grid, bonus)`)
  validates a map and returns a `Level` with its `Player`, exit `Point`
  and item counts.
- `solong.game.Game(level, out)` plays it: `Game.move(dx, dy)` and
  `Game.press(key)` return an `Outcome` (`BLOCKED`, `MOVED`, `WON`,
  `LOST`, `QUIT`, `IGNORED`). Key codes are the members of
  `solong.constants.Key`. Messages go to `out`, standard output by default.
- `solong.window.Window(game)` draws the level with pygame; `Window.run()`
  opens the window and plays until the game ends or the window is closed.
  `solong.window.translate_key` maps pygame key codes to `Key` members.
- `solong.app.main(argv)` and `solong.app.main_bonus(argv)` are the two
  commands; they return the exit status.

```python
import io

from solong.game import Game, Outcome
from solong.grid import Grid
from solong.level import build_level

level = build_level(Grid.from_text("11111\n1PCE1\n11111"))
game = Game(level, out=io.StringIO())
assert game.move(1, 0) is Outcome.MOVED
assert game.move(1, 0) is Outcome.WON
```