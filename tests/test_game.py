import io

import pytest

from solong.constants import LOSS_MESSAGE, VICTORY_MESSAGE, Key
from solong.game import Game, Outcome
from solong.grid import Grid
from solong.level import Point, build_level

LINE_MAP = "1111111\n1PC0E01\n1111111"
DETOUR_MAP = "111111\n1PE0C1\n100001\n111111"
ENEMY_MAP = "11111111\n1NPC0E01\n11111111"


def make_game(text, bonus=False):
    out = io.StringIO()
    level = build_level(Grid.from_text(text), bonus)
    return Game(level, out), out


def test_collecting_clears_old_cell_and_counts_down():
    game, out = make_game(LINE_MAP)
    assert game.move(1, 0) is Outcome.MOVED
    assert game.level.collects == 0
    assert game.level.grid[1, 1] == "0"
    assert game.level.grid[1, 2] == "P"
    assert game.level.player.position == Point(2, 1)
    assert out.getvalue() == "1 Moves\n"


def test_wall_blocks_and_counts_nothing():
    game, out = make_game(LINE_MAP)
    assert game.move(0, -1) is Outcome.BLOCKED
    assert game.moves == 0
    assert game.level.player.position == Point(1, 1)
    assert out.getvalue() == ""


def test_exit_blocked_while_collectibles_remain():
    game, _ = make_game(DETOUR_MAP)
    assert game.press(Key.D) is Outcome.BLOCKED
    assert game.level.grid[1, 2] == "E"
    assert not game.over


def test_reaching_exit_after_collecting_wins():
    game, out = make_game(LINE_MAP)
    results = [game.press(Key.D) for _ in range(3)]
    assert results == [Outcome.MOVED, Outcome.MOVED, Outcome.WON]
    assert game.over
    assert game.outcome is Outcome.WON
    assert out.getvalue().endswith("3 Moves\n" + VICTORY_MESSAGE)


def test_moving_after_game_over_raises():
    game, _ = make_game(LINE_MAP)
    for _ in range(3):
        game.press(Key.D)
    with pytest.raises(RuntimeError):
        game.move(-1, 0)


def test_enemy_ends_bonus_game_in_loss():
    game, out = make_game(ENEMY_MAP, bonus=True)
    assert game.press(Key.A) is Outcome.LOST
    assert game.over
    assert out.getvalue() == "1 Moves\n" + LOSS_MESSAGE


def test_escape_quits_without_moving():
    game, out = make_game(LINE_MAP)
    assert game.press(Key.ESC) is Outcome.QUIT
    assert game.over
    assert game.moves == 0
    assert out.getvalue() == ""


def test_unknown_key_is_ignored_but_remembered():
    game, _ = make_game(LINE_MAP)
    assert game.press(7) is Outcome.IGNORED
    assert game.facing == 7
    assert game.level.player.position == Point(1, 1)


def test_press_moves_down_and_sets_facing():
    game, _ = make_game(DETOUR_MAP)
    assert game.press(Key.S) is Outcome.MOVED
    assert game.facing == Key.S
    assert game.level.player.position == Point(1, 2)
    assert game.level.grid[1, 1] == "0"


def test_walk_around_detour_then_win():
    game, out = make_game(DETOUR_MAP)
    path = [Key.S, Key.D, Key.D, Key.D, Key.W, Key.A, Key.A]
    results = [game.press(key) for key in path]
    assert results[-1] is Outcome.WON
    assert all(r is Outcome.MOVED for r in results[:-1])
    assert game.moves == len(path)
    assert out.getvalue().count(" Moves\n") == len(path)