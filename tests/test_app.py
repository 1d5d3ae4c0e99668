import errno
import os

import pytest

from solong.app import main, main_bonus, run


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_wrong_argument_count(argv, capsys):
    assert run(argv, False) == 1
    assert capsys.readouterr().out == "Error\nInvalid format, try: [./program] [map_filename]"


def test_bad_extension(capsys):
    assert main(["maps/map.txt"]) == 1
    assert capsys.readouterr().out == "Error\nAllowed extension: *.ber"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "Error\n" + os.strerror(errno.ENOENT)


def test_invalid_map(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1P0E1\n11111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map!!"


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nEmpty file or Extra characters included"


def test_bonus_requires_enemy(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("111111\n1PC0E1\n111111")
    assert main_bonus([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map!!"


def test_enemy_rejected_in_plain_game(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("111111\n1PCNE1\n111111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nEmpty file or Extra characters included"


def test_uneven_rows(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PCE\n11111")
    assert main_bonus([str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error\n")