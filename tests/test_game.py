import io

import pytest

from solong.game import Game, MoveResult
from solong.gamemap import load_map


def make_game(tmp_path, rows):
    path = tmp_path / "map.ber"
    path.write_text("\n".join(rows) + "\n", encoding="latin-1")
    output = io.StringIO()
    return Game(load_map(path), output=output), output


ROWS = ["111111", "1PC0E1", "111111"]


def test_move_collects_and_counts_steps(tmp_path):
    game, output = make_game(tmp_path, ROWS)
    assert game.move(1, 0) is MoveResult.MOVED
    assert game.collectibles == 0
    assert game.steps == 1
    assert output.getvalue() == "Steps: 1\n"
    assert game.map.tile(1, 1) == "0"
    assert game.map.tile(2, 1) == "P"
    assert (game.player_x, game.player_y) == (2, 1)


def test_move_into_wall_is_blocked(tmp_path):
    game, output = make_game(tmp_path, ROWS)
    assert game.move(0, -1) is MoveResult.BLOCKED
    assert game.move(-1, 0) is MoveResult.BLOCKED
    assert game.steps == 0
    assert output.getvalue() == ""
    assert (game.player_x, game.player_y) == (1, 1)


def test_exit_closed_until_all_collected(tmp_path):
    game, output = make_game(tmp_path, ["111111", "1PEC01", "111111"])
    assert game.move(1, 0) is MoveResult.EXIT_CLOSED
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.steps == 0
    assert game.finished is False
    assert game.map.tile(2, 1) == "E"


def test_completing_the_game(tmp_path):
    game, output = make_game(tmp_path, ROWS)
    assert game.move(1, 0) is MoveResult.MOVED
    assert game.move(1, 0) is MoveResult.MOVED
    assert game.move(1, 0) is MoveResult.COMPLETED
    assert game.finished is True
    assert output.getvalue().endswith("Game completed!\n")
    assert game.steps == 2
    assert game.map.tile(4, 1) == "E"


def test_handle_key_escape_quits(tmp_path):
    game, _ = make_game(tmp_path, ROWS)
    assert game.handle_key(65307) is MoveResult.QUIT
    assert game.finished is True


@pytest.mark.parametrize(
    "keycode, expected",
    [(100, (2, 1)), (97, (1, 1)), (119, (1, 1)), (115, (1, 1))],
)
def test_handle_key_directions(tmp_path, keycode, expected):
    game, _ = make_game(tmp_path, ROWS)
    game.handle_key(keycode)
    assert (game.player_x, game.player_y) == expected


def test_handle_key_unknown_is_ignored(tmp_path):
    game, _ = make_game(tmp_path, ROWS)
    assert game.handle_key(120) is MoveResult.IGNORED
    assert game.steps == 0


def test_steps_accumulate(tmp_path):
    game, output = make_game(tmp_path, ROWS)
    game.handle_key(100)
    game.handle_key(97)
    game.handle_key(100)
    assert game.steps == 3
    assert output.getvalue().splitlines() == ["Steps: 1", "Steps: 2", "Steps: 3"]
    assert sum(row.count("P") for row in game.map.rows) == 1