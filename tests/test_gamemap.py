import pytest

from solong.gamemap import (
    GameMap,
    MapError,
    has_valid_characters,
    load_map,
    read_map_lines,
    validate_map,
    validate_paths,
    validate_walls,
)

VALID = ["11111", "1PCE1", "11111"]


def write_map(tmp_path, rows, trailing_newline=True):
    path = tmp_path / "map.ber"
    text = "\n".join(rows) + ("\n" if trailing_newline else "")
    path.write_text(text, encoding="latin-1")
    return path


def test_read_map_lines_strips_newlines(tmp_path):
    path = write_map(tmp_path, VALID)
    assert read_map_lines(path) == VALID


def test_read_map_lines_without_trailing_newline(tmp_path):
    path = write_map(tmp_path, VALID, trailing_newline=False)
    assert read_map_lines(path) == VALID


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        read_map_lines(tmp_path / "absent.ber")


def test_load_valid_map(tmp_path):
    game_map = load_map(write_map(tmp_path, VALID))
    assert isinstance(game_map, GameMap)
    assert (game_map.width, game_map.height) == (5, 3)
    assert (game_map.player_x, game_map.player_y) == (1, 1)
    assert game_map.collectibles == 1
    assert game_map.exits == 1
    assert game_map.tile(2, 1) == "C"
    assert game_map.tile(3, 1) == "E"


def test_tile_out_of_range(tmp_path):
    game_map = load_map(write_map(tmp_path, VALID))
    with pytest.raises(IndexError):
        game_map.tile(5, 0)
    with pytest.raises(IndexError):
        game_map.tile(0, -1)


def test_load_empty_file_is_invalid(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError):
        load_map(path)


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1PCX1", "11111"],
        ["111111", "1PPCE1", "111111"],
        ["11111", "1P0E1", "11111"],
        ["11111", "1PC01", "11111"],
    ],
)
def test_invalid_characters(rows):
    assert has_valid_characters(rows) is False
    assert validate_map(rows) is False


def test_valid_characters():
    assert has_valid_characters(VALID) is True


def test_walls_valid():
    assert validate_walls(VALID) is True


@pytest.mark.parametrize(
    "rows",
    [
        ["11011", "1PCE1", "11111"],
        ["11111", "0PCE1", "11111"],
        ["11111", "1PCE0", "11111"],
        ["11111", "1PCE1", "11101"],
        ["11111", "1PCE", "11111"],
    ],
)
def test_walls_with_gap(rows):
    assert validate_walls(rows) is False


def test_paths_reachable():
    assert validate_paths(VALID, 1, 1) is True


def test_paths_wrong_counts():
    assert validate_paths(VALID, 2, 1) is False


def test_paths_blocked():
    rows = ["111111", "1P1CE1", "111111"]
    assert validate_paths(rows, 1, 1) is False
    assert validate_map(rows) is False


def test_paths_through_exit():
    rows = ["111111", "1PEC01", "111111"]
    assert validate_paths(rows, 1, 1) is True


def test_load_unreachable_raises(tmp_path):
    path = write_map(tmp_path, ["1111111", "1P01CE1", "1111111"])
    with pytest.raises(MapError):
        load_map(path)


def test_validate_map_empty_rows():
    assert validate_map([]) is False
    assert validate_map([""]) is False


def test_carriage_return_is_invalid(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11111\r\n1PCE1\r\n11111\r\n")
    with pytest.raises(MapError):
        load_map(path)