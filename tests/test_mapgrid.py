import pytest

from raycube.mapgrid import (
    Direction,
    MapError,
    PlayerStart,
    check_map,
    generate_map,
    is_map_char,
    is_player_char,
    is_space,
    pad_map,
)

ROOM = ["1111", "1N01", "1001", "1111"]


@pytest.mark.parametrize("char", list("01NSEW"))
def test_map_chars(char):
    assert is_map_char(char) is True


@pytest.mark.parametrize("char", ["X", " ", "2", "n", ""])
def test_not_map_chars(char):
    assert is_map_char(char) is False


def test_player_chars():
    assert [is_player_char(c) for c in "NSEW01"] == [True] * 4 + [False] * 2


def test_spaces():
    assert [is_space(c) for c in " \t\n\v1a"] == [True] * 4 + [False] * 2


def test_direction_codes():
    assert [Direction.from_char(c) for c in "NSEW"] == [0, 1, 2, 3]


def test_pad_map_example():
    assert pad_map(["11", " 1"]) == ["XXX", "X11", "XX1", "XXX"]


def test_pad_map_shape():
    rows = ["111", "1 0 1", "", "11"]
    grid = pad_map(rows)
    assert len(grid) == len(rows) + 2
    assert {len(row) for row in grid} == {max(map(len, rows)) + 1}
    assert set(grid[0]) == {"X"} and set(grid[-1]) == {"X"}
    assert all(row[0] == "X" for row in grid)
    assert set(grid[3]) == {"X"}
    assert " " not in "".join(grid)


def test_generate_map_skips_leading_blank_lines():
    rows = ["", "   ", "\t", *ROOM]
    assert generate_map(rows) == pad_map(ROOM)


@pytest.mark.parametrize("rows", [[], ["", "  "], ["  0111"], ["N111"]])
def test_generate_map_without_map(rows):
    with pytest.raises(MapError):
        generate_map(rows)


def test_generate_map_rejects_bad_characters():
    with pytest.raises(MapError):
        generate_map(["111", "1Z1", "111"])


def test_check_map_finds_player():
    grid = generate_map(ROOM)
    cleared, start = check_map(grid)
    assert start == PlayerStart(2, 2, Direction.NORTH)
    assert grid[2][2] == "N"
    assert cleared[2][2] == "0"
    assert "N" not in "".join(cleared)
    assert len(cleared) == len(grid)


def test_check_map_other_direction():
    _, start = check_map(generate_map(["111", "1W1", "111"]))
    assert start.direction is Direction.WEST


@pytest.mark.parametrize(
    "rows",
    [
        ["111", "1N0", "111"],
        ["1111", "1N 1", "1111"],
        ["1111", "1N01", "10", "1111"],
        ["1N1", "111"],
    ],
)
def test_check_map_open_map(rows):
    with pytest.raises(MapError):
        check_map(generate_map(rows))


def test_check_map_without_player():
    with pytest.raises(MapError):
        check_map(generate_map(["111", "101", "111"]))


def test_check_map_with_two_players():
    with pytest.raises(MapError):
        check_map(generate_map(["1111", "1NS1", "1111"]))