"""Map grid extraction, padding and validation."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "MapError",
    "Direction",
    "PlayerStart",
    "MAP_CHARS",
    "PLAYER_CHARS",
    "PAD_CHAR",
    "is_map_char",
    "is_player_char",
    "is_space",
    "pad_map",
    "generate_map",
    "check_map",
]

MAP_CHARS = "01NSEW"
PLAYER_CHARS = "NSEW"
PAD_CHAR = "X"
_OPEN_CHARS = "0" + PLAYER_CHARS


class MapError(ValueError):
    """Raised when the map part of a scene is missing or invalid."""


class Direction(enum.IntEnum):
    """Direction the player faces at the start."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @classmethod
    def from_char(cls, char: str) -> Direction:
        return _DIRECTIONS[char]


_DIRECTIONS = {
    "N": Direction.NORTH,
    "S": Direction.SOUTH,
    "E": Direction.EAST,
    "W": Direction.WEST,
}


@dataclass(frozen=True)
class PlayerStart:
    """Cell of the padded grid where the player starts, and its heading."""

    x: int
    y: int
    direction: Direction


def is_map_char(char: str) -> bool:
    """True for characters allowed in a map: walls, floor and player marks."""
    return len(char) == 1 and char in MAP_CHARS


def is_player_char(char: str) -> bool:
    """True for the player start marks N, S, E and W."""
    return len(char) == 1 and char in PLAYER_CHARS


def is_space(char: str) -> bool:
    """True for space, tab, newline and vertical tab."""
    return char in (" ", "\t", "\n", "\v")


def _pad_row(row: str, width: int) -> str:
    if not row:
        return PAD_CHAR * width
    body = "".join(PAD_CHAR if char == " " else char for char in row[:width - 1])
    return (PAD_CHAR + body).ljust(width, PAD_CHAR)


def pad_map(rows: Sequence[str]) -> list[str]:
    """Frame the map rows with ``X`` cells.

    Every row becomes one character longer than the longest input row,
    starting with ``X``; spaces and missing cells turn into ``X``. A row of
    ``X`` is added above and below.
    """
    width = max((len(row) for row in rows), default=0) + 1
    border = PAD_CHAR * width
    return [border, *(_pad_row(row, width) for row in rows), border]


def _check_chars(rows: Sequence[str]) -> None:
    for number, row in enumerate(rows):
        for char in row:
            if char != " " and not is_map_char(char):
                raise MapError(f"invalid character {char!r} in map row {number}")


def generate_map(rows: Sequence[str]) -> list[str]:
    """Find the map among the lines after the scene elements and pad it.

    Blank lines before the map are skipped; the map starts at the first line
    whose first non-blank character is ``1`` and runs to the end.
    """
    for start, row in enumerate(rows):
        for char in row:
            if char == "1":
                map_rows = rows[start:]
                _check_chars(map_rows)
                return pad_map(map_rows)
            if not is_space(char):
                raise MapError(f"unexpected character {char!r} before the map")
    raise MapError("no map found")


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def _enclosed(grid: Sequence[str], x: int, y: int) -> bool:
    neighbours = (
        _cell(grid, x - 1, y),
        _cell(grid, x + 1, y),
        _cell(grid, x, y - 1),
        _cell(grid, x, y + 1),
    )
    return all(is_map_char(char) for char in neighbours)


def check_map(grid: Sequence[str]) -> tuple[list[str], PlayerStart]:
    """Check that the padded grid is closed and has exactly one player.

    Returns the grid with the player's cell turned into floor, and the
    player's start.
    """
    starts: list[PlayerStart] = []
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char in _OPEN_CHARS and not _enclosed(grid, x, y):
                raise MapError(f"map is not closed at ({x}, {y})")
            if is_player_char(char):
                starts.append(PlayerStart(x, y, Direction.from_char(char)))
    if len(starts) != 1:
        raise MapError(f"map needs exactly one player, found {len(starts)}")
    start = starts[0]
    cleared = list(grid)
    row = cleared[start.y]
    cleared[start.y] = row[:start.x] + "0" + row[start.x + 1:]
    return cleared, start