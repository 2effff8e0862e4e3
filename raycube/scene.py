"""Parsing of ``.cub`` scene descriptions: textures, colours and the map."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from raycube.lines import read_lines
from raycube.mapgrid import PlayerStart, check_map, generate_map

__all__ = [
    "FILE_EXTENSION",
    "SceneError",
    "Scene",
    "has_cub_extension",
    "parse_texture",
    "parse_color",
    "parse_scene",
    "load_scene",
]

FILE_EXTENSION = ".cub"

Color = tuple[int, int, int]

_ELEMENT_COUNT = 6
_COMMA_WITHOUT_DIGIT = re.compile(r",(?![0-9])")


class SceneError(ValueError):
    """Raised when a scene file or one of its elements is invalid."""


@dataclass
class Scene:
    """A parsed scene: wall textures, floor and ceiling colours, and the map.

    ``grid`` is the padded map with the player's cell turned into floor.
    """

    north: str
    south: str
    west: str
    east: str
    floor: Color
    ceiling: Color
    grid: list[str]
    start: PlayerStart

    @property
    def textures(self) -> tuple[str, str, str, str]:
        """Texture paths in the order north, south, west, east."""
        return (self.north, self.south, self.west, self.east)


def has_cub_extension(path: str | PathLike[str]) -> bool:
    """True if the path names a ``.cub`` file."""
    return str(path).endswith(FILE_EXTENSION)


def parse_texture(text: str) -> str:
    """Return the texture path given after an ``NO``/``SO``/``WE``/``EA`` key.

    Surrounding spaces are removed; a path holding a space is rejected.
    """
    path = text.strip(" ")
    if " " in path:
        raise SceneError(f"invalid texture path {path!r}")
    return path


def _is_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()


def parse_color(text: str) -> Color:
    """Return the (red, green, blue) triple given after an ``F``/``C`` key.

    The value is three comma-separated decimal numbers from 0 to 255, with
    no spaces between them.
    """
    value = text.strip(" ")
    if (
        " " in value
        or _COMMA_WITHOUT_DIGIT.search(value)
        or value.count(",") > 2
    ):
        raise SceneError(f"invalid colour {value!r}")
    parts = [part for part in value.split(",") if part]
    if len(parts) != 3:
        raise SceneError(f"colour needs three components, got {value!r}")
    components = []
    for part in parts:
        if not _is_digits(part):
            raise SceneError(f"invalid colour component {part!r}")
        number = int(part)
        if not 0 <= number <= 255:
            raise SceneError(f"colour component {number} out of range")
        components.append(number)
    red, green, blue = components
    return red, green, blue


_ELEMENTS: tuple[tuple[str, str, Callable[[str], object]], ...] = (
    ("NO ", "north", parse_texture),
    ("SO ", "south", parse_texture),
    ("WE ", "west", parse_texture),
    ("EA ", "east", parse_texture),
    ("F ", "floor", parse_color),
    ("C ", "ceiling", parse_color),
)


def _parse_element(line: str, elements: dict[str, object]) -> None:
    for key, name, parser in _ELEMENTS:
        if line.startswith(key):
            value = parser(line[len(key):])
            if name in elements:
                raise SceneError(f"element {key.strip()} given twice")
            elements[name] = value
            return


def parse_scene(lines: Sequence[str]) -> Scene:
    """Build a scene from the lines of a ``.cub`` file, newlines removed.

    Lines starting with a letter are read as elements until all six are
    known; other lines and unknown keys are skipped. The map follows the
    line holding the sixth element. Map problems raise ``MapError``.
    """
    elements: dict[str, object] = {}
    for index, line in enumerate(lines):
        first = line[:1]
        if first.isascii() and first.isalpha():
            _parse_element(line, elements)
        if len(elements) == _ELEMENT_COUNT:
            grid, start = check_map(generate_map(lines[index + 1:]))
            return Scene(grid=grid, start=start, **elements)
    raise SceneError("scene is missing elements")


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse a ``.cub`` scene file."""
    if not has_cub_extension(path):
        raise SceneError(f"{path} is not a {FILE_EXTENSION} file")
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise SceneError(f"cannot read {path}: {exc.strerror}") from exc
    return parse_scene(lines)