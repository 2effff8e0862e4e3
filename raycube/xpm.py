"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from os import PathLike

from raycube.colornames import text_to_rgb
from raycube.image import Image

__all__ = [
    "XpmError",
    "find_outside_quotes",
    "split_words",
    "strip_comments",
    "extract_strings",
    "parse_xpm",
    "read_xpm",
]

# Transparent ("None") pixels are stored with this value.
_TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def find_outside_quotes(text: str, needle: str) -> int:
    """Return the first index of ``needle`` not inside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, start: int, length: int) -> str:
    end = min(start + length, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside strings, keeping the text length."""
    while (start := find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        offset = end - (start + 2) if end != -1 else -1
        text = _blank(text, start, offset + 4)
    while (start := find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", start + 2)
        offset = end - (start + 2) if end != -1 else -1
        text = _blank(text, start, offset + 3)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of the double-quoted strings in ``text``, in order."""
    return list(_iter_strings(text))


def _iter_strings(text: str) -> Iterator[str]:
    pos = 0
    while (open_at := text.find('"', pos)) != -1:
        close_at = text.find('"', open_at + 1)
        if close_at == -1:
            return
        yield text[open_at + 1:close_at]
        pos = close_at + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    values = []
    for index in range(4):
        value = _atoi(words[index]) if index < len(words) else 0
        if value == 0:
            raise XpmError(f"invalid XPM header {line!r}")
        values.append(value)
    width, height, ncolors, cpp = values
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"invalid XPM header {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        after = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour in XPM line {line!r}") from None
    if after >= len(words):
        raise XpmError(f"no colour in XPM line {line!r}")
    suffix = words[after + 1] if after + 1 < len(words) else None
    return text_to_rgb(words[after], suffix)


def parse_xpm(rows: Sequence[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    ``rows`` holds the header, the colour lines and the pixel lines.
    Unknown pixel keys give black; transparent ones give 0xFF000000.
    """
    lines = iter(rows)

    def next_line(what: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    width, height, ncolors, cpp = _parse_header(next_line("the header"))
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("the colour table ends")
        key = line[:cpp]
        color = _parse_color(line, cpp)
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line("the pixel rows end")
        row_start = y * width
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.pixels[row_start + x] = color & 0xFFFFFFFF
    return image


def read_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror}") from exc
    return parse_xpm(extract_strings(strip_comments(text)))