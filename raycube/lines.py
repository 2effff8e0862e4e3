"""Line-by-line reading of streams and files through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr

__all__ = ["BUFFER_SIZE", "iter_lines", "read_lines"]

BUFFER_SIZE = 50


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters (or bytes) at a time. A
    last line without a newline is yielded as is; nothing is yielded for an
    empty remainder at the end of the stream.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, not {buffer_size}")
    pending = None
    newline = None
    while chunk := stream.read(buffer_size):
        if pending is None:
            pending = chunk[:0]
            newline = "\n" if isinstance(chunk, str) else b"\n"
        pending += chunk
        while (end := pending.find(newline)) != -1:
            yield pending[:end + 1]
            pending = pending[end + 1:]
    if pending:
        yield pending


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a text file with their newlines removed."""
    with open(path, encoding="utf-8", newline="") as handle:
        return [line.rstrip("\n") if line.endswith("\n") else line for line in iter_lines(handle)]