"""In-memory 32-bit pixel images and colour conversion for low-depth displays."""

from __future__ import annotations

import struct
from collections.abc import Sequence

__all__ = ["Image", "rgb_shifts", "color_value"]

_PIXEL_MASK = 0xFFFFFFFF


class Image:
    """A ZPixmap-style image: 32 bits per pixel, little-endian, rows packed.

    Pixels are stored row by row in ``pixels`` as 0xAARRGGBB integers;
    pixel (x, y) lives at index ``y * width + x``. A new image is black.
    """

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.size_line = width * (self.bits_per_pixel // 8)
        self.pixels: list[int] = [0] * (width * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        return self.pixels[self._index(x, y)]

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y), keeping the low 32 bits of ``color``."""
        self.pixels[self._index(x, y)] = color & _PIXEL_MASK

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.pixels = [color & _PIXEL_MASK] * (self.width * self.height)

    def blit(self, other: Image, x: int, y: int) -> None:
        """Copy ``other`` onto this image with its top-left corner at (x, y).

        Parts falling outside this image are clipped.
        """
        x0 = max(x, 0)
        x1 = min(x + other.width, self.width)
        if x0 >= x1:
            return
        for dst_y in range(max(y, 0), min(y + other.height, self.height)):
            src_y = dst_y - y
            src_start = src_y * other.width + (x0 - x)
            dst_start = dst_y * self.width + x0
            span = x1 - x0
            self.pixels[dst_start:dst_start + span] = other.pixels[src_start:src_start + span]

    def to_bytes(self) -> bytes:
        """Return the raw pixel data, ``size_line * height`` bytes, little-endian."""
        return struct.pack(f"<{len(self.pixels)}I", *self.pixels)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"invalid colour mask {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    remaining = mask >> shift
    bits = 0
    while remaining & 1:
        remaining >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (shift, bits) for red, green and blue, flattened into six values."""
    return (*_mask_shift(red_mask), *_mask_shift(green_mask), *_mask_shift(blue_mask))


def color_value(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a display of the given depth.

    Displays of depth 24 or more take the colour unchanged; shallower ones
    pack each channel according to ``shifts`` as made by ``rgb_shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )