"""Grid raycasting: camera set-up, DDA ray casting and textured wall columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycube.image import Image
from raycube.mapgrid import Direction, PlayerStart

__all__ = ["Camera", "RayHit", "camera_for", "cast_ray", "wall_slice", "render_walls"]

_BLOCKING = "1X"
_MIN_DISTANCE = 0.01

_HEADINGS = {
    Direction.NORTH: (0.0, -1.0, 0.66, 0.0),
    Direction.SOUTH: (0.0, 1.0, -0.66, 0.0),
    Direction.EAST: (1.0, 0.0, 0.0, 0.66),
    Direction.WEST: (-1.0, 0.0, 0.0, -0.66),
}


@dataclass
class Camera:
    """Player position, view direction and camera plane."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``side`` is 0 for a wall crossed along x and 1 along y; ``texture`` is
    the index of the wall texture (north, south, west, east); ``wall_x`` is
    the fractional position of the hit along the wall.
    """

    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    distance: float
    wall_x: float
    texture: int


def camera_for(start: PlayerStart) -> Camera:
    """Place a camera at the centre of the start cell, facing its direction."""
    dir_x, dir_y, plane_x, plane_y = _HEADINGS[start.direction]
    return Camera(start.x + 0.5, start.y + 0.5, dir_x, dir_y, plane_x, plane_y)


def _delta(component: float) -> float:
    return math.inf if component == 0 else abs(1 / component)


def _blocks(grid: Sequence[str], x: int, y: int) -> bool:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x] in _BLOCKING
    return True


def cast_ray(camera: Camera, grid: Sequence[str], camera_x: float) -> RayHit:
    """Cast one ray; ``camera_x`` runs from -1 (left edge) to 1 (right edge)."""
    ray_x = camera.dir_x + camera.plane_x * camera_x
    ray_y = camera.dir_y + camera.plane_y * camera_x
    map_x = int(camera.pos_x)
    map_y = int(camera.pos_y)
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)
    if ray_x < 0:
        step_x, side_x = -1, (camera.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - camera.pos_x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (camera.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - camera.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _blocks(grid, map_x, map_y):
            break

    distance = side_x - delta_x if side == 0 else side_y - delta_y
    if distance == 0:
        distance = _MIN_DISTANCE
    if side == 0:
        texture = 0 if ray_x < 0 else 1
        wall_x = camera.pos_y + distance * ray_y
    else:
        texture = 2 if ray_y < 0 else 3
        wall_x = camera.pos_x + distance * ray_x
    wall_x -= math.floor(wall_x)
    return RayHit(map_x, map_y, side, ray_x, ray_y, distance, wall_x, texture)


def wall_slice(hit: RayHit, screen_height: int) -> tuple[int, int, int]:
    """Return (line height, first row, last row) of the wall column for a hit.

    The first row is clamped to 0 and the last to ``screen_height``.
    """
    line_height = int(screen_height / hit.distance)
    draw_start = max(screen_height // 2 - line_height // 2, 0)
    draw_end = screen_height // 2 + line_height // 2
    if draw_end >= screen_height:
        draw_end = screen_height
    return line_height, draw_start, draw_end


def render_walls(frame: Image, camera: Camera, grid: Sequence[str], textures: Sequence[Image]) -> None:
    """Draw one textured wall column per frame column."""
    width, height = frame.width, frame.height
    pixels = frame.pixels
    for x in range(width):
        hit = cast_ray(camera, grid, 2.0 * x / width - 1)
        line_height, draw_start, draw_end = wall_slice(hit, height)
        if line_height <= 0:
            continue
        texture = textures[hit.texture]
        tex_x = int(hit.wall_x * float(texture.width))
        if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
            tex_x = texture.width - tex_x - 1
        step = texture.height / line_height
        tex_pos = (draw_start - height // 2 + line_height // 2) * step
        tex_mask = texture.height - 1
        for row in range(draw_start, draw_end + 1):
            tex_y = int(tex_pos) & tex_mask
            tex_pos += step
            if row < height:
                pixels[row * width + x] = texture.pixels[tex_y * texture.width + tex_x]