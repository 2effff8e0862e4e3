"""Player movement: key state and how it moves and turns the camera."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycube.raycaster import Camera

__all__ = [
    "KEY_W",
    "KEY_S",
    "KEY_A",
    "KEY_D",
    "KEY_LEFT",
    "KEY_RIGHT",
    "Move",
    "Controller",
    "move_forward_backward",
    "move_left_right",
    "rotate",
]

KEY_W = ord("w")
KEY_S = ord("s")
KEY_A = ord("a")
KEY_D = ord("d")
KEY_LEFT = 0xFF51
KEY_RIGHT = 0xFF53

_WALK_STEP = 0.03
_BACK_STEP = 0.1
_PROBE = 0.1
_TURN_ANGLE = 0.02


class Move(enum.IntEnum):
    """The movement currently held down."""

    NONE = 0
    FORWARD = 1
    BACKWARD = 2
    LEFT = 3
    RIGHT = 4
    TURN_LEFT = 5
    TURN_RIGHT = 6


_KEY_MOVES = {
    KEY_W: Move.FORWARD,
    KEY_S: Move.BACKWARD,
    KEY_A: Move.LEFT,
    KEY_D: Move.RIGHT,
    KEY_LEFT: Move.TURN_LEFT,
    KEY_RIGHT: Move.TURN_RIGHT,
}


def _at(grid: Sequence[str], x: float, y: float) -> str:
    col, row = int(x), int(y)
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "1"


def _passable(grid: Sequence[str], far: tuple[float, float], near: tuple[float, float]) -> bool:
    return _at(grid, *far) == "0" or _at(grid, *near) != "1"


def move_forward_backward(move: Move, camera: Camera, grid: Sequence[str]) -> None:
    """Step along the view direction, checking each axis against walls."""
    c = camera
    if move == Move.FORWARD:
        if _passable(grid, (c.pos_x, c.pos_y + c.dir_y), (c.pos_x, c.pos_y + c.dir_y * _PROBE)):
            c.pos_y += c.dir_y * _WALK_STEP
        if _passable(grid, (c.pos_x + c.dir_x, c.pos_y), (c.pos_x + c.dir_x * _PROBE, c.pos_y)):
            c.pos_x += c.dir_x * _WALK_STEP
    elif move == Move.BACKWARD:
        if _passable(grid, (c.pos_x, c.pos_y - c.dir_y), (c.pos_x, c.pos_y - c.dir_y * _PROBE)):
            c.pos_y -= c.dir_y * _BACK_STEP
        if _passable(grid, (c.pos_x - c.dir_x, c.pos_y), (c.pos_x - c.dir_x * _PROBE, c.pos_y)):
            c.pos_x -= c.dir_x * _BACK_STEP


def move_left_right(move: Move, camera: Camera, grid: Sequence[str]) -> None:
    """Strafe sideways, checking each axis against walls."""
    c = camera
    if move == Move.LEFT:
        if _passable(grid, (c.pos_x + c.dir_y, c.pos_y), (c.pos_x + c.dir_y * _PROBE, c.pos_y)):
            c.pos_x += c.dir_y * _WALK_STEP
        if _passable(grid, (c.pos_x, c.pos_y - c.dir_x), (c.pos_x, c.pos_y - c.dir_x * _PROBE)):
            c.pos_y -= c.dir_x * _WALK_STEP
    elif move == Move.RIGHT:
        if _passable(grid, (c.pos_x - c.dir_y, c.pos_y), (c.pos_x - c.dir_y * _PROBE, c.pos_y)):
            c.pos_x -= c.dir_y * _WALK_STEP
        if _passable(grid, (c.pos_x, c.pos_y + c.dir_x), (c.pos_x - c.dir_y * _PROBE, c.pos_y)):
            c.pos_y += c.dir_x * _WALK_STEP


def rotate(move: Move, camera: Camera) -> None:
    """Turn the view direction and camera plane for the turning moves."""
    if move == Move.TURN_RIGHT:
        angle = _TURN_ANGLE
    elif move == Move.TURN_LEFT:
        angle = -_TURN_ANGLE
    else:
        return
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    c = camera
    c.dir_x, c.dir_y = c.dir_x * cos_a - c.dir_y * sin_a, c.dir_x * sin_a + c.dir_y * cos_a
    c.plane_x, c.plane_y = (
        c.plane_x * cos_a - c.plane_y * sin_a,
        c.plane_x * sin_a + c.plane_y * cos_a,
    )


@dataclass
class Controller:
    """Tracks the movement key held down and applies it each frame."""

    move: Move = Move.NONE

    def press(self, key: int) -> bool:
        """Start the move bound to ``key``; return whether the key is bound."""
        move = _KEY_MOVES.get(key)
        if move is None:
            return False
        self.move = move
        return True

    def release(self, key: int) -> None:
        """Stop moving when any movement key comes up."""
        if key in _KEY_MOVES:
            self.move = Move.NONE

    def apply(self, camera: Camera, grid: Sequence[str]) -> None:
        """Move and turn the camera by one step of the current move."""
        move_forward_backward(self.move, camera, grid)
        move_left_right(self.move, camera, grid)
        rotate(self.move, camera)