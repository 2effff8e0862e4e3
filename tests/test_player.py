import math

import pytest

from raycube.mapgrid import check_map, generate_map
from raycube.player import (
    KEY_A,
    KEY_D,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    Controller,
    Move,
    move_forward_backward,
    move_left_right,
    rotate,
)
from raycube.raycaster import Camera, camera_for

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


@pytest.fixture
def world():
    grid, start = check_map(generate_map(ROOM))
    return grid, camera_for(start)


@pytest.mark.parametrize(
    "key, move",
    [
        (KEY_W, Move.FORWARD),
        (KEY_S, Move.BACKWARD),
        (KEY_A, Move.LEFT),
        (KEY_D, Move.RIGHT),
        (KEY_LEFT, Move.TURN_LEFT),
        (KEY_RIGHT, Move.TURN_RIGHT),
    ],
)
def test_press_sets_move(key, move):
    controller = Controller()
    assert controller.press(key) is True
    assert controller.move == move


def test_unbound_key_keeps_move():
    controller = Controller()
    controller.press(KEY_W)
    assert controller.press(ord("q")) is False
    controller.release(ord("q"))
    assert controller.move == Move.FORWARD


def test_release_stops_any_move():
    controller = Controller()
    controller.press(KEY_W)
    controller.release(KEY_D)
    assert controller.move == Move.NONE


def test_forward_moves_along_direction(world):
    grid, camera = world
    start_y = camera.pos_y
    move_forward_backward(Move.FORWARD, camera, grid)
    assert camera.pos_y == pytest.approx(start_y - 0.03)
    assert camera.pos_x == pytest.approx(3.5)


def test_backward_uses_larger_step(world):
    grid, camera = world
    start_y = camera.pos_y
    move_forward_backward(Move.BACKWARD, camera, grid)
    assert camera.pos_y == pytest.approx(start_y + 0.1)


def test_forward_blocked_by_wall(world):
    grid, _ = world
    camera = Camera(3.5, 2.05, 0.0, -1.0, 0.66, 0.0)
    move_forward_backward(Move.FORWARD, camera, grid)
    assert camera.pos_y == pytest.approx(2.05)


def test_strafe_left_and_right_are_opposite(world):
    grid, camera = world
    start_x = camera.pos_x
    move_left_right(Move.LEFT, camera, grid)
    assert camera.pos_x == pytest.approx(start_x - 0.03)
    move_left_right(Move.RIGHT, camera, grid)
    assert camera.pos_x == pytest.approx(start_x)


def test_none_moves_nothing(world):
    grid, camera = world
    before = (camera.pos_x, camera.pos_y, camera.dir_x, camera.dir_y)
    controller = Controller()
    controller.apply(camera, grid)
    assert (camera.pos_x, camera.pos_y, camera.dir_x, camera.dir_y) == before


def test_rotation_keeps_length_and_undoes(world):
    _, camera = world
    rotate(Move.TURN_RIGHT, camera)
    assert camera.dir_x > 0
    assert math.hypot(camera.dir_x, camera.dir_y) == pytest.approx(1.0)
    assert math.hypot(camera.plane_x, camera.plane_y) == pytest.approx(0.66)
    rotate(Move.TURN_LEFT, camera)
    assert camera.dir_x == pytest.approx(0.0)
    assert camera.dir_y == pytest.approx(-1.0)


def test_rotation_keeps_plane_perpendicular(world):
    _, camera = world
    for _ in range(10):
        rotate(Move.TURN_LEFT, camera)
    dot = camera.dir_x * camera.plane_x + camera.dir_y * camera.plane_y
    assert dot == pytest.approx(0.0, abs=1e-9)


def test_controller_apply_moves_camera(world):
    grid, camera = world
    controller = Controller()
    controller.press(KEY_S)
    start_y = camera.pos_y
    controller.apply(camera, grid)
    assert camera.pos_y > start_y