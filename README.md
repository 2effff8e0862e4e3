# raycube

raycube is a pure-Python library for building a first-person maze explorer
from `.cub` scene files. It reads and checks scene files, loads XPM wall
textures into 32-bit images, casts rays through the map grid and draws
textured wall columns into an image, and moves and turns the player camera
from key presses.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## What the package does not do

raycube has no window, no event loop and no command-line program. It
renders into an in-memory `Image`; showing that image on screen and feeding
key events to the player controller is left to the caller. It also does not
draw the floor and ceiling background or a minimap: `render_walls` draws
only the wall columns.

## The scene file

A scene begins with six elements, in any order, one per line:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the XPM texture path for each wall face. A
  path may not contain a space.
- `F` and `C` give the floor and ceiling colours as three numbers from 0 to
  255, separated by commas with no spaces.

Each element may appear only once. The map follows the line holding the
sixth element:

```
        1111111111111
        1000000000001
111111111011000001110000000001
100000000011000001110111111111
11110111111111011100000010001
11000001110101011111011110N0111
11111111 1111111 111111111111
```

- `1` is a wall, `0` is open floor and a space is outside the maze.
- Exactly one of `N`, `S`, `E` or `W` marks where the player starts and
  which way they face.
- Every open cell, including the start, must be enclosed: none of its four
  neighbours may be a space or lie outside the map.

## Modules

- `raycube.scene` — `load_scene(path)` reads a `.cub` file and returns a
  `Scene` with `north`, `south`, `west`, `east`, `floor`, `ceiling`, `grid`
  and `start`; `Scene.textures` gives the four texture paths in that
  order. `parse_scene(lines)`, `parse_texture(text)` and
  `parse_color(text)` work on text directly. Bad elements raise
  `SceneError`.
- `raycube.mapgrid` — `generate_map(rows)` finds the map and frames it
  with `X` cells (`pad_map`); `check_map(grid)` checks it is closed and
  returns the grid with the start cell cleared and a `PlayerStart`
  (`x`, `y`, `direction`). Problems raise `MapError`.
- `raycube.lines` — `iter_lines(stream, buffer_size)` yields the lines of
  a stream read in fixed-size chunks; `read_lines(path)` returns a file's
  lines without newlines.
- `raycube.xpm` — `read_xpm(path)` and `parse_xpm(rows)` load an XPM
  pixmap into an `Image`; malformed data raises `XpmError`.
- `raycube.colornames` — `lookup_color(name)` and `text_to_rgb(name,
  suffix)` resolve X11 colour names and `#rrggbb` specs.
- `raycube.image` — `Image(width, height)` with `get`, `put`, `fill`,
  `blit` and `to_bytes`; `rgb_shifts` and `color_value` convert colours
  for displays shallower than 24 bits.
- `raycube.raycaster` — `camera_for(start)` builds a `Camera`;
  `cast_ray(camera, grid, camera_x)` returns a `RayHit`;
  `wall_slice(hit, screen_height)` gives the column extent;
  `render_walls(frame, camera, grid, textures)` draws every column.
  Texture heights should be powers of two.
- `raycube.player` — `Controller` tracks the held movement key (`press`,
  `release`) and `apply(camera, grid)` moves or turns the camera one step.
  Keys are `KEY_W`, `KEY_S`, `KEY_A`, `KEY_D`, `KEY_LEFT` and `KEY_RIGHT`.

## Example

```python
from raycube.image import Image
from raycube.player import KEY_W, Controller
from raycube.raycaster import camera_for, render_walls
from raycube.scene import load_scene
from raycube.xpm import read_xpm

scene = load_scene("maps/level.cub")
textures = [read_xpm(path) for path in scene.textures]
camera = camera_for(scene.start)

controller = Controller()
controller.press(KEY_W)
controller.apply(camera, scene.grid)

red, green, blue = scene.floor
frame = Image(800, 600)
frame.fill(red << 16 | green << 8 | blue)
render_walls(frame, camera, scene.grid, textures)
data = frame.to_bytes()  # 800 * 600 * 4 bytes, little-endian 0xAARRGGBB
```

## Running the tests

```
pip install .[test]
pytest
```