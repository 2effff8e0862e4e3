"""Scene parsing, XPM textures and grid raycasting for .cub maze files."""

__version__ = "0.1.0"
__all__ = [
    "colornames",
    "image",
    "lines",
    "mapgrid",
    "player",
    "raycaster",
    "scene",
    "xpm",
]