"""Isometric projection of a map and wire-frame drawing into an image."""

from __future__ import annotations

import math
from collections.abc import Iterator

from fildefer.fdfmap import Map
from fildefer.image import Image

ScreenPoint = tuple[int, int]

_ANGLE = math.pi / 6
_FILL = 0.7


def iso_projection(
    x: int, y: int, z: int, fdf_map: Map, win_width: int, win_height: int
) -> ScreenPoint:
    """Project grid point (x, y) at height z to window coordinates.

    The map is scaled to fill 70% of the window and centred in it.
    """
    if fdf_map.width <= 0 or fdf_map.height <= 0:
        raise ValueError("cannot project a point of an empty map")
    scale = min(
        win_width / (fdf_map.width * math.sqrt(2)),
        win_height / (fdf_map.height * math.sqrt(2)),
    ) * _FILL
    px = (x - fdf_map.width / 2.0) * scale
    py = (y - fdf_map.height / 2.0) * scale
    pz = z * (scale * 0.5)
    sx = int((px - py) * math.cos(_ANGLE))
    sy = int((px + py) * math.sin(_ANGLE) - pz)
    return sx + win_width // 2, sy + win_height // 2


def line_points(p0: ScreenPoint, p1: ScreenPoint) -> Iterator[ScreenPoint]:
    """Yield the points of the segment from p0 to p1, both included."""
    x, y = p0
    x1, y1 = p1
    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1
    error = dx // 2 if dx > dy else -(dy // 2)
    while True:
        yield x, y
        if (x, y) == (x1, y1):
            return
        previous = error
        if previous > -dx:
            error -= dy
            x += sx
        if previous < dy:
            error += dx
            y += sy


def draw_line(image: Image, p0: ScreenPoint, p1: ScreenPoint, color: int) -> None:
    """Draw the segment p0-p1 in `color`, skipping points outside the image."""
    for x, y in line_points(p0, p1):
        image.put_pixel(x, y, color)


def draw_map(image: Image, fdf_map: Map) -> None:
    """Draw the map as a wire frame, each edge in the colour of its start point."""
    width, height = image.width, image.height
    rows = fdf_map.points
    for y, row in enumerate(rows):
        for x, point in enumerate(row):
            p0 = iso_projection(x, y, point.z, fdf_map, width, height)
            if x < fdf_map.width - 1:
                p1 = iso_projection(x + 1, y, row[x + 1].z, fdf_map, width, height)
                draw_line(image, p0, p1, point.color)
            if y < fdf_map.height - 1:
                p1 = iso_projection(x, y + 1, rows[y + 1][x].z, fdf_map, width, height)
                draw_line(image, p0, p1, point.color)