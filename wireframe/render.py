"""Projecting a height map and drawing it as a wireframe into a pixel canvas."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from .parsing import HeightMap
from .view import ViewState

__all__ = [
    "Canvas",
    "ProjectedPoint",
    "project",
    "draw_line",
    "draw_wireframe",
    "render",
]

_PIXEL = struct.Struct("<I")
_BYTES_PER_PIXEL = _PIXEL.size
# The grid is first turned a quarter of a right angle clockwise, then
# flattened by the sine of this tilt.
_BASE_TURN = -math.pi / 4
_BASE_TILT = math.pi / 6


def _dimension(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass
class Canvas:
    """A width by height image of 32-bit pixels, stored little-endian."""

    width: int
    height: int
    _data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _dimension(self.width, "width")
        _dimension(self.height, "height")
        self._data = bytearray(self.width * self.height * _BYTES_PER_PIXEL)

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; the last row and column and anything outside are left alone."""
        if x < 0 or y < 0 or x > self.width - 2 or y > self.height - 2:
            return
        _PIXEL.pack_into(self._data, self._offset(x, y), color & 0xFFFFFFFF)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} canvas")
        return _PIXEL.unpack_from(self._data, self._offset(x, y))[0]

    def to_bytes(self) -> bytes:
        """Return the pixels row by row, four little-endian bytes each."""
        return bytes(self._data)


@dataclass(frozen=True)
class ProjectedPoint:
    """A map point after rotation and scaling.

    x is the screen column, y the flattened row before the height is
    applied, z the scaled height and screen_y the resulting screen row,
    all relative to the view's offset.
    """

    x: int
    y: int
    z: int
    screen_y: int
    color: int


def project(height_map: HeightMap, view: ViewState) -> list[list[ProjectedPoint]]:
    """Rotate, scale and flatten every point of the map for the given view."""
    angle = _BASE_TURN + view.horizontal
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    depth_factor = math.cos(view.vertical)
    flatten = math.sin(_BASE_TILT + view.vertical)
    projected: list[list[ProjectedPoint]] = []
    for row in height_map.rows:
        projected_row = []
        for point in row:
            x = int((cos_a * point.x - sin_a * point.y) * view.scale_x)
            y = int((sin_a * point.x + cos_a * point.y) * view.scale_y)
            z = int(point.z * view.scale_z * depth_factor)
            y = int(y * flatten)
            projected_row.append(ProjectedPoint(x, y, z, y - z, point.color))
        projected.append(projected_row)
    return projected


def _plot_shallow(canvas: Canvas, start: ProjectedPoint, end: ProjectedPoint,
                  offset_x: int, offset_y: int) -> None:
    dx = end.x - start.x
    dy = end.screen_y - start.screen_y
    step = 1
    if dy < 0:
        dy = -dy
        step = -1
    decision = 2 * dy - dx
    y = start.screen_y + offset_y
    for x in range(start.x + offset_x, end.x + offset_x + 1):
        canvas.put_pixel(x, y, end.color)
        if decision > 0:
            y += step
            decision += 2 * (dy - dx)
        else:
            decision += 2 * dy


def _plot_steep(canvas: Canvas, start: ProjectedPoint, end: ProjectedPoint,
                offset_x: int, offset_y: int) -> None:
    dx = end.x - start.x
    dy = end.screen_y - start.screen_y
    step = 1
    if dx < 0:
        dx = -dx
        step = -1
    decision = 2 * dx - dy
    x = start.x + offset_x
    for y in range(start.screen_y + offset_y, end.screen_y + offset_y + 1):
        canvas.put_pixel(x, y, end.color)
        if decision > 0:
            x += step
            decision += 2 * (dx - dy)
        else:
            decision += 2 * dx


def draw_line(canvas: Canvas, start: ProjectedPoint, end: ProjectedPoint,
              offset_x: int, offset_y: int) -> None:
    """Draw a straight line between two projected points, shifted by the offsets.

    The line takes the colour of whichever point lies further right (for
    shallow lines) or further down (for steep lines).
    """
    dx = abs(end.x - start.x)
    dy = abs(end.screen_y - start.screen_y)
    if dy <= dx:
        if start.x > end.x:
            start, end = end, start
        _plot_shallow(canvas, start, end, offset_x, offset_y)
    else:
        if start.screen_y > end.screen_y:
            start, end = end, start
        _plot_steep(canvas, start, end, offset_x, offset_y)


def draw_wireframe(canvas: Canvas, projected: list[list[ProjectedPoint]], view: ViewState) -> None:
    """Connect every point to its neighbours above and to the left."""
    previous: list[ProjectedPoint] | None = None
    for row in projected:
        for column, point in enumerate(row):
            if previous is not None:
                draw_line(canvas, previous[column], point, view.offset_x, view.offset_y)
            if column:
                draw_line(canvas, row[column - 1], point, view.offset_x, view.offset_y)
        previous = row


def render(height_map: HeightMap, view: ViewState) -> Canvas:
    """Draw the map into a fresh canvas the size of the view's window."""
    canvas = Canvas(view.window_width, view.window_height)
    draw_wireframe(canvas, project(height_map, view), view)
    return canvas