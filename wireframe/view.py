"""The view of a map: scale, window size, pan offset and rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

__all__ = ["Direction", "ViewState", "scale_for", "DEPTH_SCALE"]

DEPTH_SCALE = 2.0


class Direction(Enum):
    """Pan directions, valued by the arrow key codes that trigger them."""

    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


def scale_for(size: int) -> float:
    """Return the grid spacing in pixels for a map dimension of size points."""
    if size < 10:
        return 24.0
    if size < 40:
        return 16.0
    if size < 300:
        return 5.0
    return 1.0


@dataclass
class ViewState:
    """Everything that decides how a map of width by height is drawn."""

    width: int
    height: int
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = DEPTH_SCALE
    window_width: int = 0
    window_height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    horizontal: float = 0.0
    vertical: float = 0.0

    @classmethod
    def for_map(cls, width: int, height: int) -> "ViewState":
        """Create the initial view, and window size, for a map."""
        view = cls(width, height)
        view.reset()
        return view

    def reset_scale(self) -> None:
        """Restore the scales, making both grid axes use the longer side's."""
        self.scale_x = scale_for(self.width)
        self.scale_y = scale_for(self.height)
        self.scale_z = DEPTH_SCALE
        if self.width > self.height:
            self.scale_y = self.scale_x
        if self.height > self.width:
            self.scale_x = self.scale_y

    def reset(self) -> None:
        """Restore scales, window size, centring and rotation."""
        self.reset_scale()
        self.window_width = int(self.width * 2 * self.scale_x)
        self.window_height = int(self.height * 2 * self.scale_y)
        self.offset_x = self.window_width // 2
        self.offset_y = self.window_height // 2
        self.horizontal = 0.0
        self.vertical = 0.0

    def side_view(self) -> None:
        """Restore scales and centring and turn to the isometric angle."""
        self.reset_scale()
        self.offset_x = self.window_width // 2
        self.offset_y = self.window_height // 2
        self.horizontal = math.pi / 4
        self.vertical = -math.pi / 6

    def pan(self, step: int, direction: Direction) -> None:
        """Shift the picture by step pixels in direction."""
        direction = Direction(direction)
        if direction is Direction.LEFT:
            self.offset_x -= step
        elif direction is Direction.RIGHT:
            self.offset_x += step
        elif direction is Direction.DOWN:
            self.offset_y += step
        else:
            self.offset_y -= step

    def change_depth(self, amount: float) -> None:
        """Add amount to the height scale, never going below zero."""
        self.scale_z = max(self.scale_z + amount, 0.0)

    def zoom(self, amount: float) -> None:
        """Multiply every scale by 1 + amount."""
        factor = 1 + amount
        self.scale_x *= factor
        self.scale_y *= factor
        self.scale_z *= factor

    def rotate(self, horizontal: float, vertical: float) -> None:
        """Add to the horizontal and vertical rotation angles."""
        self.horizontal += horizontal
        self.vertical += vertical