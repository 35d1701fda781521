"""The interactive viewer: key and scroll handling and the command entry point."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Sequence

from .parsing import HeightMap, MapError, load_map
from .render import render
from .view import Direction, ViewState

__all__ = [
    "Command",
    "apply_command",
    "apply_scroll",
    "check_arguments",
    "run",
    "main",
    "PAN_STEP",
    "DEPTH_STEP",
    "ROTATION_STEP",
    "ZOOM_STEP",
]

PAN_STEP = 5
DEPTH_STEP = 0.1
ROTATION_STEP = 0.1
ZOOM_STEP = 0.1
SCROLL_UP = 4
SCROLL_DOWN = 5
USAGE = "Usage : wireframe <filename>"
MAP_SUFFIX = ".fdf"


class Command(Enum):
    """Viewer commands, valued by the key codes that trigger them."""

    QUIT = 53
    PAN_LEFT = 123
    PAN_RIGHT = 124
    PAN_DOWN = 125
    PAN_UP = 126
    RAISE = 6
    FLATTEN = 7
    RESET = 34
    SIDE_VIEW = 31
    TURN_LEFT = 0
    TURN_RIGHT = 2
    TILT_UP = 13
    TILT_DOWN = 1


_PAN_COMMANDS = {
    Command.PAN_LEFT: Direction.LEFT,
    Command.PAN_RIGHT: Direction.RIGHT,
    Command.PAN_DOWN: Direction.DOWN,
    Command.PAN_UP: Direction.UP,
}

_ROTATIONS = {
    Command.TURN_LEFT: (-ROTATION_STEP, 0.0),
    Command.TURN_RIGHT: (ROTATION_STEP, 0.0),
    Command.TILT_UP: (0.0, ROTATION_STEP),
    Command.TILT_DOWN: (0.0, -ROTATION_STEP),
}


def apply_command(view: ViewState, command: Command | int) -> bool:
    """Apply one command to the view; return False when the viewer should close.

    Key codes that name no command leave the view unchanged.
    """
    try:
        command = Command(command)
    except ValueError:
        return True
    if command is Command.QUIT:
        return False
    if command in _PAN_COMMANDS:
        view.pan(PAN_STEP, _PAN_COMMANDS[command])
    elif command is Command.RAISE:
        view.change_depth(DEPTH_STEP)
    elif command is Command.FLATTEN:
        view.change_depth(-DEPTH_STEP)
    elif command is Command.RESET:
        view.reset()
    elif command is Command.SIDE_VIEW:
        view.side_view()
    else:
        view.rotate(*_ROTATIONS[command])
    return True


def apply_scroll(view: ViewState, button: int) -> None:
    """Zoom in for a scroll up, out for a scroll down; ignore other buttons."""
    if button == SCROLL_DOWN:
        view.zoom(-ZOOM_STEP)
    elif button == SCROLL_UP:
        view.zoom(ZOOM_STEP)


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path from the arguments, which must be one .fdf file."""
    if len(argv) != 1 or not argv[0].endswith(MAP_SUFFIX):
        raise ValueError(USAGE)
    return argv[0]


def _key_commands(pygame) -> dict[int, Command]:
    return {
        pygame.K_ESCAPE: Command.QUIT,
        pygame.K_LEFT: Command.PAN_LEFT,
        pygame.K_RIGHT: Command.PAN_RIGHT,
        pygame.K_DOWN: Command.PAN_DOWN,
        pygame.K_UP: Command.PAN_UP,
        pygame.K_z: Command.RAISE,
        pygame.K_x: Command.FLATTEN,
        pygame.K_i: Command.RESET,
        pygame.K_o: Command.SIDE_VIEW,
        pygame.K_a: Command.TURN_LEFT,
        pygame.K_d: Command.TURN_RIGHT,
        pygame.K_w: Command.TILT_UP,
        pygame.K_s: Command.TILT_DOWN,
    }


def _show(pygame, screen, height_map: HeightMap, view: ViewState) -> None:
    canvas = render(height_map, view)
    data = canvas.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    surface = pygame.image.frombuffer(bytes(rgb), (canvas.width, canvas.height), "RGB")
    screen.fill((0, 0, 0))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(path: str | Path) -> int:
    """Open a window showing the map at path and handle input until closed."""
    import pygame

    height_map = load_map(path)
    view = ViewState.for_map(height_map.width, height_map.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.window_width, view.window_height))
        pygame.display.set_caption("FDF")
        keys = _key_commands(pygame)
        _show(pygame, screen, height_map, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                command = keys.get(event.key)
                if command is None:
                    continue
                if not apply_command(view, command):
                    break
            elif event.type == pygame.MOUSEBUTTONDOWN:
                apply_scroll(view, event.button)
            else:
                continue
            _show(pygame, screen, height_map, view)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: show the map named on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_arguments(argv)
    except ValueError:
        print(USAGE)
        return 0
    try:
        load_map(path)
    except MapError as error:
        print(error)
        return 0 if str(error) == "File doesn't exist" else 1
    return run(path)


if __name__ == "__main__":
    raise SystemExit(main())