# wireframe

Show a height-map file as an isometric wireframe in a window. You can pan, zoom, rotate and tilt the view, and change the height scale.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

The window uses `pygame`, which is installed as a dependency.

## Usage

```
wireframe path/to/map.fdf
```

The command takes one argument, a file whose name ends in `.fdf`. Anything else prints `Usage : wireframe <filename>` and exits with status 0.

A file that cannot be opened, or that is empty, prints `File doesn't exist` and exits with status 0. Any other problem with the map prints a message and exits with status 1. For example, a row may have fewer columns than the first line, or the first line may have no columns.

### Map format

A map is a plain-text grid. Each line is one row. Each word separated by spaces is the height of one point, read as a leading integer. A point can carry a colour after a comma, written as `0x` followed by hex digits, as in `10,0xff0000`. A point with no colour is white (`0xFFFFFF`).

The first line sets the number of columns. Columns beyond that number on later lines are ignored. The number of rows is the number of lines.

```
0 0 0 0
0 5 5 0
0 5,0xff0000 5 0
0 0 0 0
```

The window size depends on the map. It is twice the map's width and height, multiplied by a grid spacing that shrinks as the map gets larger: 24, 16, 5 or 1 pixels.

### Controls

| Input                 | Action                                    |
|-----------------------|-------------------------------------------|
| Arrow keys            | Move the image 5 pixels                   |
| `Z` / `X`             | Raise / lower the height scale (not below 0) |
| `A` / `D`             | Rotate left / right                       |
| `W` / `S`             | Tilt up / down                            |
| `O`                   | Side view: isometric angle, scales reset  |
| `I`                   | Reset scales, position and rotation       |
| Mouse wheel           | Zoom in (up) / out (down) by 10 %         |
| `Esc` or window close | Quit                                      |

## Library use

You can use the drawing code without opening a window:

```python
from wireframe.parsing import load_map
from wireframe.view import ViewState
from wireframe.render import render

height_map = load_map("map.fdf")
view = ViewState.for_map(height_map.width, height_map.height)
canvas = render(height_map, view)
print(canvas.pixel(view.offset_x, view.offset_y))
```

### Modules

- `wireframe.parsing`: `load_map` returns a `HeightMap` of `MapPoint`s, with grid coordinates centred on the origin. `measure_map` returns `(width, height)` and `parse_hex` reads hex colours. Problems with a map raise `MapError`.
- `wireframe.view`: `ViewState` holds the scales, window size, offset and rotation. Its methods are `pan`, `zoom`, `change_depth`, `rotate`, `reset` and `side_view`. `Direction` names the pan directions.
- `wireframe.render`: `project` turns a map into `ProjectedPoint`s. `draw_line` draws one line with Bresenham's algorithm, and `draw_wireframe` connects each point to its neighbours. `render` does all three into a `Canvas`, whose `to_bytes` gives 32-bit little-endian pixels row by row.
- `wireframe.app`: `apply_command` takes a `Command` or its key code and changes a `ViewState` the way the window's keys do. It returns `False` for quit. `apply_scroll` does the same for mouse buttons 4 and 5. `run` opens the window, and `main` is the `wireframe` command.
- `wireframe.lines`: `LineReader` and `read_lines` read a text or binary stream line by line through a fixed-size buffer.
- `wireframe.chars`, `wireframe.strtools`, `wireframe.membuf`: small character, string and byte-buffer helpers. Examples are `atoi`, `split`, `concat_bounded` and `move`.

## What it does not do

The viewer only displays maps. It does not save images, edit maps or export the rendered wireframe to a file. To get the pixels, use `Canvas.to_bytes` from your own code.