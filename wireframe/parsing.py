"""Reading height maps: rows of space-separated heights with optional colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .chars import atoi
from .lines import LineReader

__all__ = [
    "MapError",
    "MapPoint",
    "HeightMap",
    "DEFAULT_COLOR",
    "parse_hex",
    "count_columns",
    "measure_map",
    "load_map",
]

DEFAULT_COLOR = 0xFFFFFF
_HEX_DIGITS = "0123456789abcdefABCDEF"
# A colour follows the height as ",0x" and then the hex digits.
_COLOR_PREFIX_LENGTH = 3


class MapError(Exception):
    """Raised when a map file is missing, empty or malformed."""


@dataclass
class MapPoint:
    """One grid point: centred grid coordinates, height and colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass
class HeightMap:
    """A grid of points, stored row by row."""

    width: int
    height: int
    rows: list[list[MapPoint]] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[MapPoint]]:
        return iter(self.rows)

    def __getitem__(self, row: int) -> list[MapPoint]:
        return self.rows[row]

    def points(self) -> Iterator[MapPoint]:
        """Yield every point, row by row."""
        for row in self.rows:
            yield from row


def parse_hex(text: str) -> int:
    """Parse leading hex digits of text as an unsigned 32-bit value.

    Parsing stops at the first character that is not a hex digit; an empty
    run gives 0. Larger values wrap around.
    """
    result = 0
    for char in text:
        if char not in _HEX_DIGITS:
            break
        result = (result * 16 + int(char, 16)) & 0xFFFFFFFF
    return result


def _words(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def count_columns(line: str) -> int:
    """Count the columns of one map line.

    A trailing word that is only the line end does not count.
    """
    words = _words(line)
    if not words:
        raise MapError("map line holds no columns")
    count = len(words)
    if words[-1].startswith("\n"):
        count -= 1
    return count


def _open(path: str | Path):
    try:
        return open(path, "r", encoding="utf-8", errors="replace", newline="")
    except OSError as error:
        raise MapError("File doesn't exist") from error


def measure_map(path: str | Path) -> tuple[int, int]:
    """Return (width, height) of the map at path.

    The width is taken from the first line; the height is the line count.
    """
    with _open(path) as stream:
        reader = LineReader(stream)
        first = reader.read_line()
        if first is None:
            raise MapError("File doesn't exist")
        width = count_columns(first)
        height = 1 + sum(1 for _ in reader)
    return width, height


def _parse_point(word: str, x: int, y: int) -> MapPoint:
    z = atoi(word)
    comma = word.find(",")
    if comma == -1:
        return MapPoint(x, y, z)
    return MapPoint(x, y, z, parse_hex(word[comma + _COLOR_PREFIX_LENGTH:]))


def load_map(path: str | Path) -> HeightMap:
    """Read the map at path, centring the grid coordinates on the origin."""
    width, height = measure_map(path)
    x_shift = int((width - 1) / 2)
    y_shift = (height - 1) // 2
    rows: list[list[MapPoint]] = []
    with _open(path) as stream:
        for row_index, line in enumerate(LineReader(stream)):
            if row_index >= height:
                break
            words = _words(line)
            if len(words) < width:
                raise MapError(
                    f"line {row_index + 1} has {len(words)} columns, expected {width}"
                )
            rows.append(
                [
                    _parse_point(word, column - x_shift, row_index - y_shift)
                    for column, word in enumerate(words[:width])
                ]
            )
    if len(rows) != height:
        raise MapError("map changed while it was being read")
    return HeightMap(width, height, rows)