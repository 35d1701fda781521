"""Byte-buffer helpers: filling, allocation, searching, comparing and copying."""

from __future__ import annotations

__all__ = [
    "fill",
    "zero",
    "allocate",
    "find_byte",
    "compare",
    "copy",
    "move",
]


def _length(value: int, name: str = "length") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _within(buffer: bytes | bytearray, length: int, name: str = "buffer") -> None:
    if length > len(buffer):
        raise ValueError(f"length {length} exceeds the {len(buffer)} bytes of {name}")


def _writable(buffer: bytearray) -> bytearray:
    if not isinstance(buffer, bytearray):
        raise TypeError(f"buffer must be a bytearray, got {type(buffer).__name__}")
    return buffer


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first length bytes of buffer to value, reduced to one byte."""
    _writable(buffer)
    _length(length)
    _within(buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first length bytes of buffer to zero."""
    return fill(buffer, 0, length)


def allocate(count: int, size: int) -> bytearray:
    """Return a zeroed buffer large enough for count items of size bytes."""
    return bytearray(_length(count, "count") * _length(size, "size"))


def find_byte(buffer: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of value within the first length bytes, or None."""
    _length(length)
    _within(buffer, length)
    index = bytes(buffer[:length]).find(value & 0xFF)
    return None if index == -1 else index


def compare(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare the first length bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0 when
    the compared ranges are equal.
    """
    _length(length)
    _within(first, length, "first")
    _within(second, length, "second")
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def copy(destination: bytearray, source: bytes | bytearray, length: int) -> bytearray:
    """Copy the first length bytes of source over the start of destination."""
    _writable(destination)
    _length(length)
    _within(source, length, "source")
    _within(destination, length, "destination")
    if destination is not source:
        destination[:length] = source[:length]
    return destination


def move(buffer: bytearray, destination: int, source: int, length: int) -> bytearray:
    """Copy length bytes from offset source to offset destination in buffer.

    The two ranges may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _writable(buffer)
    _length(length)
    _length(destination, "destination")
    _length(source, "source")
    if max(destination, source) + length > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    buffer[destination:destination + length] = bytes(buffer[source:source + length])
    return buffer