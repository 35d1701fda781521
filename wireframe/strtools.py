"""String helpers: splitting, searching, slicing, bounded copying and mapping."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

__all__ = [
    "split",
    "find_char",
    "find_last_char",
    "find_substring",
    "substring",
    "join",
    "trim",
    "compare",
    "concat_bounded",
    "copy_bounded",
    "map_chars",
    "visit_chars",
]

_TERMINATOR = "\0"


def _single_char(char: str, name: str = "char") -> str:
    if not isinstance(char, str):
        raise TypeError(f"{name} must be a one-character string, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"{name} must be exactly one character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces.

    Runs of separators count as one, and leading or trailing separators
    produce no empty words. Text holding no words yields an empty list.
    """
    _single_char(separator, "separator")
    return [word for word in text.split(separator) if word]


def find_char(text: str, char: str) -> str | None:
    """Return text from the first occurrence of char onwards, or None.

    Searching for the NUL character always succeeds at the end of the text.
    """
    _single_char(char)
    index = text.find(char)
    if index == -1:
        return "" if char == _TERMINATOR else None
    return text[index:]


def find_last_char(text: str, char: str) -> str | None:
    """Return text from the last occurrence of char onwards, or None.

    Searching for the NUL character returns the empty tail of the text.
    """
    _single_char(char)
    if char == _TERMINATOR:
        return ""
    index = text.rfind(char)
    if index == -1:
        return None
    return text[index:]


def find_substring(haystack: str, needle: str, length: int) -> str | None:
    """Find needle wholly within the first length characters of haystack.

    Returns haystack from the match onwards, haystack itself for an empty
    needle, or None when there is no match.
    """
    _non_negative(length, "length")
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    if index == -1:
        return None
    return haystack[index:]


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text starting at start.

    A start beyond the end of text gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def join(first: str | None, second: str | None) -> str:
    """Concatenate two strings, treating None as empty."""
    return (first or "") + (second or "")


def trim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    if not isinstance(chars, str):
        raise TypeError(f"chars must be a string, got {type(chars).__name__}")
    if not text or not chars:
        return text
    return text.strip(chars)


def compare(first: str, second: str, length: int) -> int:
    """Compare at most length characters; the sign gives the ordering.

    The result is the code-point difference at the first mismatch, with the
    end of a string counting as NUL, and 0 when the prefixes match.
    """
    _non_negative(length, "length")
    for left, right in zip_longest(first[:length], second[:length], fillvalue=_TERMINATOR):
        if left != right:
            return ord(left) - ord(right)
        if left == _TERMINATOR:
            return 0
    return 0


def concat_bounded(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append source to destination so the result fits a buffer of size.

    The buffer holds size - 1 characters plus a terminator. Returns the
    resulting string and the length the full concatenation would have had;
    when destination already fills the buffer that length is size plus the
    length of source.
    """
    _non_negative(size, "size")
    if len(destination) >= size:
        return destination, size + len(source)
    room = size - len(destination) - 1
    return destination + source[:room], len(destination) + len(source)


def copy_bounded(source: str, size: int) -> tuple[str, int]:
    """Copy source into a buffer of size, keeping at most size - 1 characters.

    Returns the copied string and the full length of source.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def visit_chars(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for every character of text, in order."""
    for index, char in enumerate(text):
        func(index, char)