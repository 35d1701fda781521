"""Character classification, integer parsing and simple stream output."""

from __future__ import annotations

from typing import TextIO

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_sign",
    "is_space",
    "to_upper",
    "to_lower",
    "atoi",
    "atol",
    "itoa",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]


def _code(char: str) -> int:
    """Return the code point of a single character, rejecting anything else."""
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character string, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected exactly one character, got {char!r}")
    return ord(char)


def is_alpha(char: str) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(char) <= 126


def is_sign(char: str) -> bool:
    """True for '+' and '-'."""
    _code(char)
    return char in "+-"


def is_space(char: str) -> bool:
    """True only for the space character itself."""
    _code(char)
    return char == " "


def to_upper(char: str) -> str:
    """Upper-case an ASCII letter; other characters are returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return chr(code - 32)
    return char


def to_lower(char: str) -> str:
    """Lower-case an ASCII letter; other characters are returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return chr(code + 32)
    return char


def _wrap(value: int, bits: int) -> int:
    """Reduce a value to a signed two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading_integer(text: str) -> int:
    """Parse spaces, an optional sign and a run of ASCII digits."""
    position = 0
    length = len(text)
    while position < length and text[position] == " ":
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1
    digits = text[start:position]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse the leading integer of text as a 32-bit signed value.

    Only spaces are skipped before the optional sign; parsing stops at the
    first non-digit. Values beyond the 32-bit range wrap around.
    """
    return _wrap(_parse_leading_integer(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of text as a 64-bit signed value."""
    return _wrap(_parse_leading_integer(text), 64)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)


def put_char(char: str, stream: TextIO) -> None:
    """Write one character to the stream."""
    _code(char)
    stream.write(char)


def put_str(text: str | None, stream: TextIO) -> None:
    """Write text to the stream; None writes nothing."""
    if text:
        stream.write(text)


def put_endl(text: str | None, stream: TextIO) -> None:
    """Write text followed by a newline."""
    put_str(text, stream)
    stream.write("\n")


def put_nbr(number: int, stream: TextIO) -> None:
    """Write the decimal representation of an integer."""
    stream.write(itoa(number))