import io

import pytest

from wireframe import chars


@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "m"])
def test_is_alpha_accepts_letters(char):
    assert chars.is_alpha(char) is True


@pytest.mark.parametrize("char", ["0", "@", "[", "`", "{", " ", "é"])
def test_is_alpha_rejects_non_letters(char):
    assert chars.is_alpha(char) is False


def test_is_digit_matches_ascii_digits_only():
    digits = [chr(c) for c in range(128) if chars.is_digit(chr(c))]
    assert "".join(digits) == "0123456789"


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        char = chr(code)
        assert chars.is_alnum(char) == (chars.is_alpha(char) or chars.is_digit(char))


def test_is_ascii_bounds():
    assert chars.is_ascii("\x00") is True
    assert chars.is_ascii("\x7f") is True
    assert chars.is_ascii("\x80") is False


def test_is_print_bounds():
    assert chars.is_print(" ") is True
    assert chars.is_print("~") is True
    assert chars.is_print("\x1f") is False
    assert chars.is_print("\x7f") is False


def test_is_sign():
    assert chars.is_sign("+") is True
    assert chars.is_sign("-") is True
    assert chars.is_sign("*") is False


def test_is_space_only_space():
    assert chars.is_space(" ") is True
    assert chars.is_space("\t") is False
    assert chars.is_space("\n") is False


def test_case_conversion_round_trip():
    for code in range(128):
        char = chr(code)
        if chars.is_alpha(char):
            assert chars.to_lower(chars.to_upper(char)) == char.lower()
            assert chars.to_upper(chars.to_lower(char)) == char.upper()
        else:
            assert chars.to_upper(char) == char
            assert chars.to_lower(char) == char


def test_case_conversion_leaves_non_ascii():
    assert chars.to_upper("é") == "é"
    assert chars.to_lower("É") == "É"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classifiers_reject_wrong_length(bad):
    with pytest.raises(ValueError):
        chars.is_digit(bad)


def test_classifiers_reject_non_string():
    with pytest.raises(TypeError):
        chars.is_alpha(65)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("+17", 17),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("0010", 10),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert chars.atoi(text) == expected


def test_atoi_skips_only_spaces():
    assert chars.atoi("\t5") == 0
    assert chars.atoi("\n5") == 0


def test_atoi_stops_at_comma_in_map_cell():
    assert chars.atoi("10,0xFF0000") == 10


def test_atoi_rejects_double_sign():
    assert chars.atoi("--5") == 0
    assert chars.atoi("+-5") == 0


def test_atoi_wraps_to_32_bits():
    assert chars.atoi("2147483648") == -2147483648
    assert chars.atoi("-2147483648") == -2147483648


def test_atol_keeps_values_beyond_32_bits():
    assert chars.atol("2147483648") == 2147483648
    assert chars.atol("  -2147483648x") == -2147483648


def test_atoi_and_atol_agree_in_int_range():
    for value in (-2147483648, -1, 0, 1, 2147483647):
        text = str(value)
        assert chars.atoi(text) == chars.atol(text) == value


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(value):
    assert chars.atoi(chars.itoa(value)) == value


def test_itoa_minimum_int():
    assert chars.itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        chars.itoa(1.5)


def test_put_char_writes_character():
    stream = io.StringIO()
    chars.put_char("x", stream)
    chars.put_char("y", stream)
    assert stream.getvalue() == "xy"


def test_put_str_and_none():
    stream = io.StringIO()
    chars.put_str("hello", stream)
    chars.put_str(None, stream)
    assert stream.getvalue() == "hello"


def test_put_endl_appends_newline():
    stream = io.StringIO()
    chars.put_endl("line", stream)
    assert stream.getvalue() == "line\n"


def test_put_nbr_writes_decimal():
    stream = io.StringIO()
    chars.put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_put_nbr_round_trip():
    for value in (0, 9, 10, -305):
        stream = io.StringIO()
        chars.put_nbr(value, stream)
        assert chars.atoi(stream.getvalue()) == value