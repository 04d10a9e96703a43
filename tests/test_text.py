import pytest

from pushswap.spec import parse_spec
from pushswap.text import (
    K_M_BOLD,
    RESET,
    format_char,
    format_other,
    format_raw,
    format_string,
    format_style,
)


def test_char_from_code():
    assert format_char(parse_spec("c"), ord("A")) == "A"


def test_char_right_aligned_in_field():
    result = format_char(parse_spec("5c"), "q")
    assert len(result) == 5
    assert result.endswith("q")
    assert result[:-1].strip() == ""


def test_char_zero_and_left_padding():
    zero = format_char(parse_spec("04c"), "x")
    assert zero == "0" * 3 + "x"
    left = format_char(parse_spec("-4c"), "x")
    assert left == "x" + " " * 3


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        format_char(parse_spec("c"), "ab")


def test_string_none_is_null():
    assert format_string(parse_spec("s"), None) == "(null)"


def test_string_precision_truncates():
    assert format_string(parse_spec(".2s"), "hello") == "hello"[:2]


def test_string_zero_precision_is_empty_but_padded():
    result = format_string(parse_spec("3.0s"), "hello")
    assert result == " " * 3


def test_string_left_justified():
    result = format_string(parse_spec("-8s"), "abc")
    assert result.rstrip() == "abc"
    assert len(result) == 8


def test_raw_escapes_unprintable():
    assert format_raw(parse_spec("r"), "a\x01") == "a\\x01"


def test_raw_printable_unchanged():
    assert format_raw(parse_spec("r"), "plain") == "plain"


def test_raw_ignores_zero_flag():
    result = format_raw(parse_spec("05r"), "ab")
    assert result.strip() == "ab"
    assert "0" not in result


def test_other_prints_conversion_char():
    result = format_other(parse_spec("3y"))
    assert len(result) == 3
    assert result.strip() == "y"


def test_reset_style():
    assert format_style(parse_spec("K")) == RESET


def test_style_colors():
    assert format_style(parse_spec("k"), 0xFF0000) == "\x1b[48;2;0;0;0m\x1b[38;2;255;0;0m"


def test_style_bold_comes_first():
    result = format_style(parse_spec("k"), K_M_BOLD)
    assert result.startswith("\x1b[1m")
    assert result.count("\x1b[") == 3