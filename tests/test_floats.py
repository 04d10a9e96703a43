import pytest

from pushswap.floats import format_float
from pushswap.spec import parse_spec


def test_default_precision():
    assert format_float(parse_spec("f"), 3.5) == "3.500000"


def test_precision_two():
    assert format_float(parse_spec(".2f"), 3.14159) == "3.14"


def test_half_rounds_up():
    assert format_float(parse_spec(".0f"), 2.5) == "3"


@pytest.mark.parametrize(
    "fmt, value",
    [(".2f", 123.456), (".2f", -7.891), ("f", 0.1), (".3f", 1.0625), (".1f", 0.0)],
)
def test_matches_common_formatting(fmt, value):
    assert format_float(parse_spec(fmt), value) == f"{value:{fmt}}"


def test_plus_and_space_flags():
    assert format_float(parse_spec("+.1f"), 2.0) == f"{2.0:+.1f}"
    assert format_float(parse_spec(" .1f"), 2.0) == f"{2.0: .1f}"


def test_left_justified():
    result = format_float(parse_spec("-8.2f"), 1.5)
    assert result.startswith(f"{1.5:.2f}")
    assert result.rstrip() == f"{1.5:.2f}"


def test_capital_f_rounds_to_integer():
    spec_upper = parse_spec("F")
    spec_zero = parse_spec(".0f")
    assert format_float(spec_upper, 2.6) == format_float(spec_zero, 2.6)
    assert format_float(spec_upper, 2.4) == format_float(spec_zero, 2.4)


def test_sharp_with_zero_precision_keeps_dot():
    result = format_float(parse_spec("#.0f"), 4.0)
    assert result.endswith(".")
    assert result[:-1] == format_float(parse_spec(".0f"), 4.0)


def test_infinity_and_nan():
    assert format_float(parse_spec("f"), float("inf")) == "inf"
    negative = format_float(parse_spec("f"), float("-inf"))
    assert negative.startswith("-")
    assert negative[1:] == "inf"
    assert format_float(parse_spec("f"), float("nan")) == "nan"