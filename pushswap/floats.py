"""Rendering of the ``f`` and ``F`` conversions."""

from __future__ import annotations

import math

from pushswap.spec import ConversionSpec, Flag

_DIGITS = "0123456789"


def _is_special(f: float) -> bool:
    return math.isinf(f) or math.isnan(f)


def _is_negative(f: float) -> bool:
    return math.copysign(1.0, f) < 0


def _round(precision: int, f: float) -> float:
    """Round half away from zero on the digit after ``precision``."""
    if _is_special(f):
        return f
    places = max(precision, 0)
    tmp = abs(f)
    for _ in range(places):
        tmp = 10 * (tmp - int(tmp))
    tmp -= int(tmp)
    if tmp >= 0.5:
        step = 1.0
        for _ in range(places):
            step /= 10
        f += step if f >= 0 else -step
    return f


def _integer_digits(numb: float) -> str:
    out = []
    while True:
        out.append(_DIGITS[int(numb) % 10])
        if numb <= 9:
            break
        numb /= 10
    return "".join(reversed(out))


def _decimals(precision: int, f: float) -> str:
    f = abs(f)
    out = ["."]
    for _ in range(max(precision, 0)):
        f *= 10
        out.append(_DIGITS[int(f) % 10])
        f -= int(f)
    return "".join(out)


def format_float(spec: ConversionSpec, value: float) -> str:
    """Render a floating-point value with the spec's flags, width and precision."""
    value = float(value)
    precision = spec.precision
    flags = spec.flags
    special = _is_special(value)

    if special:
        n_size = 3
    else:
        n_size = len(str(int(abs(value)))) + precision + (1 if precision > 0 else 0)
    if _is_negative(value) or Flag.PLUS in flags or Flag.SPACE in flags:
        n_size += 1
    dot = not special and (precision > 0 or (precision == 0 and Flag.SHARP in flags))
    n_zeroes = max(0, spec.field - n_size - (1 if dot else 0))

    out = []
    if Flag.MINUS not in flags and (Flag.ZERO not in flags or special):
        out.append(" " * n_zeroes)
    value = _round(precision, value)
    if _is_negative(value):
        out.append("-")
    elif Flag.PLUS in flags:
        out.append("+")
    elif Flag.SPACE in flags:
        out.append(" ")
    if special:
        out.append("nan" if math.isnan(value) else "inf")
    else:
        out.append("0" * (0 if Flag.MINUS in flags else n_zeroes))
        out.append(_integer_digits(abs(value)))
    if dot:
        out.append(_decimals(precision, value))
    if Flag.MINUS in flags:
        out.append(" " * n_zeroes)
    return "".join(out)