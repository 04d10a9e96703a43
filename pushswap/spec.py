"""Parsing of printf-style conversion specifications."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

CONV_CHARS = "cspdDioOuUxXfkKbBr"
FLAG_CHARS = "#0-+ "
MOD_CHARS = "lhLjz"
DIGIT_CHARS = "0123456789"
VALID_CHARS = FLAG_CHARS + MOD_CHARS + DIGIT_CHARS + ".*"


class Flag(enum.IntFlag):
    """Flags that may follow the percent sign."""

    SHARP = 1 << 0
    ZERO = 1 << 1
    MINUS = 1 << 2
    PLUS = 1 << 3
    SPACE = 1 << 4


_FLAG_OF_CHAR = {
    "#": Flag.SHARP,
    "0": Flag.ZERO,
    "-": Flag.MINUS,
    "+": Flag.PLUS,
    " ": Flag.SPACE,
}


class Modifier(enum.IntEnum):
    """Length modifiers."""

    HH = 0
    H = 1
    NONE = 2
    L = 3
    LL = 4
    LLL = 5
    J = 6
    Z = 7


@dataclass
class ConversionSpec:
    """One parsed conversion.

    ``size`` is the number of characters of the format, after the percent
    sign, that the conversion takes up. ``precision`` is -1 when none is given.
    """

    conversion: str = ""
    flags: Flag = field(default_factory=lambda: Flag(0))
    field: int = 0
    precision: int = -1
    modifier: Modifier = Modifier.NONE
    size: int = 0


def _read_number(fmt: str, i: int) -> tuple[int, int]:
    start = i
    while i < len(fmt) and fmt[i] in DIGIT_CHARS:
        i += 1
    return (int(fmt[start:i]) if i > start else 0), i


def _next_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return int(value)  # type: ignore[call-overload]


def _char(fmt: str, i: int) -> str:
    return fmt[i] if i < len(fmt) else ""


def parse_spec(fmt: str, args: Iterable[object] = ()) -> ConversionSpec:
    """Parse the conversion at the start of ``fmt`` (the text after ``%``).

    A ``*`` width or precision takes the next integer from ``args``; pass an
    iterator to share it with the caller. Raise TypeError when ``args`` runs out.
    """
    arg_iter = iter(args)
    size = 0
    while size < len(fmt) and fmt[size] in VALID_CHARS:
        size += 1
    conversion = _char(fmt, size)
    if conversion:
        size += 1
    spec = ConversionSpec(
        conversion=conversion,
        precision=6 if conversion == "f" else -1,
        size=size,
    )

    i = 0
    while _char(fmt, i) and fmt[i] in FLAG_CHARS:
        spec.flags |= _FLAG_OF_CHAR[fmt[i]]
        i += 1

    while _char(fmt, i) and (fmt[i] in DIGIT_CHARS or fmt[i] == "*"):
        if fmt[i] in DIGIT_CHARS:
            spec.field, i = _read_number(fmt, i)
        if _char(fmt, i) == "*":
            width = _next_int(arg_iter)
            if width < 0:
                spec.flags |= Flag.MINUS
                width = -width
            spec.field = width
            i += 1

    if _char(fmt, i) == ".":
        i += 1
        if _char(fmt, i) == "*":
            precision = _next_int(arg_iter)
            if precision >= 0:
                spec.precision = precision
            i += 1
        else:
            spec.precision, i = _read_number(fmt, i)

    char = _char(fmt, i)
    if char and char in MOD_CHARS:
        following = _char(fmt, i + 1)
        if char == "l":
            spec.modifier = Modifier.LL if following == "l" else Modifier.L
        elif char == "h":
            spec.modifier = Modifier.HH if following == "h" else Modifier.H
        elif char == "L":
            spec.modifier = Modifier.LLL
        elif char == "j":
            spec.modifier = Modifier.J
        elif char == "z":
            spec.modifier = Modifier.Z
    return spec