"""Command-line parsing of the numbers to sort and the display options."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class Option(enum.IntFlag):
    """Display options selected by letters after a dash."""

    C = 1 << 1
    V = 1 << 2
    O = 1 << 3  # noqa: E741
    G = 1 << 4


_OPTION_LETTERS = {"c": Option.C, "v": Option.V, "o": Option.O, "g": Option.G}


class ArgumentError(ValueError):
    """Raised when the arguments hold no usable list of numbers."""


def parse_options(text: str) -> Option:
    """Collect every option letter found in ``text``; other characters are ignored."""
    result = Option(0)
    for char in text:
        result |= _OPTION_LETTERS.get(char, Option(0))
    return result


def classify_arg(arg: str) -> str:
    """Tell whether ``arg`` is an ``"option"`` or a ``"number"``.

    Raise ArgumentError for anything else.
    """
    if arg.startswith("-") and not (len(arg) > 1 and arg[1].isdigit()):
        return "option"
    for index, char in enumerate(arg):
        if not (char in "0123456789" or char == " " or (char == "-" and index == 0)):
            raise ArgumentError(f"invalid argument: {arg!r}")
    return "number"


def _atoi(text: str) -> int:
    """Read a leading integer as a C ``int``: stops at the first non-digit."""
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if char not in "0123456789":
            break
        digits += char
    value = sign * int(digits) if digits else 0
    return (value + 2**31) % 2**32 - 2**31


def _parse_split(arg: str) -> list[int]:
    tokens = [token for token in arg.split(" ") if token]
    for token in tokens:
        if classify_arg(token) != "number":
            raise ArgumentError(f"option inside a number list: {token!r}")
    if not tokens:
        raise ArgumentError("no numbers given")
    return [_atoi(token) for token in tokens]


def _parse_all(args: Sequence[str]) -> list[int]:
    numbers = [arg for arg in args if classify_arg(arg) == "number"]
    if not numbers:
        raise ArgumentError("no numbers given")
    return [_atoi(arg) for arg in numbers]


def parse_args(argv: Sequence[str]) -> tuple[list[int], Option]:
    """Parse the arguments (without the program name) into numbers and options.

    The first argument holding a space is taken as the whole list of numbers,
    and other numeric arguments are then ignored. Without one, every numeric
    argument is a number. Arguments that look like options are collected
    either way.
    """
    values: list[int] | None = None
    options = Option(0)
    for arg in argv:
        if values is None and " " in arg:
            values = _parse_split(arg)
        elif classify_arg_safe(arg) == "option":
            options |= parse_options(arg)
    if values is None:
        values = _parse_all(argv)
    return values, options


def classify_arg_safe(arg: str) -> str | None:
    """Like classify_arg, but return None for an invalid argument."""
    try:
        return classify_arg(arg)
    except ArgumentError:
        return None