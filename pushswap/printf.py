"""A printf-style formatter with colour (``%k``/``%K``) and raw (``%r``) conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

from pushswap.floats import format_float
from pushswap.numbers import (
    format_binary,
    format_hex,
    format_octal,
    format_pointer,
    format_signed,
    format_unsigned,
)
from pushswap.spec import CONV_CHARS, ConversionSpec, parse_spec
from pushswap.text import (
    format_char,
    format_other,
    format_raw,
    format_string,
    format_style,
)

_WITH_ARGUMENT: dict[str, Callable[[ConversionSpec, Any], str]] = {
    "d": format_signed,
    "i": format_signed,
    "D": format_signed,
    "u": format_unsigned,
    "U": format_unsigned,
    "p": format_pointer,
    "s": format_string,
    "f": format_float,
    "F": format_float,
    "o": format_octal,
    "O": format_octal,
    "c": format_char,
    "x": format_hex,
    "X": format_hex,
    "k": format_style,
    "b": format_binary,
    "B": format_binary,
    "r": format_raw,
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    conversion = spec.conversion
    if not conversion:
        return ""
    if conversion == "K":
        return format_style(spec, 0)
    if conversion not in CONV_CHARS:
        return format_other(spec)
    return _WITH_ARGUMENT[conversion](spec, _next_arg(args))


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``; raise TypeError if arguments run out."""
    arg_iter = iter(args)
    out = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            spec = parse_spec(fmt[i + 1 :], arg_iter)
            out.append(_render(spec, arg_iter))
            i += spec.size + 1
        else:
            end = fmt.find("%", i)
            if end < 0:
                end = len(fmt)
            out.append(fmt[i:end])
            i = end
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)