"""Rendering of integer conversions: signed, unsigned, hex, octal, binary, pointer."""

from __future__ import annotations

from pushswap.spec import ConversionSpec, Flag

_DIGITS = "0123456789abcdef"


def digits(n: int, base: int = 10, upper: bool = False) -> str:
    """Write a non-negative integer in ``base`` (2 to 16) without prefix."""
    if n < 0:
        raise ValueError("digits() needs a non-negative integer")
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base: {base}")
    out = []
    while True:
        n, remainder = divmod(n, base)
        out.append(_DIGITS[remainder])
        if n == 0:
            break
    text = "".join(reversed(out))
    return text.upper() if upper else text


def _spaces(count: int) -> str:
    return " " * max(0, count)


def _zero_fill(spec: ConversionSpec) -> bool:
    return (
        Flag.MINUS not in spec.flags
        and Flag.ZERO in spec.flags
        and spec.precision < 0
    )


def _check_unsigned(value: int) -> None:
    if value < 0:
        raise ValueError("unsigned conversion of a negative value")


def _layout(spec: ConversionSpec, prefix: str, body: str, counted: int) -> str:
    """Pad ``prefix`` and ``body``; ``counted`` is the body length used for sizing."""
    zeroes = max(0, spec.precision - counted)
    size = counted + zeroes + len(prefix)
    left = ""
    if Flag.MINUS not in spec.flags and not _zero_fill(spec):
        left = _spaces(spec.field - size)
    if _zero_fill(spec):
        zeroes += max(0, spec.field - size)
    right = _spaces(spec.field - size) if Flag.MINUS in spec.flags else ""
    return left + prefix + "0" * zeroes + body + right


def format_signed(spec: ConversionSpec, value: int) -> str:
    """Render a ``d``/``i``/``D`` conversion."""
    body = digits(abs(value)) if spec.precision or value else ""
    if value < 0:
        sign = "-"
    elif Flag.PLUS in spec.flags:
        sign = "+"
    elif Flag.SPACE in spec.flags:
        sign = " "
    else:
        sign = ""
    return _layout(spec, sign, body, len(body))


def format_unsigned(spec: ConversionSpec, value: int) -> str:
    """Render a ``u``/``U`` conversion; raise ValueError for a negative value."""
    _check_unsigned(value)
    body = digits(value) if spec.precision or value else ""
    return _layout(spec, "", body, len(body))


def format_hex(spec: ConversionSpec, value: int) -> str:
    """Render an ``x``/``X`` conversion; raise ValueError for a negative value."""
    _check_unsigned(value)
    upper = spec.conversion == "X"
    body = digits(value, 16, upper) if spec.precision or value else ""
    prefix = ("0X" if upper else "0x") if Flag.SHARP in spec.flags and value else ""
    return _layout(spec, prefix, body, len(body))


def format_octal(spec: ConversionSpec, value: int) -> str:
    """Render an ``o``/``O`` conversion; raise ValueError for a negative value."""
    _check_unsigned(value)
    body = digits(value, 8) if spec.precision or value else ""
    zeroes = max(0, spec.precision - len(body))
    prefix = (
        "0"
        if Flag.SHARP in spec.flags and (spec.precision == 0 or value) and not zeroes
        else ""
    )
    return _layout(spec, prefix, body, len(body))


def format_binary(spec: ConversionSpec, value: int) -> str:
    """Render a ``b``/``B`` conversion; raise ValueError for a negative value."""
    _check_unsigned(value)
    body = digits(value, 2)
    counted = len(body) if spec.precision or value else 0
    prefix = (
        ("0B" if spec.conversion == "B" else "0b")
        if Flag.SHARP in spec.flags and value
        else ""
    )
    return _layout(spec, prefix, body, counted)


def format_pointer(spec: ConversionSpec, value: int) -> str:
    """Render a ``p`` conversion: always prefixed hexadecimal."""
    _check_unsigned(value)
    upper = spec.conversion == "X"
    body = digits(value, 16, upper) if spec.precision or value else ""
    prefix = "0X" if upper else "0x"
    return _layout(spec, prefix, body, len(body))