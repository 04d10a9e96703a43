"""Rendering of character, string, raw-string, unknown and colour conversions."""

from __future__ import annotations

from pushswap.spec import ConversionSpec, Flag

K_COL_MSK = 0xFFFFFF
K_BG_SHIFT = 24

K_M_BOLD = 1 << 48
K_M_NBOLD = 1 << 49
K_M_ITAL = 1 << 50
K_M_NITAL = 1 << 51
K_M_UNDER = 1 << 52
K_M_NUNDER = 1 << 53

K_BLACK = 0x000000
K_RED = 0xFF0000
K_GREEN = 0x00FF00
K_YELLOW = 0xFFFF00
K_BLUE = 0x0000FF
K_PURPLE = 0xFF00FF
K_CYAN = 0x00FFFF
K_WHITE = 0xFFFFFF

RESET = "\x1b[0m"

_STYLE_CODES = (
    (K_M_UNDER, "\x1b[4m"),
    (K_M_NUNDER, "\x1b[24m"),
    (K_M_BOLD, "\x1b[1m"),
    (K_M_NBOLD, "\x1b[21m"),
    (K_M_ITAL, "\x1b[3m"),
    (K_M_NITAL, "\x1b[23m"),
)


def _pad(spec: ConversionSpec, body: str, width: int, zero_fill: bool = True) -> str:
    """Pad ``body`` (counted as ``width`` characters) to the field width."""
    fill = max(0, spec.field - width)
    if Flag.MINUS in spec.flags:
        return body + " " * fill
    if zero_fill and Flag.ZERO in spec.flags:
        return "0" * fill + body
    return " " * fill + body


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(int(value) % 256)


def _visible_length(spec: ConversionSpec, length: int) -> int:
    if 0 <= spec.precision < length:
        return spec.precision
    return length


def format_char(spec: ConversionSpec, value: int | str) -> str:
    """Render a ``c`` conversion from a character or a character code."""
    return _pad(spec, _as_char(value), 1)


def format_string(spec: ConversionSpec, value: str | None) -> str:
    """Render an ``s`` conversion; None prints as ``(null)``."""
    text = "(null)" if value is None else str(value).split("\0", 1)[0]
    shown = _visible_length(spec, len(text))
    return _pad(spec, text[:shown], shown)


def _escape(data: bytes) -> str:
    return "".join(chr(b) if 32 <= b <= 126 else f"\\x{b:02x}" for b in data)


def format_raw(spec: ConversionSpec, value: str | bytes | None) -> str:
    """Render an ``r`` conversion: unprintable bytes are shown as ``\\xHH``."""
    if value is None:
        data = b"(null)"
    elif isinstance(value, str):
        data = value.encode("utf-8")
    else:
        data = bytes(value)
    data = data.split(b"\0", 1)[0]
    shown = _visible_length(spec, len(data))
    return _pad(spec, _escape(data[:shown]), shown, zero_fill=False)


def format_other(spec: ConversionSpec) -> str:
    """Render an unknown conversion as the conversion character itself."""
    return _pad(spec, spec.conversion, 1)


def _color(rgb: int) -> str:
    return f"{rgb >> 16 & 0xFF};{rgb >> 8 & 0xFF};{rgb & 0xFF}"


def format_style(spec: ConversionSpec, value: int = 0) -> str:
    """Render a ``k`` style (modifiers, background, foreground) or a ``K`` reset."""
    if spec.conversion == "K":
        return RESET
    style = int(value)
    parts = [code for bit, code in _STYLE_CODES if style & bit]
    parts.append(f"\x1b[48;2;{_color(style >> K_BG_SHIFT & K_COL_MSK)}m")
    parts.append(f"\x1b[38;2;{_color(style & K_COL_MSK)}m")
    return "".join(parts)