"""Terminal rendering of the two stacks as coloured cylinders."""

from __future__ import annotations

from pushswap.bench import Bench
from pushswap.printf import sprintf
from pushswap.text import K_BG_SHIFT, K_CYAN, K_M_BOLD

G_THK = 70

K_GBG = 0x256E91
K_GFG = 0xFFA237
K_NBG = 0x043F5B
K_NFG = 0xFFE433
K_OFG = 0x97566C

_HEADER_STYLE = K_NBG << K_BG_SHIFT | K_NFG | K_M_BOLD


def _map_range(n: int, lo: int, hi: int, out_lo: int, out_hi: int) -> int:
    """Map ``n`` from ``[lo, hi]`` onto ``[out_lo, out_hi]``, truncating."""
    if hi == lo:
        return out_lo
    num = (n - lo) * (out_hi - out_lo)
    den = hi - lo
    quotient = abs(num) // abs(den)
    return out_lo + (quotient if (num >= 0) == (den > 0) else -quotient)


def _centered(width: int, used: int) -> tuple[str, str]:
    rest = width - used
    return " " * max(0, rest // 2 + rest % 2), " " * max(0, rest // 2)


def render_number(n: int) -> str:
    """Render ``n`` in cyan, centred in a column."""
    left, right = _centered(G_THK, len(str(abs(n))))
    return left + sprintf("%k%d%K", K_CYAN, n) + right


def render_cylinder(n: int, max_n: int, min_n: int) -> str:
    """Render ``n`` as a centred bar whose width grows with its value."""
    nw = _map_range(n, min_n, max_n, 1, G_THK)
    left, right = _centered(G_THK, nw)
    return (
        left
        + sprintf("%k", K_GFG << K_BG_SHIFT)
        + sprintf("%*c", nw, " ")
        + sprintf("%k", K_GBG << K_BG_SHIFT)
        + right
        + sprintf("%K")
    )


def _column(stack_items: list[int], i: int, max_n: int, min_n: int) -> str:
    background = sprintf("%k", K_GBG << K_BG_SHIFT)
    if i < len(stack_items):
        body = render_cylinder(stack_items[i], max_n, min_n)
    else:
        body = " " * G_THK
    return background + body + sprintf("%K")


def render_stacks(bench: Bench, show_op: bool = False) -> str:
    """Render both stacks side by side, optionally under the current operation."""
    parts = []
    if show_op:
        op = bench.ops[bench.position - 1] if bench.position > 0 else ""
        left, right = _centered(G_THK * 2 + 2, len(op))
        parts.append(sprintf("%k", _HEADER_STYLE) + left + op + right + sprintf("%K\n"))

    a_items, b_items = bench.a.items, bench.b.items
    values = a_items + b_items
    size = max(bench.a.capacity or 0, len(values))
    if values:
        max_n, min_n = max(values), min(values)
        for i in reversed(range(size)):
            parts.append(
                _column(a_items, i, max_n, min_n)
                + "  "
                + _column(b_items, i, max_n, min_n)
                + "\n"
            )

    half = (G_THK - 1) // 2
    odd = (G_THK - 1) % 2
    parts.append(
        sprintf("%k", _HEADER_STYLE)
        + " " * (half + odd)
        + "A"
        + " " * (half + half + odd + 2)
        + "B"
        + " " * half
        + sprintf("%K\n")
    )
    return "".join(parts)