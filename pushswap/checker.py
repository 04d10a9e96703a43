"""Check that a list of instructions read from standard input sorts the numbers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.stacks import Stack, move_top

_NUMBER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class CheckerError(ValueError):
    """Raised for invalid numbers or instructions."""


def parse_numbers(args: Sequence[str]) -> Stack:
    """Build stack ``a`` with ``args[0]`` on top; raise CheckerError if one is invalid."""
    values = []
    for arg in args:
        if arg == "":
            values.append(0)
            continue
        if not _NUMBER.fullmatch(arg):
            raise CheckerError(f"not a number: {arg!r}")
        value = int(arg)
        if not _INT_MIN <= value <= _INT_MAX:
            raise CheckerError(f"out of range: {arg!r}")
        values.append(value)
    return Stack(values)


def has_duplicates(stack: Stack) -> bool:
    """Tell whether a value occurs more than once."""
    return len(set(stack)) != len(stack)


def is_sorted(a: Stack, b: Stack) -> bool:
    """True when ``b`` is empty and ``a`` is strictly ascending from the top."""
    if b:
        return False
    items = a.items
    return all(lower > upper for lower, upper in zip(items, items[1:]))


def apply_instruction(line: str, a: Stack, b: Stack) -> None:
    """Apply one instruction; raise CheckerError for an unknown one."""
    if line == "sa":
        a.swap()
    elif line == "sb":
        b.swap()
    elif line == "ss":
        a.swap()
        b.swap()
    elif line == "pa":
        move_top(b, a)
    elif line == "pb":
        move_top(a, b)
    elif line == "ra":
        a.rotate()
    elif line == "rb":
        b.rotate()
    elif line == "rr":
        a.rotate()
        b.rotate()
    elif line == "rra":
        a.reverse_rotate()
    elif line == "rrb":
        b.reverse_rotate()
    elif line == "rrr":
        a.reverse_rotate()
        b.reverse_rotate()
    else:
        raise CheckerError(f"unknown instruction: {line!r}")


def apply_instructions(lines: Iterable[str], a: Stack, b: Stack) -> None:
    """Apply instructions in order, stopping at the first unknown one."""
    for line in lines:
        apply_instruction(line, a, b)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield newline-terminated lines without their newline.

    A last line without a newline is yielded only if it is longer than one
    character.
    """
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]
        elif len(line) > 1:
            yield line


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        a = parse_numbers(argv)
        if has_duplicates(a):
            raise CheckerError("duplicate numbers")
        b = Stack()
        apply_instructions(read_lines(sys.stdin), a, b)
    except CheckerError:
        sys.stderr.write("Error\n")
        return 255
    print("OK" if is_sorted(a, b) else "KO")
    return 0