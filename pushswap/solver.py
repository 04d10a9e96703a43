"""Insertion-based sorting of stack ``a`` that records the operations it uses."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.args import ArgumentError, parse_args
from pushswap.bench import Bench
from pushswap.stacks import Stack

_CANCELLING = {
    ("ra", "rra"),
    ("rra", "ra"),
    ("rrb", "rb"),
    ("rb", "rrb"),
    ("sa", "sa"),
    ("sb", "sb"),
    ("pa", "pb"),
    ("pb", "pa"),
}

_MERGING = {
    ("sa", "sb"): "ss",
    ("sb", "sa"): "ss",
    ("ra", "rb"): "rr",
    ("rb", "ra"): "rr",
    ("rra", "rrb"): "rrr",
    ("rrb", "rra"): "rrr",
}


@dataclass(frozen=True)
class Distance:
    """How many rotations of a stack, and in which direction."""

    count: int
    reverse: bool = False


def record_op(ops: list[str], op: str) -> None:
    """Append ``op`` to ``ops``, cancelling or merging it with the last one."""
    if ops:
        pair = (op, ops[-1])
        if pair in _CANCELLING:
            ops.pop()
            return
        if pair in _MERGING:
            ops[-1] = _MERGING[pair]
            return
    ops.append(op)


def rotation_count(n: int, stack: Stack) -> Distance:
    """Count the rotations that bring ``stack`` to where ``n`` can be pushed."""
    items = list(stack.items)
    count = 0
    for _ in range(len(items)):
        if len(items) <= 1:
            break
        top, bottom = items[-1], items[0]
        if not (n < top or n > bottom):
            break
        if bottom < top and (n > top or n < bottom):
            break
        items.insert(0, items.pop())
        count += 1
    if count > len(stack) // 2:
        return Distance(len(stack) - count, reverse=True)
    return Distance(count)


def _do(bench: Bench, op: str) -> None:
    bench.apply(op)
    record_op(bench.ops, op)
    bench.position = len(bench.ops)


def insertion_sort(bench: Bench) -> None:
    """Sort ``bench.a`` in ascending order from the top, recording every move."""
    if not bench.a:
        return
    _do(bench, "pb")
    while bench.a:
        a_items = bench.a.items
        best = rotation_count(a_items[-1], bench.b)
        best_index = 0
        n = 1
        while n < best.count and n < len(a_items):
            candidate = rotation_count(a_items[-1 - n], bench.b)
            if candidate.count < best.count + n:
                best_index = n
                best = candidate
            n += 1
        for _ in range(best_index):
            _do(bench, "ra")
        for _ in range(best.count):
            _do(bench, "rrb" if best.reverse else "rb")
        _do(bench, "pb")
    while bench.b.items[-1] < bench.b.items[0]:
        _do(bench, "rb")
    while bench.b:
        _do(bench, "pa")


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` (given top first)."""
    bench = Bench(values)
    insertion_sort(bench)
    return bench.operations()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        values, _options = parse_args(argv)
    except ArgumentError:
        print("Damn son !")
        return 0
    for op in solve(values):
        print(op)
    return 0