"""A pair of stacks with a recorded list of operations that can be stepped through."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pushswap.stacks import Stack, move_top

_INVERSE = {
    "": "",
    "sa": "sa",
    "sb": "sb",
    "ss": "ss",
    "ra": "rra",
    "rb": "rrb",
    "rr": "rrr",
    "rra": "ra",
    "rrb": "rb",
    "rrr": "rr",
    "pa": "pb",
    "pb": "pa",
}

_STACK_OPS: dict[str, tuple[Callable[[Stack], None], str]] = {
    "sa": (Stack.swap, "a"),
    "sb": (Stack.swap, "b"),
    "ss": (Stack.swap, "ab"),
    "ra": (Stack.rotate, "a"),
    "rb": (Stack.rotate, "b"),
    "rr": (Stack.rotate, "ab"),
    "rra": (Stack.reverse_rotate, "a"),
    "rrb": (Stack.reverse_rotate, "b"),
    "rrr": (Stack.reverse_rotate, "ab"),
}


def inverse_op(op: str) -> str:
    """Return the operation that undoes ``op``; raise ValueError for an unknown one."""
    try:
        return _INVERSE[op]
    except KeyError:
        raise ValueError(f"unknown operation: {op!r}") from None


class Bench:
    """Stacks ``a`` and ``b`` with the operations recorded on them.

    ``position`` counts how many of the recorded ``ops`` have been applied
    when stepping through them.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.a = Stack(values, capacity=len(values))
        self.b = Stack(capacity=len(values))
        self.ops: list[str] = []
        self.position = 0

    def _stacks(self, names: str) -> list[Stack]:
        return [self.a if name == "a" else self.b for name in names]

    def apply(self, op: str) -> None:
        """Apply one operation; the empty operation does nothing.

        Raise ValueError for an unknown operation.
        """
        if op == "":
            return
        if op == "pa":
            if self.b:
                move_top(self.b, self.a)
            return
        if op == "pb":
            if self.a:
                move_top(self.a, self.b)
            return
        try:
            method, names = _STACK_OPS[op]
        except KeyError:
            raise ValueError(f"unknown operation: {op!r}") from None
        for stack in self._stacks(names):
            method(stack)

    def undo(self, op: str) -> None:
        """Apply the inverse of ``op``."""
        self.apply(inverse_op(op))

    def step_forward(self) -> bool:
        """Apply the next recorded operation; False when none is left."""
        if self.position >= len(self.ops):
            return False
        self.apply(self.ops[self.position])
        self.position += 1
        return True

    def step_backward(self) -> bool:
        """Undo the last applied operation; False when at the start."""
        if self.position <= 0:
            return False
        self.position -= 1
        self.undo(self.ops[self.position])
        return True

    def replay(self) -> None:
        """Apply every recorded operation, in order, to the current stacks."""
        for op in self.ops:
            self.apply(op)
        self.position = len(self.ops)

    def operations(self) -> list[str]:
        """Return a copy of the recorded operations."""
        return list(self.ops)