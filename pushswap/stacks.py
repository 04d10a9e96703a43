"""Bounded integer stacks and the moves the puzzle allows on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack of integers, optionally bounded by a capacity.

    ``values`` are given top first, the order in which they appear on the
    command line. ``items`` holds them bottom first, so ``items[-1]`` is the
    top and ``items[0]`` the bottom.
    """

    def __init__(self, values: Iterable[int] = (), capacity: int | None = None) -> None:
        self.items: list[int] = list(values)[::-1]
        if capacity is not None and len(self.items) > capacity:
            raise ValueError(
                f"{len(self.items)} values do not fit in a stack of capacity {capacity}"
            )
        self.capacity = capacity

    def push(self, value: int) -> None:
        """Put a value on top; raise IndexError when the stack is full."""
        if self.capacity is not None and len(self.items) >= self.capacity:
            raise IndexError("push onto a full stack")
        self.items.append(value)

    def pop(self) -> int:
        """Take the top value off; raise IndexError when the stack is empty."""
        if not self.items:
            raise IndexError("pop from an empty stack")
        return self.items.pop()

    def swap(self) -> None:
        """Exchange the two top values; nothing happens below two values."""
        if len(self.items) < 2:
            return
        self.items[-1], self.items[-2] = self.items[-2], self.items[-1]

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if len(self.items) < 2:
            return
        self.items.insert(0, self.items.pop())

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if len(self.items) < 2:
            return
        self.items.append(self.items.pop(0))

    def copy(self) -> Stack:
        """Return an independent stack with the same values and capacity."""
        clone = Stack(capacity=self.capacity)
        clone.items = list(self.items)
        return clone

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from top to bottom."""
        return reversed(self.items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r}, capacity={self.capacity!r})"


def move_top(source: Stack, target: Stack) -> bool:
    """Move the top of ``source`` onto ``target``; False if ``source`` is empty."""
    if not source:
        return False
    target.push(source.pop())
    return True


def format_stack(stack: Stack) -> str:
    """Render the values top to bottom as ``a, b, c.``; empty for an empty stack."""
    if not stack:
        return ""
    return ", ".join(str(value) for value in stack) + "."