"""The two stacks of the puzzle and the operations allowed on them.

Each stack is a list ordered from bottom to top, so the last item is the
top of the stack. Every operation records its name in ``operations`` and
writes it, followed by a newline, to the output stream.
"""

from __future__ import annotations

import sys
from itertools import pairwise
from typing import Iterable, List, Optional, TextIO

CAPACITY = 1024


def _swap(stack: List[int]) -> None:
    if len(stack) < 2:
        raise IndexError("swap needs at least two items on the stack")
    stack[-1], stack[-2] = stack[-2], stack[-1]


def _push(source: List[int], destination: List[int]) -> None:
    if not source:
        raise IndexError("push from an empty stack")
    destination.append(source.pop())


def _rotate(stack: List[int]) -> None:
    if stack:
        stack.insert(0, stack.pop())


def _reverse_rotate(stack: List[int]) -> None:
    if stack:
        stack.append(stack.pop(0))


class Stacks:
    """Stack ``a`` holding the numbers to sort and an initially empty stack ``b``.

    The first of ``numbers`` ends up on top of ``a``. When ``out`` is None,
    operations are written to standard output.
    """

    def __init__(self, numbers: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        values = list(numbers)
        if len(values) > CAPACITY:
            raise ValueError(f"at most {CAPACITY} numbers fit on a stack, got {len(values)}")
        self.a: List[int] = values[::-1]
        self.b: List[int] = []
        self.out = out
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = sys.stdout if self.out is None else self.out
        stream.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top items of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rs")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrs")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        return not self.b and all(below > above for below, above in pairwise(self.a))