"""Strategies that sort stack ``a`` using only the stack operations."""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

from .stacks import Stacks


def _min_position(stack: List[int]) -> int:
    return stack.index(min(stack))


def _max_position(stack: List[int]) -> int:
    return stack.index(max(stack))


def _truncating_div(number: int, divisor: int) -> int:
    quotient = abs(number) // divisor
    return quotient if number >= 0 else -quotient


def sort3(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three numbers."""
    if len(stacks.a) != 3:
        raise ValueError(f"sort3 needs three numbers on a, got {len(stacks.a)}")
    bottom, middle, top = stacks.a
    if top > middle > bottom:
        stacks.sa()
        stacks.rra()
    elif top > middle and middle < bottom and bottom < top:
        stacks.ra()
    elif bottom > middle and middle < top and bottom > top:
        stacks.sa()
    elif bottom > top and top < middle and bottom < middle:
        stacks.sa()
        stacks.ra()
    elif bottom < top < middle:
        stacks.rra()


def smallest_to_b(stacks: Stacks) -> None:
    """Rotate the smallest number of ``a`` to the top and push it to ``b``."""
    if not stacks.a:
        raise IndexError("stack a is empty")
    position = _min_position(stacks.a)
    for _ in range(len(stacks.a) - 1 - position):
        stacks.ra()
    stacks.pb()


def sort5(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly five numbers."""
    smallest_to_b(stacks)
    smallest_to_b(stacks)
    sort3(stacks)
    stacks.pa()
    stacks.pa()


def smallsort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most six numbers."""
    size = len(stacks.a)
    if size > 6:
        raise ValueError(f"smallsort handles at most six numbers, got {size}")
    if size <= 1:
        return
    if size == 2:
        if stacks.a[-1] > stacks.a[-2]:
            stacks.sa()
    elif size == 3:
        sort3(stacks)
    elif size == 4:
        smallest_to_b(stacks)
        sort3(stacks)
        stacks.pa()
    elif size == 5:
        sort5(stacks)
    else:
        smallest_to_b(stacks)
        sort5(stacks)
        stacks.pa()


def chunk_sort(stacks: Stacks, chunk_start: int, chunk_end: int) -> None:
    """Push every number of ``a`` within the inclusive range to ``b``.

    Each number is brought to the top by whichever rotation is shorter.
    """

    def in_chunk(value: int) -> bool:
        return chunk_start <= value <= chunk_end

    while any(in_chunk(value) for value in stacks.a):
        from_top = next(i for i, value in enumerate(reversed(stacks.a)) if in_chunk(value))
        from_bottom = next(i for i, value in enumerate(stacks.a) if in_chunk(value))
        if from_top < from_bottom:
            for _ in range(from_top):
                stacks.ra()
        else:
            for _ in range(from_bottom + 1):
                stacks.rra()
        stacks.pb()


def _next_chunk_start(remaining: List[int], start: int, size: int) -> int:
    """The next chunk start, skipping chunks that hold none of ``remaining``."""
    following = start + size
    if remaining:
        gap = min(remaining) - (following + size)
        if gap > 0:
            following += -(-gap // size) * size
    return following


def _return_to_a(stacks: Stacks) -> None:
    while stacks.b:
        position = _max_position(stacks.b)
        top = len(stacks.b) - 1
        if position > top // 2:
            for _ in range(top - position):
                stacks.rb()
        else:
            for _ in range(position + 1):
                stacks.rrb()
        stacks.pa()


def supersort(stacks: Stacks) -> None:
    """Sort ``a`` by moving value ranges to ``b`` and bringing back the largest first."""
    if not stacks.a:
        return
    chunk_count = 5 if len(stacks.a) <= 100 else 11
    chunk_size = max(1, _truncating_div(max(stacks.a), chunk_count))
    chunk_start = min(stacks.a)
    while stacks.a and chunk_start < max(stacks.a):
        chunk_sort(stacks, chunk_start, chunk_start + chunk_size)
        chunk_start = _next_chunk_start(stacks.a, chunk_start, chunk_size)
    _return_to_a(stacks)


def solve(numbers: Iterable[int], out: Optional[TextIO] = None) -> List[str]:
    """Sort ``numbers``, writing each operation to ``out``, and return the operations."""
    values = list(numbers)
    if len(set(values)) != len(values):
        raise ValueError("numbers must not repeat")
    stacks = Stacks(values, out)
    if len(values) <= 6:
        smallsort(stacks)
    else:
        supersort(stacks)
    return stacks.operations