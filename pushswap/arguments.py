"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from typing import List, Sequence

from .chars import isdigit
from .strings import atoi

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_WHITESPACE = " \f\n\r\t\v"


class ArgumentError(ValueError):
    """An argument is not an integer, is out of range or is repeated."""


def _is_number(arg: str) -> bool:
    body = arg[1:] if arg.startswith(("-", "+")) else arg
    return all(isdigit(char) for char in body)


def _fits_int(arg: str) -> bool:
    text = arg.lstrip(_WHITESPACE)
    negative = text.startswith("-")
    if text.startswith(("-", "+")):
        text = text[1:]
    digits = []
    for char in text:
        if not isdigit(char):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    if negative:
        value = -value
    return _INT_MIN <= value <= _INT_MAX


def check_arguments(args: Sequence[str]) -> None:
    """Raise ArgumentError unless every argument is a distinct 32-bit integer.

    An argument may carry one sign followed by digits only.
    """
    seen = set()
    for arg in args:
        if not _is_number(arg):
            raise ArgumentError(f"not an integer: {arg!r}")
        if not _fits_int(arg):
            raise ArgumentError(f"out of the int range: {arg!r}")
        value = atoi(arg)
        if value in seen:
            raise ArgumentError(f"repeated number: {arg!r}")
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Validate ``args`` and return them as integers."""
    check_arguments(args)
    return [atoi(arg) for arg in args]