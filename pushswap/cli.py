"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .arguments import parse_arguments
from .sorting import solve
from .strings import split

USAGE_ERROR = (
    "Error.  Usage: ./push_swap  INT INT INT (...)"
    "  OR ALL INTs between quotation marks\n"
    "Please, also remember not to exceed the INT limits\n"
    "Please, do not repeat the numbers\n"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers given as arguments, or all in one quoted argument."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if len(args) == 1:
        args = split(args[0], " ")
    try:
        numbers = parse_arguments(args)
        solve(numbers, sys.stdout)
    except ValueError:
        sys.stdout.write(USAGE_ERROR)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())