"""Formatted and unformatted output of characters, strings and numbers.

The plain ``put*`` functions and ``printf`` write to standard output and
return the number of characters written. The ``*_fd`` variants write to
a given text stream. Integers are treated with the widths the formats
imply: 32-bit signed for ``%d``/``%i``, 32-bit unsigned for ``%u``,
``%x`` and ``%X``, and 64-bit unsigned for pointers.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Iterator, Optional, TextIO, Union

Char = Union[int, str]

_INT_MODULUS = 1 << 32
_POINTER_MODULUS = 1 << 64


def _terminated(text: str) -> str:
    """Cut ``text`` at its first NUL."""
    return text.split("\0", 1)[0]


def _to_int32(number: int) -> int:
    value = number % _INT_MODULUS
    return value - _INT_MODULUS if value >= _INT_MODULUS // 2 else value


def _to_uint32(number: int) -> int:
    return number % _INT_MODULUS


def _to_pointer(number: int) -> int:
    return number % _POINTER_MODULUS


def _as_char(char: Char) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")
    return chr(char & 0xFF)


def _write(text: str) -> int:
    sys.stdout.write(text)
    return len(text)


def int_length(number: int) -> int:
    """Characters needed to print ``number`` as a 32-bit signed decimal."""
    return len(str(_to_int32(number)))


def unsigned_length(number: int) -> int:
    """Characters needed to print ``number`` as a 32-bit unsigned decimal."""
    return len(str(_to_uint32(number)))


def hex_length(number: int) -> int:
    """Hexadecimal digits needed for ``number`` as a 64-bit unsigned value."""
    return len(format(_to_pointer(number), "x"))


def itoa(number: int) -> str:
    """Decimal text of ``number`` as a 32-bit signed integer."""
    return str(_to_int32(number))


def putchar(char: Char) -> int:
    """Write one character to standard output."""
    return _write(_as_char(char))


def putstr(text: Optional[str]) -> int:
    """Write ``text`` up to any NUL; None is written as ``(null)``."""
    if text is None:
        return _write("(null)")
    return _write(_terminated(text))


def putint(number: int) -> int:
    """Write ``number`` as a 32-bit signed decimal."""
    return _write(itoa(number))


def putui(number: int) -> int:
    """Write ``number`` as a 32-bit unsigned decimal."""
    return _write(str(_to_uint32(number)))


def puthex_lower(number: int) -> int:
    """Write ``number`` as 32-bit unsigned lowercase hexadecimal."""
    return _write(format(_to_uint32(number), "x"))


def puthex_upper(number: int) -> int:
    """Write ``number`` as 32-bit unsigned uppercase hexadecimal."""
    return _write(format(_to_uint32(number), "X"))


def putpointer(address: Optional[int]) -> int:
    """Write ``address`` as ``0x`` and lowercase hex; zero or None gives ``0x0``."""
    value = 0 if address is None else _to_pointer(address)
    return _write("0x" + format(value, "x"))


def _next_arg(values: Iterator[object]) -> object:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


_CONVERSIONS: Dict[str, Callable[[object], int]] = {
    "s": putstr,
    "c": putchar,
    "d": putint,
    "i": putint,
    "u": putui,
    "p": putpointer,
    "X": puthex_upper,
    "x": puthex_lower,
}


def printf(fmt: str, *args: object) -> int:
    """Write ``fmt`` with its conversions filled from ``args``.

    Supports ``%s %c %d %i %u %p %x %X %%``. An unknown conversion writes
    nothing and consumes no argument. Returns the characters written.
    """
    values = iter(args)
    chars = iter(_terminated(fmt))
    total = 0
    for char in chars:
        if char != "%":
            total += putchar(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            total += putchar("%")
        elif spec in _CONVERSIONS:
            total += _CONVERSIONS[spec](_next_arg(values))
    return total


def putchar_fd(char: Char, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(char))


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` up to any NUL to ``stream``."""
    if text is None:
        raise TypeError("cannot write None")
    stream.write(_terminated(text))


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` and a newline to ``stream``."""
    putstr_fd(text, stream)
    stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write ``number`` as a 32-bit signed decimal to ``stream``."""
    stream.write(itoa(number))