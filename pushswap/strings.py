"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes instead of pointers. A search returns
None where the C routine returns a null pointer. Routines that fill a
caller's buffer return the resulting string instead.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _terminated(text: str) -> str:
    """Cut ``text`` at its first NUL, as C code would see it."""
    return text.split("\0", 1)[0]


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; a NUL matches the end."""
    if _single_char(char) == "\0":
        return len(text)
    position = text.find(char)
    return None if position < 0 else position


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; a NUL matches the end."""
    if _single_char(char) == "\0":
        return len(text)
    position = text.rfind(char)
    return None if position < 0 else position


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns 0 when equal, otherwise the difference of the codes of the
    first differing characters; the shorter string ends in a NUL.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    a = _terminated(first)[:length]
    b = _terminated(second)[:length]
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if not needle:
        return 0
    position = haystack[:length].find(needle)
    return None if position < 0 else position


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    needed; when ``size`` does not exceed ``len(dst)`` nothing is appended
    and the length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strdup(text: str) -> str:
    """An equal copy of ``text``."""
    if text is None:
        raise TypeError("cannot duplicate None")
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character.

    A returned character replaces the one passed in; None keeps it.
    """
    result: List[str] = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if _single_char(separator) == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does on 32-bit ints.

    Leading whitespace is skipped, one sign is accepted only when a digit
    follows it, and parsing stops at the first non-digit. Overflow wraps
    around as 32-bit arithmetic does. Text without a number yields 0.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if (
        position + 1 < len(text)
        and text[position] in "+-"
        and "0" <= text[position + 1] <= "9"
    ):
        if text[position] == "-":
            sign = -1
        position += 1
    modulus = 1 << _INT_BITS
    result = 0
    while position < len(text) and "0" <= text[position] <= "9":
        result = (result * 10 + ord(text[position]) - ord("0")) % modulus
        position += 1
    value = (result * sign) % modulus
    if value >= modulus // 2:
        value -= modulus
    return value