"""Byte-buffer primitives: filling, copying, searching and comparing.

Buffers are bytearrays, or memoryviews of them where several views share
one underlying buffer. Lengths beyond the end of a buffer raise
ValueError instead of running past it.
"""

from __future__ import annotations

from typing import Optional, Union

Writable = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer of size {len(buffer)}")


def memset(buffer: Writable, value: int, length: int) -> Writable:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Writable, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Optional[Writable], src: Optional[Readable], length: int) -> Optional[Writable]:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    if dst is None and src is None:
        return None
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: Optional[Writable], src: Optional[Readable], length: int) -> Optional[Writable]:
    """Copy ``length`` bytes, correct even when the two views overlap."""
    if dst is None and src is None:
        return dst
    _check_length(length, dst, src)
    snapshot = bytes(src[:length])
    dst[:length] = snapshot
    return dst


def memchr(data: Readable, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    position = bytes(data[:length]).find(value & 0xFF)
    return None if position < 0 else position


def memcmp(first: Readable, second: Readable, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0