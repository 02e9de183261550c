"""Byte-buffer primitives: filling, copying, searching and comparing.

Buffers are bytes-like objects; anything written to must be mutable
(a ``bytearray`` or a writable ``memoryview``). Byte values are taken
modulo 256, as an unsigned char would be.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int byte value, got {type(value).__name__}")
    return value & 0xFF


def _check_count(n: int, available: int, what: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int length, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > available:
        raise ValueError(f"{what} holds {available} bytes, {n} requested")


def memset(buf: MutableBytes, value: int, length: int) -> MutableBytes:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return ``buf``."""
    _check_count(length, len(buf), "buffer")
    buf[:length] = bytes([_byte(value)]) * length
    return buf


def bzero(buf: MutableBytes, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(dst: Optional[MutableBytes], src: Optional[BytesLike], n: int) -> Optional[MutableBytes]:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``.

    When both buffers are None, None is returned and nothing is copied.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("memcpy needs both a destination and a source buffer")
    _check_count(n, len(src), "source")
    _check_count(n, len(dst), "destination")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: MutableBytes, dst: int, src: int, n: int) -> MutableBytes:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buf``.
    """
    for name, offset in (("dst", dst), ("src", src)):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"{name} offset must be an int")
        if offset < 0:
            raise ValueError(f"{name} offset must not be negative, got {offset}")
    _check_count(n, max(len(buf) - src, 0), "source region")
    _check_count(n, max(len(buf) - dst, 0), "destination region")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first ``value`` byte among the first ``n``, or None."""
    target = _byte(value)
    _check_count(n, len(data), "buffer")
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, taken as
    unsigned values, or 0 when the compared bytes are equal.
    """
    _check_count(n, len(a), "first buffer")
    _check_count(n, len(b), "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size would not fit in SIZE_MAX.
    """
    for name, value in (("count", count), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)