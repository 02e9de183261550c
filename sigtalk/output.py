"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

TextLike = Union[str, bytes]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _to_bytes(s: TextLike) -> bytes:
    if isinstance(s, bytes):
        return s
    if isinstance(s, str):
        return s.encode("utf-8")
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def put_char(c: Union[str, int, bytes], fd: int) -> None:
    """Write a single character (or byte value 0-255) to fd."""
    if isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes([c])
    elif isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        data = _to_bytes(c)
    else:
        raise TypeError(f"expected a character, got {type(c).__name__}")
    _write_all(fd, data)


def put_str(s: Optional[TextLike], fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _to_bytes(s))


def put_endl(s: Optional[TextLike], fd: int) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _write_all(fd, _to_bytes(s) + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal representation of n to fd."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))