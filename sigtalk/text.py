"""NUL-terminated string routines: length, search, comparison, conversion.

Search and length functions accept ``str`` or bytes-like values and treat
the first NUL character as the end of the string. Searches return an index
into the string, or None when there is no match. ``strlcpy`` and ``strlcat``
write into a mutable byte buffer (a ``bytearray`` or writable ``memoryview``).
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Union

StrLike = Union[str, bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_SPACES = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    return ((value - INT_MIN) % 2**32) + INT_MIN


def _cstr(s: StrLike) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        end = s.find("\0")
        return s if end < 0 else s[:end]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        end = data.find(b"\0")
        return data if end < 0 else data[:end]
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def _codes(s: StrLike) -> Iterator[int]:
    text = _cstr(s)
    return map(ord, text) if isinstance(text, str) else iter(text)


def _source_bytes(src: StrLike) -> bytes:
    if isinstance(src, str):
        src = src.encode("utf-8")
    result = _cstr(src)
    assert isinstance(result, bytes)
    return result


def _target(s: StrLike, c: Union[str, bytes, int]) -> Union[str, bytes]:
    """Turn ``c`` into a one-element needle of the same kind as ``s``.

    Integers are reduced to a byte value, as a cast to char would do.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character or an int, got bool")
    if isinstance(c, int):
        code = c & 0xFF
    elif isinstance(c, str) and len(c) == 1:
        code = ord(c)
    elif isinstance(c, (bytes, bytearray)) and len(c) == 1:
        code = c[0]
    elif isinstance(c, (str, bytes, bytearray)):
        raise ValueError(f"expected a single character, got {len(c)}")
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    if isinstance(s, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character {code!r} does not fit in a byte")
    return bytes([code])


def _check_size(size: int, name: str = "size") -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"{name} must be an int")
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values beyond a 64-bit long saturate, and the result is then
    truncated to a 32-bit int.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    text = _cstr(s).lstrip("".join(_SPACES))
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if not negative and value > LONG_MAX:
            return _to_int32(LONG_MAX)
        if negative and value >= -LONG_MIN:
            return _to_int32(LONG_MIN)
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit int."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def strlen(s: StrLike) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strdup(s: StrLike) -> StrLike:
    """Return a fresh copy of ``s`` up to its first NUL."""
    copy = _cstr(s)
    if isinstance(s, bytearray):
        return bytearray(copy)
    return copy


def strchr(s: StrLike, c: Union[str, bytes, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    needle = _target(s, c)
    if needle in ("\0", b"\0"):
        return len(text)
    index = text.find(needle)  # type: ignore[arg-type]
    return None if index < 0 else index


def strrchr(s: StrLike, c: Union[str, bytes, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives the length."""
    text = _cstr(s)
    needle = _target(s, c)
    if needle in ("\0", b"\0"):
        return len(text)
    index = text.rfind(needle)  # type: ignore[arg-type]
    return None if index < 0 else index


def strncmp(s1: StrLike, s2: StrLike, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of unequal character codes,
    with the end of a string counting as code 0, or 0 if they match.
    """
    _check_size(n, "n")
    left = islice(chain(_codes(s1), repeat(0)), n)
    right = islice(chain(_codes(s2), repeat(0)), n)
    for a, b in zip(left, right):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: StrLike, needle: StrLike, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at 0. Returns None when there is no match.
    """
    _check_size(length, "length")
    text = _cstr(haystack)
    pattern = _cstr(needle)
    if type(text) is not type(pattern):
        raise TypeError("haystack and needle must both be str or both be bytes")
    if not pattern:
        return 0
    if length == 0:
        return None
    index = text[:length].find(pattern)  # type: ignore[arg-type]
    return None if index < 0 else index


def strlcpy(dst: Optional[MutableBytes], src: StrLike, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``. With ``size`` 0 nothing is written and
    ``dst`` may be None.
    """
    _check_size(size)
    data = _source_bytes(src)
    if size == 0:
        return len(data)
    if dst is None:
        raise ValueError("a destination buffer is needed when size is not 0")
    if size > len(dst):
        raise ValueError(f"buffer holds {len(dst)} bytes, size {size} given")
    count = min(len(data), size - 1)
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: Optional[MutableBytes], src: StrLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``.

    At most ``size`` bytes of ``dst`` are used, including the NUL. Returns
    the length the joined string would have; when the string in ``dst`` is
    already ``size`` long or more, returns ``size`` plus the source length.
    """
    _check_size(size)
    data = _source_bytes(src)
    if size == 0:
        return len(data)
    if dst is None:
        raise ValueError("a destination buffer is needed when size is not 0")
    if size > len(dst):
        raise ValueError(f"buffer holds {len(dst)} bytes, size {size} given")
    dst_len = bytes(dst).find(b"\0")
    if dst_len < 0:
        dst_len = len(dst)
    if dst_len >= size:
        return size + len(data)
    count = min(len(data), size - 1 - dst_len)
    dst[dst_len:dst_len + count] = data[:count]
    dst[dst_len + count] = 0
    return dst_len + len(data)