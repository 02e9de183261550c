"""Building new strings from old ones: splitting, slicing, joining, trimming, mapping."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional


def _check_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _check_unsigned(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces.

    Returns None when ``s`` is None.
    """
    if s is None:
        return None
    _check_str(s, "s")
    _check_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)}")
    return [word for word in s.split(sep) if word]


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    _check_str(s, "s")
    _check_unsigned(start, "start")
    _check_unsigned(length, "length")
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is None."""
    if s1 is None or s2 is None:
        return None
    _check_str(s1, "s1")
    _check_str(s2, "s2")
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    The first character is never trimmed from the end: when nothing but the
    first character would remain, the result is empty. A None ``charset``
    returns a copy of ``s``; a None ``s`` returns None.
    """
    if s is None:
        return None
    _check_str(s, "s")
    if charset is None:
        return s
    _check_str(charset, "charset")
    if not s:
        return ""
    end = len(s) - 1
    while end > 0 and s[end] in charset:
        end -= 1
    if end == 0:
        return ""
    start = 0
    while start < end and s[start] in charset:
        start += 1
    return s[start:end + 1]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character."""
    if s is None:
        return None
    _check_str(s, "s")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: Optional[MutableSequence[Any]], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to a mutable sequence in place.

    A non-None return value replaces the item. Iteration stops at the first
    NUL (``0`` or ``"\\0"``). None is accepted and left alone.
    """
    if s is None:
        return
    for index, item in enumerate(s):
        if item == 0 or item == "\0":
            break
        result = func(index, item)
        if result is not None:
            s[index] = result