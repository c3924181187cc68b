"""String building helpers: substrings, joining, trimming, mapping and splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Union

CharValue = Union[str, int]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")
    return value


def _separator(c: CharValue) -> str:
    """Return the separator character given as a character or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    As with a NUL-terminated buffer, the result ends at the first NUL that
    ``f`` produces.
    """
    _require_str(s, "s")
    mapped = "".join(f(index, ch) for index, ch in enumerate(s))
    return mapped.split("\0", 1)[0]


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character of ``chars`` in place with ``f(index, char)``.

    Iteration stops once a NUL character is reached.
    """
    for index in range(len(chars)):
        if chars[index] == "\0":
            break
        chars[index] = f(index, chars[index])


def split(s: str, c: CharValue) -> List[str]:
    """Split ``s`` on the separator ``c``, dropping empty pieces."""
    _require_str(s, "s")
    return [word for word in s.split(_separator(c)) if word]