"""String length, copy, comparison and search helpers with C string semantics.

Strings behave as if followed by a terminating NUL: comparisons treat the end
of a string as the code 0, and searching for NUL finds the end position.
Search functions return an index, or ``None`` where nothing is found.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharValue = Union[str, int]


def _char_code(c: CharValue) -> int:
    """Return the code searched for: a single character's ordinal, or ``c % 256``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c % 256


def _require_str(s: object, name: str = "s") -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, not {type(s).__name__}")
    return s


def _code_at(s: str, index: int) -> int:
    """Code of ``s[index]``, with 0 standing for the end of the string."""
    return ord(s[index]) if index < len(s) else 0


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    """Difference of the first differing codes within ``limit`` positions, else 0."""
    longest = max(len(s1), len(s2))
    span = longest if limit is None else min(limit, longest)
    for index in range(span):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b:
            return a - b
    if limit is not None and limit <= longest:
        return 0
    # Both strings ended together within the limit: the terminators match.
    return 0


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``; the length lets a
    caller detect truncation. A ``size`` of zero copies nothing.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so the result fits a buffer of ``size`` slots.

    At most ``size - len(dest) - 1`` characters of ``src`` are appended. If
    ``dest`` already fills ``size`` slots it is returned unchanged. The second
    value is ``min(len(dest), size) + len(src)``, the length it tried to make.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_len = min(len(dest), size)
    if size and dest_len != size:
        room = size - 1 - dest_len
        dest = dest + src[: max(room, 0)]
    return dest, dest_len + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _compare(s1, s2, n)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference of the first unequal pair, else 0."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return _compare(s1, s2, None)


def strchr(s: str, c: CharValue) -> Optional[int]:
    """Index of the first ``c`` in ``s``; NUL matches the end; ``None`` if absent."""
    _require_str(s)
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharValue) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL matches the end; ``None`` if absent."""
    _require_str(s)
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters.

    An empty ``little`` matches at index 0.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s))


def strldup(s: str, length: int) -> str:
    """Return at most the first ``length`` characters of ``s``."""
    _require_str(s)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return s[:length]