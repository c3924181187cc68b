"""Character and string classification predicates restricted to ASCII."""

from __future__ import annotations

WHITESPACE = " \t\r\n\v\f"


def _code(c: str | int) -> int:
    """Return the integer code of a single character or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalnum(c: str | int) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isalpha(c: str | int) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isascii(c: str | int) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isdigit(c: str | int) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isprint(c: str | int) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def isspace(c: str | int) -> bool:
    """True if ``c`` is one of space, tab, newline, vertical tab, form feed or CR."""
    return _code(c) in {ord(w) for w in WHITESPACE}


def islower(s: str) -> bool:
    """True if every character of ``s`` is in ``a``..``z`` (an empty string qualifies)."""
    return all("a" <= ch <= "z" for ch in s)


def isupper(s: str) -> bool:
    """True if every character of ``s`` is in ``A``..``Z`` (an empty string qualifies)."""
    return all("A" <= ch <= "Z" for ch in s)


def isnum(s: str | None) -> bool:
    """True if ``s`` is an optional sign followed by at least one ASCII digit."""
    if not s:
        return False
    body = s[1:] if s[0] in "+-" else s
    return bool(body) and all(isdigit(ch) for ch in body)


def has_white_spaces(s: str | None) -> bool:
    """True if ``s`` consists only of whitespace; ``None`` gives False."""
    if s is None:
        return False
    return all(ch in WHITESPACE for ch in s)