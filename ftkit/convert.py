"""Conversions between text and integers, and ASCII case mapping."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_LEADING_SPACE = frozenset(" \t\n\v\f\r")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(s: str, bits: int, reject_double_sign: bool = False) -> int:
    pos = 0
    while pos < len(s) and s[pos] in _LEADING_SPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    if reject_double_sign and pos < len(s) and s[pos] in "+-":
        return 0
    result = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        result = _wrap(result * 10 + (ord(s[pos]) - ord("0")), bits)
        pos += 1
    return _wrap(result * sign, bits)


def atoi(s: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value; 0 if none."""
    return _parse(s, 32)


def atol(s: str) -> int:
    """Parse a leading decimal integer as a 64-bit value; a second sign gives 0."""
    return _parse(s, 64, reject_double_sign=True)


def atoll(s: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    if s == "-9223372036854775808":
        return LLONG_MIN
    return _parse(s, 64)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)


def itol(n: int) -> str:
    """Format a 64-bit signed integer in decimal."""
    if not LLONG_MIN <= n <= LLONG_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit integer")
    return str(n)


def _shift_case(c: str | int, low: str, high: str, delta: int) -> str | int:
    code = ord(c) if isinstance(c, str) else c
    if isinstance(c, str) and len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c: str | int) -> str | int:
    """Map an ASCII uppercase letter to lowercase; other values are unchanged."""
    return _shift_case(c, "A", "Z", 32)


def toupper(c: str | int) -> str | int:
    """Map an ASCII lowercase letter to uppercase; other values are unchanged."""
    return _shift_case(c, "a", "z", -32)