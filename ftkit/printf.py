"""Formatted printing to standard output with ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import operator
import os
from typing import Any, Iterator, Optional

STDOUT = 1
SPECIFIERS = frozenset("cspdiuxX%")

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: Any) -> int:
    """Reduce an integer to a signed 32-bit value, as an ``int`` argument would be."""
    number = operator.index(value) & _MASK32
    return number - (1 << 32) if number >> 31 else number


def _uint32(value: Any) -> int:
    return operator.index(value) & _MASK32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects str or None, not {type(value).__name__}")
    return value.split("\0", 1)[0]


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _MASK64
    return "(nil)" if address == 0 else f"0x{address:x}"


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    """Render one conversion; unknown specifiers render as nothing."""
    if spec not in SPECIFIERS:
        return ""
    if spec == "%":
        return "%"
    value = _next_arg(values, spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_int32(value))
    if spec == "u":
        return str(_uint32(value))
    if spec == "x":
        return f"{_uint32(value):x}"
    return f"{_uint32(value):X}"


def _write(fd: int, text: str) -> int:
    payload = text.encode("utf-8")
    view = memoryview(payload)
    while view:
        view = view[os.write(fd, view):]
    return len(payload)


def format_printf(fmt: Optional[str], *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``.

    A lone ``%`` at the end of ``fmt`` and unknown specifiers produce nothing.
    A ``None`` format gives an empty string.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output and return the bytes written."""
    if fmt is None:
        return 0
    return _write(STDOUT, format_printf(fmt, *args))