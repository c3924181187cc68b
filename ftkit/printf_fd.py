"""Formatted printing to any file descriptor with ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import operator
import os
from typing import Any, Iterator, Optional

from ftkit.convert import itoa

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: Any) -> int:
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


def _convert(spec: str, values: Iterator[Any]) -> str:
    """Render one conversion; unknown specifiers render as nothing."""
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return itoa(_int32(value))
    if spec == "u":
        return str(_uint32(value))
    if spec == "x":
        return f"{_uint32(value):x}"
    return f"{_uint32(value):X}"


def format_fd(fmt: str, *args: Any) -> str:
    """Return the text ``printf_fd`` would write for ``fmt`` and ``args``.

    A lone ``%`` at the end of ``fmt`` is kept as a literal character;
    unknown specifiers produce nothing.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, not {type(fmt).__name__}")
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf_fd(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``fd`` and return the bytes written."""
    payload = format_fd(fmt, *args).encode("utf-8")
    view = memoryview(payload)
    while view:
        view = view[os.write(fd, view):]
    return len(payload)