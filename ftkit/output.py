"""Write characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1
ULONG_MAX = 2**64 - 1
STDOUT = 1


def _write(fd: int, data: str) -> int:
    """Write ``data`` to ``fd`` in full and return the number of bytes written."""
    payload = data.encode("utf-8")
    view = memoryview(payload)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(payload)


def _in_base(n: int, base: int, digits: str, limit: int) -> str:
    if not 0 <= n <= limit:
        raise OverflowError(f"{n} is outside the range 0..{limit}")
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if len(digits) < base:
        raise ValueError(f"{len(digits)} digits cannot express base {base}")
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(fd, c)


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write(fd, s)


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write(fd, s + "\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the 32-bit signed integer ``n`` in decimal to ``fd``."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    _write(fd, str(n))


def putnbr_base(n: int, base: int, digits: str, fd: int = STDOUT) -> int:
    """Write the unsigned 32-bit ``n`` in ``base`` using ``digits``; return the count."""
    return _write(fd, _in_base(n, base, digits, UINT_MAX))


def putnbr_base_p(n: int, base: int, digits: str, fd: int = STDOUT) -> int:
    """Write an address as ``0x`` plus digits, or ``(nil)`` for zero; return the count."""
    if n == 0:
        return _write(fd, "(nil)")
    return _write(fd, "0x" + _in_base(n, base, digits, ULONG_MAX))