"""Byte-buffer helpers working on ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

ByteValue = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]


def _byte(c: ByteValue) -> int:
    """Return the byte value of ``c``; ints are truncated to their low 8 bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    return c & 0xFF


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer size {size}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero in place."""
    _check_count(n, len(buf))
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, c: ByteValue, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_count(n, len(buf))
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    src = memoryview(src).cast("B")
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: BytesLike, c: ByteValue, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    view = memoryview(buf).cast("B")
    _check_count(n, len(view))
    index = bytes(view[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    a = memoryview(s1).cast("B")
    b = memoryview(s2).cast("B")
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def realloc(
    buf: Optional[BytesLike], original_size: int, new_size: int
) -> Optional[bytearray]:
    """Return a new buffer of ``new_size`` bytes holding the old contents.

    With no buffer a fresh zeroed one is returned; a new size of zero gives
    None. The first ``min(original_size, new_size)`` bytes are carried over.
    """
    if new_size < 0 or original_size < 0:
        raise ValueError("sizes must not be negative")
    if buf is None:
        return bytearray(new_size)
    if new_size == 0:
        return None
    keep = min(original_size, new_size)
    old = memoryview(buf).cast("B")
    _check_count(keep, len(old))
    result = bytearray(new_size)
    result[:keep] = old[:keep]
    return result