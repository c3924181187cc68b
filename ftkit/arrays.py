"""Helpers for arrays terminated by the first ``None`` entry."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def _terminated(items: Iterable[Optional[T]]) -> Iterator[T]:
    """Yield entries up to, not including, the first ``None``."""
    return takewhile(lambda item: item is not None, items)


def arrlen(items: Iterable[Optional[object]]) -> int:
    """Count the entries before the first ``None`` (or the end)."""
    return sum(1 for _ in _terminated(items))


def matrix_dup(matrix: Iterable[Optional[str]]) -> List[str]:
    """Return a new list of the strings before the first ``None``."""
    result = []
    for item in _terminated(matrix):
        if not isinstance(item, str):
            raise TypeError(f"expected str entries, got {type(item).__name__}")
        result.append(item)
    return result


def matrix_dup_int(matrix: Iterable[Optional[int]]) -> List[int]:
    """Return a new list of the integers before the first ``None``."""
    result = []
    for item in _terminated(matrix):
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(f"expected int entries, got {type(item).__name__}")
        result.append(item)
    return result


def matrix_free(matrix: Optional[list]) -> None:
    """Empty ``matrix`` in place; ``None`` is accepted and ignored."""
    if matrix is None:
        return
    matrix.clear()