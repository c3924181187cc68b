"""Helpers for strings, bytes, linked lists, formatting and line reading with C-library semantics."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "checks",
    "convert",
    "linereader",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "printf_fd",
    "strings",
    "transform",
]