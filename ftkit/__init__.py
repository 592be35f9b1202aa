"""Helpers for characters, byte buffers, strings, linked lists, formatted output, line reading and grids."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "convert",
    "strings",
    "transform",
    "linkedlist",
    "output",
    "printf",
    "linereader",
    "grid",
]