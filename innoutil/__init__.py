"""Byte-order helpers, enum flag sets, ANSI escape parsing and output formatting."""

__version__ = "0.1.0"
__all__ = ["endian", "flags", "ansi", "output"]