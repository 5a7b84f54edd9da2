"""Formatting helpers for human-readable output."""

from __future__ import annotations

from typing import Any, Union

BYTE_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def quoted(text: str) -> str:
    """Quote ``text``, showing control characters other than tab, CR and LF as ``<xx>``."""
    parts = []
    for char in text:
        code = ord(char)
        if code < 0x20 and char not in "\t\r\n":
            parts.append(f"<{code:02x}>")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def if_not_empty(name: str, value: str) -> str:
    """Return a ``name: value`` line, a size line for long values, or nothing if empty."""
    size = len(value.encode("utf-8"))
    if size > 100:
        return f"{name}: {size} bytes\n"
    if value:
        return f"{name}: {quoted(value)}\n"
    return ""


def if_not_equal(name: str, value: Any, excluded: Any) -> str:
    """Return a ``name: value`` line unless ``value`` equals ``excluded``."""
    if value != excluded:
        return f"{name}: {value}\n"
    return ""


def if_not_zero(name: str, value: Any) -> str:
    """Return a ``name: value`` line unless ``value`` is zero."""
    return if_not_equal(name, value, type(value)(0))


def print_hex(value: int) -> str:
    """Format a non-negative integer as ``0x`` followed by lower-case hex digits."""
    if value < 0:
        raise ValueError(f"cannot print negative value {value} as hex")
    return f"0x{value:x}"


def print_hex_string(data: Union[bytes, bytearray, str]) -> str:
    """Format every byte of ``data`` as two lower-case hex digits."""
    if isinstance(data, str):
        data = data.encode("latin-1")
    return bytes(data).hex()


def print_bytes(value: Union[int, float], precision: int = 3) -> str:
    """Format a byte count with a binary unit and about ``precision`` digits."""
    if value < 0:
        raise ValueError(f"byte count must not be negative, got {value}")
    whole = int(value)
    frac = int(1024 * (value - whole))

    unit = 0
    while whole >= 1024 and unit < len(BYTE_SIZE_UNITS) - 1:
        frac = whole % 1024
        whole //= 1024
        unit += 1

    if (
        (whole >= 100 and precision <= 3)
        or (whole >= 10 and precision <= 2)
        or precision <= 1
    ):
        number = str(whole)
    else:
        number = f"{whole + frac / 1024:.{precision}g}"

    return f"{number} {BYTE_SIZE_UNITS[unit]}"