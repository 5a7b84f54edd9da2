"""Loading and storing fixed-size integers in a given byte order."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable


class Endian(Enum):
    """Byte order of stored integers."""

    LITTLE = "little"
    BIG = "big"


def native_order() -> Endian:
    """Return the byte order of the running machine."""
    return Endian(sys.byteorder)


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"integer size must be positive, got {size}")


def byteswap(value: int, size: int, signed: bool = False) -> int:
    """Reverse the byte order of a ``size``-byte integer."""
    _check_size(size)
    raw = value.to_bytes(size, "little", signed=signed)
    return int.from_bytes(raw, "big", signed=signed)


def load(
    buffer: bytes, size: int, order: Endian = Endian.LITTLE, signed: bool = False
) -> int:
    """Read one ``size``-byte integer from the start of ``buffer``."""
    _check_size(size)
    if len(buffer) < size:
        raise ValueError(f"need {size} bytes, buffer holds {len(buffer)}")
    return int.from_bytes(bytes(buffer[:size]), order.value, signed=signed)


def load_array(
    buffer: bytes,
    size: int,
    count: int,
    order: Endian = Endian.LITTLE,
    signed: bool = False,
) -> list[int]:
    """Read ``count`` consecutive ``size``-byte integers from ``buffer``."""
    _check_size(size)
    needed = size * count
    if len(buffer) < needed:
        raise ValueError(f"need {needed} bytes, buffer holds {len(buffer)}")
    view = memoryview(bytes(buffer[:needed]))
    return [
        int.from_bytes(view[offset : offset + size], order.value, signed=signed)
        for offset in range(0, needed, size)
    ]


def store(value: int, size: int, order: Endian = Endian.LITTLE) -> bytes:
    """Encode ``value`` as a ``size``-byte integer.

    Negative values are stored in two's complement. Values that fit neither the
    signed nor the unsigned range of the size raise OverflowError.
    """
    _check_size(size)
    bits = size * 8
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise OverflowError(f"{value} does not fit in {size} bytes")
    return (value & ((1 << bits) - 1)).to_bytes(size, order.value)


def store_array(
    values: Iterable[int], size: int, order: Endian = Endian.LITTLE
) -> bytes:
    """Encode every value as a ``size``-byte integer, without padding."""
    return b"".join(store(value, size, order) for value in values)