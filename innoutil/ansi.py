"""Incremental parser for ANSI escape sequences (CSI sequences only)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

ESC = 0x1B
CSI = ord("[")
UTF8_CSI0 = 0xC2
UTF8_CSI1 = 0x9B
SEPARATOR = b";"

_START_CHARS = frozenset((ESC, UTF8_CSI0))


class CommandType(str, Enum):
    """Final character of a CSI control sequence."""

    CUU = "A"  # Cursor Up
    CUD = "B"  # Cursor Down
    CUF = "C"  # Cursor Forward
    CUB = "D"  # Cursor Back
    CNL = "E"  # Cursor Next Line
    CPL = "F"  # Cursor Previous Line
    CHA = "G"  # Cursor Horizontal Absolute
    CUP = "H"  # Cursor Position
    ED = "J"  # Erase Display
    EL = "K"  # Erase in Line
    SU = "S"  # Scroll Up
    SD = "T"  # Scroll Down
    HVP = "f"  # Horizontal and Vertical Position
    SGR = "m"  # Select Graphic Rendition
    DSR = "n"  # Device Status Report
    SCP = "s"  # Save Cursor Position
    RCP = "u"  # Restore Cursor Position


def _is_end_char(byte: int) -> bool:
    return 64 <= byte < 127


def _parse_code(segment: bytes) -> Optional[int]:
    if not segment:
        return 0
    if not segment.isdigit():
        return None
    return int(segment)


def read_codes(codes: bytes) -> list[Optional[int]]:
    """Split the codes of a control sequence.

    Every sequence holds at least one code; an empty code counts as 0 and a
    code that is not a decimal number is returned as None.
    """
    return [_parse_code(part) for part in bytes(codes).split(SEPARATOR)]


class AnsiConsoleParser(ABC):
    """Splits a byte stream into plain text and CSI control sequences.

    Subclasses implement :meth:`handle_text` and :meth:`handle_command`.
    Sequences may span several calls to :meth:`write`.
    """

    def __init__(self) -> None:
        self._in_command = 0
        self._command = bytearray()

    @abstractmethod
    def handle_command(self, command: Union[CommandType, str], codes: bytes) -> None:
        """Called for each complete control sequence.

        ``command`` is the final character, as a :class:`CommandType` when known
        and as a one-character string otherwise. ``codes`` are the raw bytes
        between the introducer and the final character; see :func:`read_codes`.
        """

    @abstractmethod
    def handle_text(self, text: bytes) -> None:
        """Called for each run of plain text."""

    def _read_command(self, data: bytes, pos: int) -> int:
        end = len(data)
        if pos == end:
            return end

        expected = CSI if self._in_command == ESC else UTF8_CSI1
        if not self._command and data[pos] != expected:
            if self._in_command != ESC:
                self.handle_text(bytes((self._in_command, data[pos])))
            # An escaped character other than CSI is dropped.
            self._in_command = 0
            return pos + 1

        search_from = pos if self._command else pos + 1
        cmd = next(
            (i for i in range(search_from, end) if _is_end_char(data[i])), end
        )

        if self._command or cmd == end:
            self._command.extend(data[pos:cmd])
            sequence = bytes(self._command)
        else:
            sequence = bytes(data[pos:cmd])

        if cmd == end:
            return end

        final = chr(data[cmd])
        try:
            command: Union[CommandType, str] = CommandType(final)
        except ValueError:
            command = final

        self.handle_command(command, sequence[1:])

        self._in_command = 0
        self._command.clear()
        return cmd + 1

    def write(self, data: bytes) -> int:
        """Parse ``data`` and return the number of bytes consumed (all of them)."""
        data = bytes(data)
        end = len(data)
        pos = 0

        if self._in_command:
            pos = self._read_command(data, pos)

        while pos != end:
            cmd = next((i for i in range(pos, end) if data[i] in _START_CHARS), end)
            if cmd > pos:
                self.handle_text(data[pos:cmd])
            if cmd == end:
                break
            self._in_command = data[cmd]
            pos = self._read_command(data, cmd + 1)

        return end