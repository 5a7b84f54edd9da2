"""Type-safe sets of enum flags and their display formatting."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Union


class FlagSet:
    """An immutable set of members of one enum type."""

    __slots__ = ("_enum_type", "_members")

    def __init__(self, enum_type: type[Enum], members: Iterable[Enum] = ()) -> None:
        self._enum_type = enum_type
        collected = set()
        for member in members:
            if not isinstance(member, enum_type):
                raise TypeError(f"{member!r} is not a member of {enum_type.__name__}")
            collected.add(member)
        self._members = frozenset(collected)

    @property
    def enum_type(self) -> type[Enum]:
        return self._enum_type

    @classmethod
    def all(cls, enum_type: type[Enum]) -> "FlagSet":
        """Return a set holding every member of ``enum_type``."""
        return cls(enum_type, enum_type)

    def _coerce(self, other: Union["FlagSet", Enum]) -> frozenset:
        if isinstance(other, FlagSet):
            if other._enum_type is not self._enum_type:
                raise TypeError(
                    f"cannot combine {self._enum_type.__name__} flags "
                    f"with {other._enum_type.__name__} flags"
                )
            return other._members
        if isinstance(other, self._enum_type):
            return frozenset((other,))
        return NotImplemented

    def has(self, flag: Enum) -> bool:
        """Return True if ``flag`` is set."""
        return flag in self._members

    def has_all(self, other: Union["FlagSet", Enum]) -> bool:
        """Return True if every flag in ``other`` is set."""
        members = self._coerce(other)
        if members is NotImplemented:
            raise TypeError(f"unsupported flag value {other!r}")
        return members <= self._members

    def _combine(self, other, op) -> "FlagSet":
        members = self._coerce(other)
        if members is NotImplemented:
            return NotImplemented
        return FlagSet(self._enum_type, op(self._members, members))

    def __or__(self, other):
        return self._combine(other, frozenset.union)

    __ror__ = __or__

    def __and__(self, other):
        return self._combine(other, frozenset.intersection)

    __rand__ = __and__

    def __xor__(self, other):
        return self._combine(other, frozenset.symmetric_difference)

    __rxor__ = __xor__

    def __invert__(self) -> "FlagSet":
        return FlagSet(
            self._enum_type, (m for m in self._enum_type if m not in self._members)
        )

    def __bool__(self) -> bool:
        return bool(self._members)

    def __iter__(self) -> Iterator[Enum]:
        """Yield the set flags in the order the enum declares them."""
        return (m for m in self._enum_type if m in self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, flag: object) -> bool:
        return flag in self._members

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlagSet):
            return (
                self._enum_type is other._enum_type and self._members == other._members
            )
        if isinstance(other, Enum) and isinstance(other, self._enum_type):
            return self._members == frozenset((other,))
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._enum_type, self._members))

    def __repr__(self) -> str:
        names = "|".join(m.name for m in self)
        return f"FlagSet({self._enum_type.__name__}: {names or '0'})"


def format_enum(value: Union[Enum, int], enum_type: type[Enum]) -> str:
    """Return the name of ``value`` in ``enum_type``, or an ``(unknown:N)`` marker."""
    if isinstance(value, enum_type):
        return value.name
    try:
        return enum_type(value).name
    except ValueError:
        return f"(unknown:{int(value)})"


def format_flags(flags: FlagSet) -> str:
    """Return the set flags as a comma-separated list, or ``(none)``."""
    if not flags:
        return "(none)"
    return ", ".join(format_enum(member, flags.enum_type) for member in flags)