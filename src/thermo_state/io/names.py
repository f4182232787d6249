"""Enumerations with a canonical name and case-insensitive aliases per member."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Tuple, Type, TypeVar

from ..errors import UnknownNameError

E = TypeVar("E", bound="AliasedEnum")

# enum class -> {casefolded alias: member}; built on first lookup
_LOOKUP_TABLES: Dict[type, Dict[str, Any]] = {}


def _build_table(cls: type) -> Dict[str, Any]:
    table: Dict[str, Any] = {}
    for member in cls:
        for alias in (member.name, *member.names):
            table.setdefault(alias.casefold(), member)
    return table


class AliasedEnum(Enum):
    """Enum whose members are declared as ``NAME = "canonical", "alias", ...``.

    The value is the canonical name, which is what the native engine expects.
    """

    names: Tuple[str, ...]

    def __new__(cls, value: Any, *aliases: str):
        member = object.__new__(cls)
        member._value_ = value
        member.names = (str(value), *aliases)
        return member

    def __str__(self) -> str:
        return self.names[0]

    @classmethod
    def parse(cls: Type[E], text: str) -> E:
        """Return the member whose name or alias matches *text*, ignoring case."""

        table = _LOOKUP_TABLES.get(cls)
        if table is None:
            table = _LOOKUP_TABLES[cls] = _build_table(cls)
        try:
            return table[text.strip().casefold()]
        except KeyError:
            raise UnknownNameError(cls.__name__, text) from None


class AliasedIntEnum(int, AliasedEnum):
    """Integer-valued :class:`AliasedEnum` declared as ``NAME = value, "canonical", ...``.

    The value is a stable 8-bit discriminant.
    """

    def __new__(cls, value: int, *names: str):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{cls.__name__} discriminant {value} does not fit in a byte")
        member = int.__new__(cls, value)
        member._value_ = value
        member.names = names or (str(value),)
        return member

    __str__ = AliasedEnum.__str__
    __format__ = Enum.__format__


__all__ = ["AliasedEnum", "AliasedIntEnum"]
