"""Base classes for typesafe enumerations.

Subclass :class:`TypesafeEnum` for key-only members or :class:`ValueEnum` for
members carrying a payload, and declare the members in the class body::

    class Suit(TypesafeEnum):
        declare("CLUBS")
        declare("DIAMONDS")

    class Scale(ValueEnum):
        declare("KILO", 1_000)
        declare("MEGA", 1_000_000)

A subclass may define ``__init__`` with any signature; ``declare`` forwards
its extra arguments to it. Members are frozen once their key and ordinal are
stamped.
"""
from __future__ import annotations

from typing import Any, Optional, cast

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from typesafe_enum.core.errors import ImmutableMemberError

from .meta import EnumType
from .serialization import member_core_schema, restore_member


class TypesafeEnum(metaclass=EnumType):
    """A member of a closed, ordered set of singletons."""

    _key: str
    _ordinal: int
    _hash: int

    def __init__(self) -> None:
        pass

    @property
    def key(self) -> str:
        """The symbolic key the member was declared under."""

        return self._key

    @property
    def ordinal(self) -> int:
        """Zero-based declaration position."""

        return self._ordinal

    # Identity -------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        return self is other

    def __ne__(self, other: object) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return self._hash

    def compare_to(self, other: object) -> Optional[int]:
        """Three-way comparison by ordinal; ``None`` across enumeration types."""

        if type(other) is not type(self):
            return None
        other_ordinal = cast(TypesafeEnum, other)._ordinal
        return (self._ordinal > other_ordinal) - (self._ordinal < other_ordinal)

    def __lt__(self, other: object) -> bool:
        result = self.compare_to(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self.compare_to(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self.compare_to(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self.compare_to(other)
        return NotImplemented if result is None else result >= 0

    # Immutability ---------------------------------------------------------
    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen", False):
            raise ImmutableMemberError(f"{self} is immutable")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if self.__dict__.get("_frozen", False):
            raise ImmutableMemberError(f"{self} is immutable")
        object.__delattr__(self, name)

    # Copying and pickling hand back the registered instance.
    def __copy__(self) -> "TypesafeEnum":
        return self

    def __deepcopy__(self, memo: dict) -> "TypesafeEnum":
        return self

    def __reduce__(self) -> tuple:
        return restore_member, (type(self), self._key)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return member_core_schema(cls)

    # Representation -------------------------------------------------------
    def __str__(self) -> str:
        return f"{type(self).__name__}.{self._key} [{self._ordinal}]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._key}: {self._ordinal}>"


class ValueEnum(TypesafeEnum):
    """A member that also carries an immutable payload."""

    _value: Any

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    @classmethod
    def find_by_value(cls, value: Any) -> Optional["ValueEnum"]:
        """First member, in declaration order, whose payload equals ``value``."""

        for member in cls.to_list():
            if member._value == value:
                return member
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._key}: {self._ordinal} value={self._value!r}>"


__all__ = ["TypesafeEnum", "ValueEnum"]
