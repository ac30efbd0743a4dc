"""Per-enumeration member registry.

One :class:`Registry` is owned by every enumeration class. It is filled while
the class is being created and closed when creation finishes; after that it
only serves lookups.
"""
from __future__ import annotations

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from typesafe_enum.core.enums import RegistrationOutcome
from typesafe_enum.core.errors import AccessViolationError
from typesafe_enum.core.types import Ordinal

M = TypeVar("M")


class Registry(Generic[M]):
    """Ordered member list plus key index for a single enumeration."""

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._members: List[M] = []
        self._by_key: Dict[str, M] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_ordinal(self) -> Ordinal:
        """Ordinal the next inserted member will receive."""

        return Ordinal(len(self._members))

    def register(self, key: str, member: M) -> RegistrationOutcome:
        """Insert ``member`` under ``key`` unless the key is already known.

        The registry is left untouched on ``ALREADY_PRESENT``; deciding whether
        that deserves a diagnostic is up to the caller.
        """

        if self._closed:
            raise AccessViolationError(f"{self.owner} is closed; members can only be declared in its class body")
        if key in self._by_key:
            return RegistrationOutcome.ALREADY_PRESENT
        self._by_key[key] = member
        self._members.append(member)
        return RegistrationOutcome.INSERTED

    def close(self) -> None:
        self._closed = True

    # Lookups -----------------------------------------------------------
    def to_list(self) -> List[M]:
        return list(self._members)

    def size(self) -> int:
        return len(self._members)

    def keys(self) -> List[str]:
        return list(self._by_key)

    def find_by_key(self, key: object) -> Optional[M]:
        if not isinstance(key, str):
            return None
        return self._by_key.get(key)

    def find_by_ordinal(self, ordinal: object) -> Optional[M]:
        if not isinstance(ordinal, int) or isinstance(ordinal, bool):
            return None
        if ordinal < 0 or ordinal >= len(self._members):
            return None
        return self._members[ordinal]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._by_key

    def __iter__(self) -> Iterator[M]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Registry({self.owner!r}, size={len(self._members)}, {state})"


__all__ = ["Registry"]
