"""Serialization hooks that preserve member identity.

Pickle reduces a member to ``(enum class, key)`` and :func:`restore_member`
hands back the registered instance, so a round trip never builds a second
copy. :func:`member_core_schema` lets pydantic models use an enumeration class
as a field type: members or key strings are accepted on input and the key is
written to JSON.
"""
from __future__ import annotations

from typing import Any

from pydantic_core import CoreSchema, core_schema

from typesafe_enum.core.errors import MemberNotFoundError


def restore_member(enum_cls: Any, key: str) -> Any:
    """Return the registered member of ``enum_cls`` declared under ``key``."""

    member = enum_cls.find_by_key(key)
    if member is None:
        raise MemberNotFoundError(f"{enum_cls.__name__} has no member {key!r}")
    return member


def member_key(member: Any) -> str:
    return member.key


def member_core_schema(enum_cls: Any) -> CoreSchema:
    def _validate(value: Any) -> Any:
        if value in enum_cls:
            return value
        if isinstance(value, str):
            member = enum_cls.find_by_key(value)
            if member is not None:
                return member
            raise ValueError(f"{value!r} is not a key of {enum_cls.__name__}; expected one of {enum_cls.keys()}")
        raise ValueError(f"expected a {enum_cls.__name__} member or key, got {type(value).__name__}")

    return core_schema.no_info_plain_validator_function(
        _validate,
        serialization=core_schema.plain_serializer_function_ser_schema(member_key, when_used="json"),
    )


__all__ = ["member_core_schema", "member_key", "restore_member"]
