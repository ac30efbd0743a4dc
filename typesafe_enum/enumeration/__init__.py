"""Typesafe enumeration classes and their metaclass."""
from .base import TypesafeEnum, ValueEnum
from .meta import EnumType
from .serialization import member_core_schema, restore_member

__all__ = [
    "EnumType",
    "TypesafeEnum",
    "ValueEnum",
    "member_core_schema",
    "restore_member",
]
