"""Typesafe enumerations: closed, ordered sets of singleton members.

Members are declared with ``declare(KEY, *args)`` inside the body of a
:class:`TypesafeEnum` or :class:`ValueEnum` subclass and are reachable by key,
by ordinal, or as class attributes. The :func:`declare` exported here only
exists so linters can resolve the name; calling it anywhere other than an
enumeration class body raises :class:`AccessViolationError`.
"""
from __future__ import annotations

from typing import Any

from .config import (
    EnumSettings,
    LoggingSettings,
    apply_settings,
    configure,
    get_settings,
    load_settings,
    override_settings,
)
from .core.enums import DuplicatePolicy, RegistrationOutcome
from .core.errors import (
    AccessViolationError,
    ConfigurationError,
    DuplicateKeyError,
    EnumDefinitionError,
    EnumError,
    ImmutableMemberError,
    InvalidKeyNameError,
    InvalidKeyTypeError,
    MemberNotFoundError,
)
from .enumeration import EnumType, TypesafeEnum, ValueEnum
from .registry import Registry
from .telemetry import configure_logging


def declare(key: object, *args: Any, **kwargs: Any) -> None:
    """Placeholder for the ``declare`` injected into enumeration class bodies."""

    raise AccessViolationError("declare() can only be called inside the body of an enumeration class")


__all__ = [
    "AccessViolationError",
    "ConfigurationError",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "EnumDefinitionError",
    "EnumError",
    "EnumSettings",
    "EnumType",
    "ImmutableMemberError",
    "InvalidKeyNameError",
    "InvalidKeyTypeError",
    "LoggingSettings",
    "MemberNotFoundError",
    "RegistrationOutcome",
    "Registry",
    "TypesafeEnum",
    "ValueEnum",
    "apply_settings",
    "configure",
    "configure_logging",
    "declare",
    "get_settings",
    "load_settings",
    "override_settings",
]
