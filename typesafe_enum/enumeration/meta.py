"""Metaclass implementing the declaration protocol.

A class body created by :class:`EnumType` sees a ``declare`` name in its
namespace. Each call is validated on the spot and queued; once the class
object exists, the queued declarations are turned into members, stamped with
key and ordinal, and registered in the class's own :class:`Registry`. The
registry is closed when the ``class`` statement finishes, and a reference to
``declare`` kept past that point refuses further calls.
"""
from __future__ import annotations

import logging
import types
from typing import Any, Callable, Dict, Iterator, List, Optional, TypeVar

from typesafe_enum.config.runtime import get_settings
from typesafe_enum.core.enums import DuplicatePolicy, RegistrationOutcome
from typesafe_enum.core.errors import (
    AccessViolationError,
    DuplicateKeyError,
    EnumDefinitionError,
    ImmutableMemberError,
    InvalidKeyNameError,
    MemberNotFoundError,
)
from typesafe_enum.core.types import Behavior
from typesafe_enum.registry.declaration import Declaration, behavior_items, capture_call_site, validate_key
from typesafe_enum.registry.registry import Registry
from typesafe_enum.telemetry.events import DeclarationDiagnostic

logger = logging.getLogger("typesafe_enum.enumeration")

T = TypeVar("T")

_PENDING = "__enum_declarations__"


class EnumType(type):
    """Metaclass of every typesafe enumeration."""

    _registry: Registry

    @classmethod
    def __prepare__(mcls, name: str, bases: tuple, **kwargs: Any) -> Dict[str, Any]:
        pending: List[Declaration] = []
        closed: List[bool] = [False]

        def declare(key: object, *args: Any, behavior: Optional[Behavior] = None, **ctor_kwargs: Any) -> None:
            if closed[0]:
                raise AccessViolationError(f"{name} is closed; members can only be declared in its class body")
            settings = get_settings()
            valid_key = validate_key(key, owner=name, pattern=settings.key_pattern)
            call_site = capture_call_site() if settings.capture_call_site else None
            pending.append(
                Declaration(
                    key=valid_key,
                    args=args,
                    kwargs=ctor_kwargs,
                    behavior=behavior,
                    call_site=call_site,
                )
            )

        declare.__qualname__ = f"{name}.declare"
        return {"declare": declare, _PENDING: (declare, pending, closed)}

    def __new__(mcls, name: str, bases: tuple, namespace: Dict[str, Any], **kwargs: Any) -> "EnumType":
        declare, pending, closed = namespace.pop(_PENDING, (None, [], [False]))
        closed[0] = True
        if declare is not None and namespace.get("declare") is declare:
            del namespace["declare"]
        for base in bases:
            if isinstance(base, EnumType) and base.size():
                raise EnumDefinitionError(f"cannot extend enumeration {base.__name__}: it already has members")

        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        type.__setattr__(cls, "_registry", Registry(name))
        try:
            for declaration in pending:
                cls._declare_member(declaration)
        finally:
            cls._registry.close()
        return cls

    def _declare_member(cls, declaration: Declaration) -> None:
        key = declaration.key
        registry = cls._registry
        if key not in registry and hasattr(cls, key):
            raise InvalidKeyNameError(f"{cls.__name__}: key {key!r} would shadow an existing attribute")

        member = super().__call__(*declaration.args, **declaration.kwargs)
        ordinal = registry.next_ordinal()
        object.__setattr__(member, "_key", key)
        object.__setattr__(member, "_ordinal", ordinal)
        object.__setattr__(member, "_hash", hash((cls, ordinal)))
        if declaration.behavior is not None:
            _attach_behavior(member, declaration.behavior)
        object.__setattr__(member, "_frozen", True)

        outcome = registry.register(key, member)
        if outcome is RegistrationOutcome.INSERTED:
            type.__setattr__(cls, key, member)
            return
        cls._handle_duplicate(declaration)

    def _handle_duplicate(cls, declaration: Declaration) -> None:
        policy = get_settings().duplicate_policy
        diagnostic = DeclarationDiagnostic(
            enum_name=cls.__name__,
            key=declaration.key,
            call_site=declaration.call_site,
            policy=policy,
        )
        if policy is DuplicatePolicy.ERROR:
            raise DuplicateKeyError(f"duplicate declaration of {cls.__name__}.{declaration.key}")
        if policy is DuplicatePolicy.WARN:
            logger.warning(diagnostic.message(), extra=diagnostic.to_dict())

    # Closed-type guards --------------------------------------------------
    def declare(cls, key: object, *args: Any, **kwargs: Any) -> None:
        raise AccessViolationError(f"{cls.__name__} is closed; members can only be declared in its class body")

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        raise AccessViolationError(f"{cls.__name__} members cannot be instantiated; use {cls.__name__}.find_by_key")

    def __setattr__(cls, name: str, value: Any) -> None:
        registry = cls.__dict__.get("_registry")
        if registry is not None and name in registry:
            raise ImmutableMemberError(f"cannot rebind member {cls.__name__}.{name}")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        registry = cls.__dict__.get("_registry")
        if registry is not None and name in registry:
            raise ImmutableMemberError(f"cannot delete member {cls.__name__}.{name}")
        super().__delattr__(name)

    # Lookups -------------------------------------------------------------
    def to_list(cls) -> List[Any]:
        """Members in declaration order, as a fresh list."""

        return cls._registry.to_list()

    def size(cls) -> int:
        return cls._registry.size()

    def keys(cls) -> List[str]:
        return cls._registry.keys()

    def each(cls, visit: Callable[[Any], Any]) -> None:
        for member in cls.to_list():
            visit(member)

    def each_with_index(cls, visit: Callable[[Any, int], Any]) -> None:
        for index, member in enumerate(cls.to_list()):
            visit(member, index)

    def map(cls, transform: Callable[[Any], T]) -> List[T]:
        return [transform(member) for member in cls.to_list()]

    def find_by_key(cls, key: object) -> Optional[Any]:
        """Member declared under ``key``, or ``None``."""

        return cls._registry.find_by_key(key)

    def find_by_ordinal(cls, ordinal: object) -> Optional[Any]:
        """Member at position ``ordinal``, or ``None`` when out of range."""

        return cls._registry.find_by_ordinal(ordinal)

    def __iter__(cls) -> Iterator[Any]:
        return iter(cls.to_list())

    def __reversed__(cls) -> Iterator[Any]:
        return reversed(cls.to_list())

    def __len__(cls) -> int:
        return cls.size()

    def __bool__(cls) -> bool:
        return True

    def __contains__(cls, member: object) -> bool:
        return isinstance(member, cls) and cls.find_by_key(getattr(member, "key", None)) is member

    def __getitem__(cls, key: str) -> Any:
        member = cls.find_by_key(key)
        if member is None:
            raise MemberNotFoundError(f"{cls.__name__} has no member {key!r}")
        return member


def _attach_behavior(member: Any, behavior: Behavior) -> None:
    reserved = {"key", "ordinal", "value"}
    for name, value in behavior_items(behavior).items():
        if name in reserved:
            raise EnumDefinitionError(f"behavior cannot override {name!r}")
        if isinstance(value, staticmethod):
            value = value.__func__
        elif isinstance(value, classmethod):
            value = types.MethodType(value.__func__, type(member))
        elif isinstance(value, types.FunctionType):
            value = types.MethodType(value, member)
        object.__setattr__(member, name, value)


__all__ = ["EnumType"]
