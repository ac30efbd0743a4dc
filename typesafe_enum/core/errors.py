"""Error hierarchy shared by the enumeration subsystems.

Every exception derives from :class:`EnumError` and, where it makes sense, from
the builtin a caller would naturally expect (``TypeError`` for a key of the
wrong kind, ``KeyError`` for a missing member) so plain ``except`` clauses keep
working.
"""
from __future__ import annotations


class EnumError(Exception):
    """Base class for all custom exceptions in the library."""


class InvalidKeyTypeError(EnumError, TypeError):
    """Raised when a declared key is ``None`` or not a string."""


class InvalidKeyNameError(EnumError, ValueError):
    """Raised when a key breaks the naming convention or shadows an attribute."""


class DuplicateKeyError(EnumError, ValueError):
    """Raised on redeclaration when the duplicate policy is ``ERROR``."""


class AccessViolationError(EnumError, TypeError):
    """Raised when members are declared or built outside a class body."""


class EnumDefinitionError(EnumError, TypeError):
    """Raised for structurally invalid enumeration definitions."""


class ImmutableMemberError(EnumError, AttributeError):
    """Raised when code tries to mutate a member or rebind a member constant."""


class MemberNotFoundError(EnumError, KeyError):
    """Raised by strict lookups (subscription, unpickling) for unknown keys."""


class ConfigurationError(EnumError, ValueError):
    """Raised when configuration files are missing or invalid."""
