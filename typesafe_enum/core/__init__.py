"""Core primitives shared across the enumeration subsystems.

This package aggregates helper enums, common types and error classes used by
the registry, the declaration protocol and the configuration layer. Higher
level packages import from here to avoid circular dependencies.
"""

from . import enums, errors, types

__all__ = ["enums", "errors", "types"]
