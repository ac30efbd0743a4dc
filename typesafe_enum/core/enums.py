"""Plain stdlib enumerations used by the library's own machinery.

They describe registration results and the duplicate-declaration policy, and
live in the core package so the registry, the metaclass and the config models
can share them without import cycles.
"""
from __future__ import annotations

from enum import Enum


class RegistrationOutcome(str, Enum):
    """Result of an idempotent registry insertion."""

    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"


class DuplicatePolicy(str, Enum):
    """What to do when a class body declares the same key twice."""

    WARN = "warn"  # discard the candidate, log a warning
    IGNORE = "ignore"  # discard the candidate silently
    ERROR = "error"  # raise DuplicateKeyError
