"""Shared type aliases for readability and contract enforcement."""
from __future__ import annotations

from typing import Any, Mapping, NewType, TypeAlias, Union

Key = NewType("Key", str)
Ordinal = NewType("Ordinal", int)

Behavior: TypeAlias = Union[Mapping[str, Any], type]
