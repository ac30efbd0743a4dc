"""Declaration records and the checks run on each ``declare`` call."""
from __future__ import annotations

import keyword
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from typesafe_enum.core.errors import EnumDefinitionError, InvalidKeyNameError, InvalidKeyTypeError
from typesafe_enum.core.types import Behavior, Key


@dataclass(frozen=True, slots=True)
class Declaration:
    """One ``declare(...)`` statement captured from a class body."""

    key: Key
    args: Tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    behavior: Optional[Behavior] = None
    call_site: Optional[str] = None


def validate_key(key: object, *, owner: str, pattern: str) -> Key:
    """Return ``key`` as a :data:`Key` or raise why it cannot be one."""

    if key is None:
        raise InvalidKeyTypeError(f"{owner}: member key must not be None")
    if not isinstance(key, str):
        raise InvalidKeyTypeError(f"{owner}: {key!r} is not a string key")
    if not key.isidentifier() or keyword.iskeyword(key):
        raise InvalidKeyNameError(f"{owner}: {key!r} is not a valid identifier")
    if re.fullmatch(pattern, key) is None:
        raise InvalidKeyNameError(f"{owner}: {key!r} does not match key pattern {pattern!r}")
    return Key(key)


def capture_call_site(depth: int = 1) -> Optional[str]:
    """Best-effort ``file:line`` of the frame ``depth`` levels above the caller."""

    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def behavior_items(behavior: Behavior) -> Dict[str, Any]:
    """Normalize a behavior block into attribute name/value pairs.

    A class contributes its public attributes (underscore names are skipped so
    the implicit ``__module__``/``__dict__`` entries do not leak); a mapping
    must not name underscore attributes at all.
    """

    if isinstance(behavior, type):
        return {name: value for name, value in vars(behavior).items() if not name.startswith("_")}
    if isinstance(behavior, Mapping):
        items: Dict[str, Any] = {}
        for name, value in behavior.items():
            if not isinstance(name, str) or not name.isidentifier():
                raise EnumDefinitionError(f"behavior attribute {name!r} is not an identifier")
            if name.startswith("_"):
                raise EnumDefinitionError(f"behavior cannot define private attribute {name!r}")
            items[name] = value
        return items
    raise EnumDefinitionError(f"behavior must be a mapping or a class, not {type(behavior).__name__}")


__all__ = ["Declaration", "behavior_items", "capture_call_site", "validate_key"]
