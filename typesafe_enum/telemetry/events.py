"""Structured diagnostics emitted while enumerations are being declared."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from typesafe_enum.core.enums import DuplicatePolicy


@dataclass(slots=True)
class DeclarationDiagnostic:
    """A redeclared key whose candidate member was discarded.

    ``to_dict`` produces the ``extra`` mapping attached to the warning record,
    so the JSON formatter writes these fields next to the message.
    """

    enum_name: str
    key: str
    call_site: str | None = None
    policy: DuplicatePolicy = DuplicatePolicy.WARN
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def message(self) -> str:
        source = self.call_site or "unknown"
        return f"ignoring redeclaration of {self.enum_name}.{self.key} (source: {source})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enum_name": self.enum_name,
            "enum_key": self.key,
            "call_site": self.call_site,
            "duplicate_policy": self.policy.value,
            "diagnosed_at": self.timestamp.isoformat(),
        }


__all__ = ["DeclarationDiagnostic"]
