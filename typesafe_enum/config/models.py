"""Typed configuration models for enumeration declaration.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the declaration machinery. Settings are read each
time a class body calls ``declare`` and when the metaclass registers members.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from typesafe_enum.core.enums import DuplicatePolicy

DEFAULT_KEY_PATTERN = r"[A-Z][A-Za-z0-9_]*"


class LoggingSettings(BaseModel):
    """Logging switches for the diagnostics sink."""

    enabled: bool = False
    level: str = Field("WARNING")
    log_dir: Optional[str] = None
    logger_name: str = Field("typesafe_enum", min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized


class EnumSettings(BaseModel):
    """Declaration policy applied to every enumeration class body.

    ``key_pattern`` must fully match each key; the default requires an
    uppercase first letter, like a module-level constant.
    """

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.WARN
    key_pattern: str = Field(DEFAULT_KEY_PATTERN, min_length=1)
    capture_call_site: bool = True
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(frozen=True)

    @field_validator("key_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"key_pattern is not a valid regular expression: {exc}") from exc
        return value


__all__ = ["DEFAULT_KEY_PATTERN", "EnumSettings", "LoggingSettings"]
