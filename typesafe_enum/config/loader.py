"""YAML loader for the config subsystem.

``load_settings`` consumes one YAML file and validates it via models.py.
``apply_settings`` is the single entry point an application calls at startup
to make those settings active and wire up logging.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from typesafe_enum.core.errors import ConfigurationError
from typesafe_enum.telemetry.logging_setup import configure_logging

from .models import EnumSettings
from .runtime import configure

_DEFAULT_CONFIG_DIR = Path("config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_settings(path: Path | str = _DEFAULT_CONFIG_DIR / "typesafe_enum.yml") -> EnumSettings:
    """Load typesafe_enum.yml (duplicate policy, key pattern, logging).

    Root-level keys map one to one onto :class:`EnumSettings` fields; a blank
    file yields the defaults.
    """

    data = _read_yaml(Path(path))
    return EnumSettings.model_validate(data)


def apply_settings(settings: EnumSettings) -> EnumSettings:
    """Make ``settings`` active and configure logging if it is enabled."""

    configure(settings)
    if settings.logging.enabled:
        configure_logging(
            level=settings.logging.level,
            log_dir=settings.logging.log_dir,
            logger_name=settings.logging.logger_name,
        )
    return settings


__all__ = ["apply_settings", "load_settings"]
