"""Configuration loading and validation package."""

from .loader import apply_settings, load_settings
from .models import DEFAULT_KEY_PATTERN, EnumSettings, LoggingSettings
from .runtime import configure, get_settings, override_settings

__all__ = [
    "DEFAULT_KEY_PATTERN",
    "EnumSettings",
    "LoggingSettings",
    "apply_settings",
    "configure",
    "get_settings",
    "load_settings",
    "override_settings",
]
