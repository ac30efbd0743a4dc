"""Process-wide active settings consulted at declaration time."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .models import EnumSettings

_active: EnumSettings = EnumSettings()


def get_settings() -> EnumSettings:
    """Return the settings currently in effect."""

    return _active


def configure(settings: EnumSettings) -> EnumSettings:
    """Replace the active settings and return the previous ones."""

    global _active
    previous = _active
    _active = settings
    return previous


@contextmanager
def override_settings(settings: EnumSettings) -> Iterator[EnumSettings]:
    """Activate ``settings`` for the duration of a ``with`` block."""

    previous = configure(settings)
    try:
        yield settings
    finally:
        configure(previous)


__all__ = ["configure", "get_settings", "override_settings"]
