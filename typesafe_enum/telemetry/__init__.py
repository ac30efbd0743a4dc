"""Telemetry and logging subsystem package."""
from .events import DeclarationDiagnostic
from .logging_setup import DEFAULT_LOGGER_NAME, JsonFormatter, configure_logging

__all__ = [
    "DeclarationDiagnostic",
    "DEFAULT_LOGGER_NAME",
    "JsonFormatter",
    "configure_logging",
]
