"""Member registry and declaration bookkeeping."""
from .declaration import Declaration, behavior_items, capture_call_site, validate_key
from .registry import Registry

__all__ = [
    "Declaration",
    "Registry",
    "behavior_items",
    "capture_call_site",
    "validate_key",
]
