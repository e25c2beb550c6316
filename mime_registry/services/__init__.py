"""Services for mime_registry."""

from mime_registry.services.hierarchy import TypeNode, TypeTree
from mime_registry.services.registry import MimeRegistry, plain_text_detector
from mime_registry.services.state import (
    get_registry,
    get_settings,
    reset_state,
    set_registry,
    set_settings,
)
from mime_registry.services.store import AssociativeStore, ReadWriteLock

__all__ = [
    "AssociativeStore",
    "MimeRegistry",
    "ReadWriteLock",
    "TypeNode",
    "TypeTree",
    "get_registry",
    "get_settings",
    "plain_text_detector",
    "reset_state",
    "set_registry",
    "set_settings",
]
