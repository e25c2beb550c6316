"""Utilities for mime_registry."""

from mime_registry.utils.console import ColorfulFormatter
from mime_registry.utils.mime import (
    SystemMimeTypes,
    format_media_type,
    parse_media_type,
    prune_charset,
)
from mime_registry.utils.path import LocalFileProbe, split_extensions
from mime_registry.utils.validation import (
    MediaTypeError,
    RegistrationError,
    strip_dot,
    validate_text_type,
)

__all__ = [
    "ColorfulFormatter",
    "format_media_type",
    "LocalFileProbe",
    "MediaTypeError",
    "parse_media_type",
    "prune_charset",
    "RegistrationError",
    "split_extensions",
    "strip_dot",
    "SystemMimeTypes",
    "validate_text_type",
]
