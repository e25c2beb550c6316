"""Mime type resolution with runtime extension and charset registration.

The functions here operate on the process-wide default registry. Build a
``MimeRegistry`` directly for an isolated instance.
"""

from mime_registry.constants import (
    BINARY_MIME_TYPE,
    CSS_MIME_TYPE,
    DIRECTORY_MIME_TYPE,
    ENJIN_EXTENSION,
    ENJIN_MIME_TYPE,
    HTML_MIME_TYPE,
    JAVASCRIPT_MIME_TYPE,
    JSON_MIME_TYPE,
    MARKDOWN_EXTENSION,
    MARKDOWN_MIME_TYPE,
    ORG_MODE_EXTENSION,
    ORG_MODE_MIME_TYPE,
    SCSS_MIME_TYPE,
    TEXT_MIME_TYPE,
)
from mime_registry.models import Detector
from mime_registry.services import MimeRegistry, get_registry, plain_text_detector
from mime_registry.utils.mime import prune_charset
from mime_registry.utils.validation import MediaTypeError, RegistrationError


def get_extension(extension: str) -> tuple[str, bool]:
    """Return ``(mime, found)`` for a file extension."""
    return get_registry().get_extension(extension)


def set_extension(extension: str, mime: str) -> None:
    """Override the mime type of an extension; empty mime clears it."""
    get_registry().set_extension(extension, mime)


def get_charset(mime: str) -> tuple[str, bool]:
    """Return ``(charset, found)`` for a mime type."""
    return get_registry().get_charset(mime)


def set_charset(mime: str, charset: str) -> None:
    """Set the charset of a mime type; empty charset clears it."""
    get_registry().set_charset(mime, charset)


def register_text_type(mime: str, extension: str, detector: Detector | None = None) -> None:
    """Register a UTF-8 text type, see ``MimeRegistry.register_text_type``."""
    get_registry().register_text_type(mime, extension, detector)


def is_plain_text(mime: str) -> bool:
    """Return True if ``mime`` is treated as plain text."""
    return get_registry().is_plain_text(mime)


def from_path_only(path: str) -> str:
    """Resolve a path by extension alone."""
    return get_registry().from_path_only(path)


def mime(path: str) -> str:
    """Resolve a local directory or file to a mime type."""
    return get_registry().mime(path)


__all__ = [
    "BINARY_MIME_TYPE",
    "CSS_MIME_TYPE",
    "DIRECTORY_MIME_TYPE",
    "ENJIN_EXTENSION",
    "ENJIN_MIME_TYPE",
    "HTML_MIME_TYPE",
    "JAVASCRIPT_MIME_TYPE",
    "JSON_MIME_TYPE",
    "MARKDOWN_EXTENSION",
    "MARKDOWN_MIME_TYPE",
    "ORG_MODE_EXTENSION",
    "ORG_MODE_MIME_TYPE",
    "SCSS_MIME_TYPE",
    "TEXT_MIME_TYPE",
    "MediaTypeError",
    "MimeRegistry",
    "RegistrationError",
    "from_path_only",
    "get_charset",
    "get_extension",
    "is_plain_text",
    "mime",
    "plain_text_detector",
    "prune_charset",
    "register_text_type",
    "set_charset",
    "set_extension",
]
