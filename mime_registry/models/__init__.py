"""Data models for mime_registry."""

from mime_registry.models.media import MediaType
from mime_registry.models.text_type import Detector, TextType

__all__ = [
    "Detector",
    "MediaType",
    "TextType",
]
