"""Configuration for mime_registry."""

from mime_registry.config.settings import Settings

__all__ = ["Settings"]
