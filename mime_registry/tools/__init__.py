"""MCP tools for mime_registry."""

from mime_registry.tools.mime import (
    classify_mime,
    lookup_extension,
    register_text_type,
    resolve_mime,
)

__all__ = ["classify_mime", "lookup_extension", "register_text_type", "resolve_mime"]
