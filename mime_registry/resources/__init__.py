"""MCP resources for mime_registry."""

from mime_registry.resources.extensions import list_extensions_resource

__all__ = ["list_extensions_resource"]
