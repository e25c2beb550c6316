"""Middleware components for the mime_registry MCP server."""

from mime_registry.middleware.base import RegistryMiddleware
from mime_registry.middleware.errors import ErrorHandlingMiddleware
from mime_registry.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "RegistryMiddleware",
]
