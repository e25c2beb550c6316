"""mime_registry FastMCP server.

A thin wrapper exposing the default registry to MCP clients. All lookup
and registration logic lives in services/.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from mime_registry.config import Settings
from mime_registry.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from mime_registry.resources import list_extensions_resource
from mime_registry.services import get_registry, get_settings
from mime_registry.tools import (
    classify_mime,
    lookup_extension,
    register_text_type,
    resolve_mime,
)
from mime_registry.utils.console import ColorfulFormatter


def _configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the mime_registry package.

    Called at module load time so loggers are configured however the
    server is started.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("mime_registry")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "httpx",
        "httpcore",
        "fastmcp",
        "starlette",
        "anyio",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging(get_settings())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Build the default registry before accepting requests.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the number of extension overrides
    """
    logger.info("mime_registry server starting up")
    registry = get_registry()
    extensions = registry.extensions()
    logger.info(
        "Loaded %d extension override(s): %s",
        len(extensions),
        ", ".join(sorted(extensions)) if extensions else "(none)",
    )
    logger.info("mime_registry server ready to accept connections")
    try:
        yield {"extensions": len(extensions)}
    finally:
        logger.info("mime_registry server shutdown complete")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging (with timing)

    Args:
        server: The FastMCP server to configure.
        settings: Logging options.
    """
    # First added = innermost
    server.add_middleware(ErrorHandlingMiddleware(include_traceback=settings.include_traceback))
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    settings = get_settings()
    server = FastMCP("mime_registry", lifespan=app_lifespan)

    configure_middleware(server, settings)

    server.tool()(resolve_mime)
    server.tool()(lookup_extension)
    server.tool()(register_text_type)
    server.tool()(classify_mime)

    server.resource("mime://extensions", mime_type="text/plain")(list_extensions_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
