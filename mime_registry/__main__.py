"""Entry point for the mime_registry MCP server."""

import logging

from mime_registry.server import mcp  # Importing also configures logging
from mime_registry.services import get_settings

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the MCP server with configured transport."""
    settings = get_settings()

    if settings.transport == "stdio":
        logger.info("Starting mime_registry server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting mime_registry server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(
            transport="http",
            host=settings.http_host,
            port=settings.http_port,
        )


if __name__ == "__main__":
    run_server()
