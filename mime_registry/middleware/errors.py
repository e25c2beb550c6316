"""Error handling middleware for tool calls and resource reads."""

import logging
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from mime_registry.middleware.base import RegistryMiddleware
from mime_registry.utils.validation import MediaTypeError, RegistrationError

# Raised for bad client input: a malformed mime or an empty argument
REJECTED_ERRORS = (MediaTypeError, RegistrationError)


def rejection_cause(error: BaseException) -> BaseException | None:
    """Return the registry validation error behind ``error``, if any.

    FastMCP wraps tool exceptions in ToolError, so the cause is checked too.
    """
    for candidate in (error, error.__cause__):
        if isinstance(candidate, REJECTED_ERRORS):
            return candidate
    return None


class ErrorHandlingMiddleware(RegistryMiddleware):
    """Logs failures from tools and resources, then re-raises them.

    Rejected registrations are client mistakes and log at WARNING. Anything
    else logs at ERROR, with its traceback when ``include_traceback`` is set.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether unexpected errors log their traceback.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        name = getattr(context.message, "name", "unknown")
        return await self._guard(f"tool {name}", context, call_next)

    async def on_read_resource(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        uri = str(getattr(context.message, "uri", "unknown"))
        return await self._guard(f"resource {uri}", context, call_next)

    async def _guard(self, label: str, context: MiddlewareContext, call_next: Any) -> Any:
        try:
            return await call_next(context)
        except Exception as e:
            rejected = rejection_cause(e)
            if rejected is not None:
                self.logger.warning("Rejected %s: %s", label, rejected)
            else:
                self.logger.error(
                    "Error in %s: %s: %s",
                    label,
                    type(e).__name__,
                    e,
                    exc_info=self.include_traceback,
                )
            raise
