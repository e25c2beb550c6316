"""Tests for error handling middleware."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import ToolError

from mime_registry.middleware.errors import ErrorHandlingMiddleware, rejection_cause
from mime_registry.utils.validation import MediaTypeError, RegistrationError


@pytest.fixture
def mock_tool_context() -> MagicMock:
    """Create a mock middleware context for tool calls."""
    context = MagicMock()
    context.method = "tools/call"
    context.message = MagicMock()
    context.message.name = "register_text_type"
    return context


@pytest.fixture
def mock_resource_context() -> MagicMock:
    """Create a mock middleware context for resource reads."""
    context = MagicMock()
    context.method = "resources/read"
    context.message = MagicMock()
    context.message.uri = "mime://extensions"
    return context


def _wrapped(error: Exception) -> ToolError:
    try:
        raise ToolError(str(error)) from error
    except ToolError as wrapped:
        return wrapped


@pytest.mark.asyncio
async def test_error_middleware_passes_through_success(mock_tool_context: MagicMock) -> None:
    """Successful calls return their result untouched."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value="Registered text/x-rst; charset=utf-8 for .rst")

    result = await middleware.on_call_tool(mock_tool_context, call_next)

    assert result == "Registered text/x-rst; charset=utf-8 for .rst"
    mock_logger.warning.assert_not_called()
    mock_logger.error.assert_not_called()


@pytest.mark.asyncio
async def test_rejected_registration_logs_warning(mock_tool_context: MagicMock) -> None:
    """Validation errors wrapped by FastMCP are client mistakes."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)
    error = _wrapped(MediaTypeError("Invalid media type: 'bad mime'"))

    with pytest.raises(ToolError) as exc_info:
        await middleware.on_call_tool(mock_tool_context, AsyncMock(side_effect=error))

    assert exc_info.value is error
    mock_logger.warning.assert_called_once()
    args = mock_logger.warning.call_args[0]
    assert args[1] == "tool register_text_type"
    assert isinstance(args[2], MediaTypeError)
    mock_logger.error.assert_not_called()


@pytest.mark.asyncio
async def test_unexpected_error_logs_error(mock_resource_context: MagicMock) -> None:
    """Other failures log at ERROR and propagate unchanged."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger)

    with pytest.raises(OSError, match="unreadable"):
        await middleware.on_read_resource(
            mock_resource_context, AsyncMock(side_effect=OSError("unreadable"))
        )

    args = mock_logger.error.call_args[0]
    assert args[1:3] == ("resource mime://extensions", "OSError")
    assert mock_logger.error.call_args[1] == {"exc_info": False}
    mock_logger.warning.assert_not_called()


@pytest.mark.asyncio
async def test_traceback_included_when_configured(mock_tool_context: MagicMock) -> None:
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)

    with pytest.raises(RuntimeError):
        await middleware.on_call_tool(mock_tool_context, AsyncMock(side_effect=RuntimeError("x")))

    assert mock_logger.error.call_args[1] == {"exc_info": True}


@pytest.mark.asyncio
async def test_default_logger_records_rejection(
    mock_tool_context: MagicMock, caplog: pytest.LogCaptureFixture
) -> None:
    middleware = ErrorHandlingMiddleware()
    error = _wrapped(RegistrationError("mime and extension arguments must not be empty"))

    with caplog.at_level(logging.WARNING), pytest.raises(ToolError):
        await middleware.on_call_tool(mock_tool_context, AsyncMock(side_effect=error))

    assert "Rejected tool register_text_type: mime and extension" in caplog.text


def test_rejection_cause() -> None:
    direct = RegistrationError("empty")
    wrapped = _wrapped(MediaTypeError("bad"))

    assert rejection_cause(direct) is direct
    assert isinstance(rejection_cause(wrapped), MediaTypeError)
    assert rejection_cause(ValueError("other")) is None
    assert rejection_cause(_wrapped(KeyError("k"))) is None
