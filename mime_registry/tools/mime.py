"""MCP tools exposing the default mime registry."""

import logging

from fastmcp.exceptions import ToolError

from mime_registry.services import get_registry
from mime_registry.utils.validation import MediaTypeError, RegistrationError, strip_dot

logger = logging.getLogger(__name__)


async def resolve_mime(path: str) -> str:
    """Resolve a local file or directory to its mime type.

    Directories report inode/directory. Files resolve by extension
    (``page.html.tmpl`` counts as html) and fall back to content sniffing.

    Args:
        path: Local filesystem path.

    Returns:
        The mime type, or an error message if the path does not exist.
    """
    mime = get_registry().mime(path)
    if not mime:
        return f"Error: No such file or directory: {path}"
    return mime


async def lookup_extension(extension: str) -> str:
    """Look up the mime type registered for a file extension.

    Args:
        extension: Extension with or without the leading dot (e.g. "md").

    Returns:
        The mime type, or a message if the extension is unknown.
    """
    mime, ok = get_registry().get_extension(extension)
    if not ok:
        return f"No mime type registered for extension: {extension}"
    return mime


async def register_text_type(mime: str, extension: str) -> str:
    """Register a mime type as UTF-8 plain text for an extension.

    Args:
        mime: Media type such as "text/x-rst".
        extension: File extension such as "rst".

    Returns:
        Confirmation with the stored mime type.

    Raises:
        ToolError: If mime or extension is empty, or mime is malformed.
    """
    registry = get_registry()
    try:
        registry.register_text_type(mime, extension)
    except (MediaTypeError, RegistrationError) as e:
        raise ToolError(str(e)) from e
    stored, _ = registry.get_extension(extension)
    return f"Registered {stored} for .{strip_dot(extension)}"


async def classify_mime(mime: str) -> str:
    """Report whether a mime type is treated as plain text.

    Args:
        mime: Media type, parameters allowed.

    Returns:
        One line stating the classification and any registered charset.
    """
    registry = get_registry()
    if not registry.is_plain_text(mime):
        return f"{mime}: binary"
    charset, ok = registry.get_charset(mime)
    if ok:
        return f"{mime}: plain text (charset={charset})"
    return f"{mime}: plain text"
