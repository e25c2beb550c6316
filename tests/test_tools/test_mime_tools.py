"""Tests for the MCP tool functions."""

from pathlib import Path

import pytest
from fastmcp.exceptions import ToolError

from mime_registry.tools import (
    classify_mime,
    lookup_extension,
    register_text_type,
    resolve_mime,
)
from mime_registry.utils.validation import MediaTypeError, RegistrationError


class TestResolveMime:
    """Tests for resolve_mime."""

    @pytest.mark.asyncio
    async def test_directory(self, tmp_path: Path) -> None:
        assert await resolve_mime(str(tmp_path)) == "inode/directory"

    @pytest.mark.asyncio
    async def test_file_by_extension(self, tmp_path: Path) -> None:
        target = tmp_path / "README.md"
        target.write_text("# Title\n")
        assert await resolve_mime(str(target)) == "text/markdown; charset=utf-8"

    @pytest.mark.asyncio
    async def test_template_file(self, tmp_path: Path) -> None:
        target = tmp_path / "page.html.tmpl"
        target.write_text("<html></html>")
        assert await resolve_mime(str(target)) == "text/html; charset=utf-8"

    @pytest.mark.asyncio
    async def test_file_by_content(self, tmp_path: Path, png_bytes: bytes) -> None:
        target = tmp_path / "image"
        target.write_bytes(png_bytes)
        assert await resolve_mime(str(target)) == "image/png"

    @pytest.mark.asyncio
    async def test_missing_path(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "missing.md")
        assert await resolve_mime(missing) == f"Error: No such file or directory: {missing}"


class TestLookupExtension:
    """Tests for lookup_extension."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extension", ["md", ".md"])
    async def test_known(self, extension: str) -> None:
        assert await lookup_extension(extension) == "text/markdown; charset=utf-8"

    @pytest.mark.asyncio
    async def test_system_fallback(self) -> None:
        assert await lookup_extension("zip") == "application/zip"

    @pytest.mark.asyncio
    async def test_unknown(self) -> None:
        assert (
            await lookup_extension("not-a-thing")
            == "No mime type registered for extension: not-a-thing"
        )


class TestRegisterTextType:
    """Tests for the register_text_type tool."""

    @pytest.mark.asyncio
    async def test_registers_on_default_registry(self) -> None:
        result = await register_text_type("text/x-rst", ".rst")

        assert result == "Registered text/x-rst; charset=utf-8 for .rst"
        assert await lookup_extension("rst") == "text/x-rst; charset=utf-8"
        assert await classify_mime("text/x-rst") == "text/x-rst: plain text (charset=utf-8)"

    @pytest.mark.asyncio
    async def test_empty_argument(self) -> None:
        with pytest.raises(ToolError, match="must not be empty") as exc_info:
            await register_text_type("", "rst")
        assert isinstance(exc_info.value.__cause__, RegistrationError)

    @pytest.mark.asyncio
    async def test_malformed_mime(self) -> None:
        with pytest.raises(ToolError, match="Invalid media type") as exc_info:
            await register_text_type("bad mime no slash", "bad")
        assert isinstance(exc_info.value.__cause__, MediaTypeError)
        assert await lookup_extension("bad") == "No mime type registered for extension: bad"


class TestClassifyMime:
    """Tests for classify_mime."""

    @pytest.mark.asyncio
    async def test_charset_registered(self) -> None:
        assert (
            await classify_mime("text/html; charset=latin-1")
            == "text/html; charset=latin-1: plain text (charset=utf-8)"
        )

    @pytest.mark.asyncio
    async def test_text_descendant_without_charset(self) -> None:
        assert await classify_mime("image/svg+xml") == "image/svg+xml: plain text"

    @pytest.mark.asyncio
    async def test_binary(self) -> None:
        assert await classify_mime("image/png") == "image/png: binary"
