"""Tests for server construction and lifespan."""

import pytest

from mime_registry.server import app_lifespan, create_server


@pytest.mark.asyncio
async def test_tools_registered() -> None:
    server = create_server()

    tools = await server.get_tools()

    assert set(tools) == {
        "resolve_mime",
        "lookup_extension",
        "register_text_type",
        "classify_mime",
    }


@pytest.mark.asyncio
async def test_extensions_resource_registered() -> None:
    server = create_server()

    resources = await server.get_resources()

    assert "mime://extensions" in resources


@pytest.mark.asyncio
async def test_lifespan_reports_overrides() -> None:
    server = create_server()

    async with app_lifespan(server) as state:
        # txt, html, css, scss, json, js plus njn, org, md
        assert state == {"extensions": 9}
