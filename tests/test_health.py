"""Tests for health check endpoint."""

from typing import Any

import pytest
from starlette.testclient import TestClient


class TestHealthCheck:
    """Tests for health check endpoint."""

    @pytest.fixture
    def client(self) -> TestClient:
        """Create test client for HTTP server."""
        from mime_registry.server import create_server

        server = create_server()
        # Get the ASGI app for testing
        app = server.http_app()
        return TestClient(app)

    def test_health_returns_ok(self, client: Any) -> None:
        """Health endpoint returns OK status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_health_returns_plain_text(self, client: Any) -> None:
        """Health endpoint returns plain text content type."""
        response = client.get("/health")
        assert "text/plain" in response.headers["content-type"]
