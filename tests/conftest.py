"""Shared fixtures for mime_registry tests."""

import logging
from collections.abc import Iterator

import pytest

from mime_registry.services import MimeRegistry, reset_state


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh default registry and a clean MIME_* env."""
    for key in (
        "MIME_READ_LIMIT",
        "MIME_TEXT_TYPES",
        "MIME_LOG_LEVEL",
        "MIME_LOG_COLORS",
        "MIME_LOG_PAYLOADS",
        "MIME_SLOW_THRESHOLD_MS",
        "MIME_INCLUDE_TRACEBACK",
        "MIME_TRANSPORT",
        "MIME_HTTP_HOST",
        "MIME_HTTP_PORT",
    ):
        monkeypatch.delenv(key, raising=False)
    # The server module stops propagation once imported; caplog needs it
    monkeypatch.setattr(logging.getLogger("mime_registry"), "propagate", True)
    reset_state()
    yield
    reset_state()


@pytest.fixture
def registry() -> MimeRegistry:
    """Create a registry seeded with the well-known types."""
    return MimeRegistry.create_default()


@pytest.fixture
def png_bytes() -> bytes:
    """Smallest PNG that signature matchers accept."""
    return (
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
        b"\x00\x00\x00\x00IEND\xaeB`\x82"
    )
