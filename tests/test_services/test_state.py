"""Tests for the process-wide default registry."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from mime_registry.config import Settings
from mime_registry.models import TextType
from mime_registry.services import (
    MimeRegistry,
    get_registry,
    get_settings,
    reset_state,
    set_registry,
    set_settings,
)


def test_get_registry_is_cached() -> None:
    """Repeated calls return the same registry."""
    assert get_registry() is get_registry()


def test_default_registry_is_seeded() -> None:
    """The default registry knows the well-known types."""
    assert get_registry().get_extension("md") == ("text/markdown; charset=utf-8", True)


def test_reset_state_builds_new_registry() -> None:
    """reset_state drops the cached registry."""
    first = get_registry()
    first.set_extension("cst", "text/custom")

    reset_state()

    second = get_registry()
    assert second is not first
    assert second.get_extension("cst") == ("", False)


def test_set_registry_injects_instance() -> None:
    """Injected registries are returned by get_registry."""
    registry = MimeRegistry()
    set_registry(registry)
    assert get_registry() is registry


def test_settings_text_types_registered(monkeypatch: pytest.MonkeyPatch) -> None:
    """MIME_TEXT_TYPES entries are registered on the default registry."""
    monkeypatch.setenv("MIME_TEXT_TYPES", "text/x-rst=rst, text/x-asciidoc=.adoc")

    registry = get_registry()

    assert registry.get_extension("rst") == ("text/x-rst; charset=utf-8", True)
    assert registry.get_extension("adoc") == ("text/x-asciidoc; charset=utf-8", True)
    assert registry.is_plain_text("text/x-asciidoc")


def test_invalid_text_type_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """A malformed configured mime does not prevent startup."""
    set_settings(Settings(text_types=[TextType("bad mime", "bad"), TextType("text/x-ok", "ok")]))

    registry = get_registry()

    assert registry.get_extension("ok")[1] is True
    assert registry.get_extension("bad") == ("", False)
    assert "Cannot register text type bad mime" in caplog.text


def test_read_limit_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """The registry uses the configured read limit."""
    monkeypatch.setenv("MIME_READ_LIMIT", "512")
    assert get_settings().read_limit == 512
    assert get_registry().read_limit == 512


def test_concurrent_first_calls_share_one_registry() -> None:
    """Threads racing on first use all get the same registry."""
    with ThreadPoolExecutor(max_workers=8) as pool:
        registries = list(pool.map(lambda _: get_registry(), range(16)))

    assert len({id(r) for r in registries}) == 1
    assert registries[0] is get_registry()
