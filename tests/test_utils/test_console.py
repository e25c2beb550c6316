"""Tests for the colorful log formatter."""

import logging
import sys

from mime_registry.utils.console import COLORS, ColorfulFormatter


def _record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_has_no_ansi() -> None:
    """Colors can be disabled for non-tty output."""
    formatter = ColorfulFormatter(use_colors=False)
    line = formatter.format(
        _record("mime_registry.services.registry", logging.INFO, "Registered %s", "text/x-rst")
    )

    assert "\033[" not in line
    assert "INFO" in line
    assert "services.registry" in line
    assert "mime_registry.services" not in line
    assert line.endswith("Registered text/x-rst")


def test_colors_highlight_mime_types_and_durations() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    line = formatter.format(
        _record("mime_registry.middleware.logging", logging.INFO, "<<< text/plain [12.5ms]")
    )

    assert f"{COLORS['bright_blue']}text/plain{COLORS['reset']}" in line
    assert f"{COLORS['bright_yellow']}12.5ms{COLORS['reset']}" in line


def test_component_color_falls_back_to_default() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    assert formatter._get_component_color("uvicorn") == COLORS["white"]
    assert formatter._get_component_color("mime_registry.tools.mime") == COLORS["bright_blue"]


def test_exception_info_is_appended() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "mime_registry.server", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    line = formatter.format(record)

    assert "failed\nTraceback" in line
    assert "RuntimeError: boom" in line
