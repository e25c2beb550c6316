"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from mime_registry.constants import DEFAULT_READ_LIMIT
from mime_registry.models import TextType

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Registry
    read_limit: int = field(default=DEFAULT_READ_LIMIT)
    text_types: list[TextType] = field(default_factory=list)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from MIME_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            read_limit=cls._get_positive_int("MIME_READ_LIMIT", DEFAULT_READ_LIMIT),
            text_types=cls._get_text_types(),
            log_level=os.getenv("MIME_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("MIME_LOG_COLORS", True),
            log_payloads=cls._get_bool("MIME_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("MIME_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("MIME_INCLUDE_TRACEBACK", False),
            transport=cls._get_transport(),
            http_host=os.getenv("MIME_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("MIME_HTTP_PORT", 8000),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @classmethod
    def _get_positive_int(cls, key: str, default: int) -> int:
        value = cls._get_int(key, default)
        if value <= 0:
            logger.warning("%s must be > 0, got %d. Using default: %d", key, value, default)
            return default
        return value

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_text_types() -> list[TextType]:
        """Get extra text types from MIME_TEXT_TYPES.

        Format is a comma separated list of ``mime=extension`` pairs,
        e.g. ``text/x-rst=rst,text/x-asciidoc=adoc``. Malformed pairs are
        skipped.
        """
        value = os.getenv("MIME_TEXT_TYPES", "").strip()
        if not value:
            return []

        text_types = []
        for pair in value.split(","):
            if not pair.strip():
                continue
            try:
                text_types.append(TextType.parse(pair))
            except ValueError as e:
                logger.warning("Skipping MIME_TEXT_TYPES entry: %s", e)
        return text_types

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("MIME_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
