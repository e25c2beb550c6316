"""Global state management for mime_registry."""

import logging
import threading

from mime_registry.config import Settings
from mime_registry.services.registry import MimeRegistry
from mime_registry.utils.validation import MediaTypeError, RegistrationError

logger = logging.getLogger(__name__)

# Global state (initialized on first access)
_settings: Settings | None = None
_registry: MimeRegistry | None = None
_registry_lock = threading.Lock()


def get_settings() -> Settings:
    """Get or create settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_registry() -> MimeRegistry:
    """Get or create the process-wide registry.

    Seeded with the well-known types plus any MIME_TEXT_TYPES entries.
    Concurrent first calls build a single registry.
    """
    global _registry
    if _registry is not None:
        return _registry
    with _registry_lock:
        if _registry is None:
            settings = get_settings()
            registry = MimeRegistry.create_default(read_limit=settings.read_limit)
            for text_type in settings.text_types:
                try:
                    registry.register_text_type(text_type.mime, text_type.extension)
                except (MediaTypeError, RegistrationError) as e:
                    logger.warning("Cannot register text type %s: %s", text_type.mime, e)
            _registry = registry
    return _registry


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instances, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _settings, _registry
    _settings = None
    _registry = None


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def set_registry(registry: MimeRegistry) -> None:
    """Set the global registry instance.

    Allows tests to inject a custom registry without modifying module internals.

    Args:
        registry: MimeRegistry instance to use globally.
    """
    global _registry
    _registry = registry
