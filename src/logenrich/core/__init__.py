"""Core building blocks: errors, settings, logging and the service container."""

from .container import ServiceCollection
from .errors import (
    ConfigError,
    EnrichmentError,
    ErrorCategory,
    ErrorContext,
    InvalidArgumentError,
    InvalidConfigError,
    ensure_not_none,
)
from .logging import configure_logging, get_logger
from .settings import LogEnrichSettings, clear_settings_cache, get_settings

__all__ = [
    # Container
    "ServiceCollection",
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "EnrichmentError",
    "InvalidArgumentError",
    "ensure_not_none",
    "ConfigError",
    "InvalidConfigError",
    # Logging
    "configure_logging",
    "get_logger",
    # Settings
    "LogEnrichSettings",
    "get_settings",
    "clear_settings_cache",
]
