"""
Package settings for logenrich.

Manifesto:
    Logging level, output format and the default configuration section
    for the application enricher come from one validated, cached object
    instead of ad-hoc ``os.environ`` reads.

All fields can be set via ``LOGENRICH_*`` environment variables (e.g.
``LOGENRICH_LOG_LEVEL=DEBUG``) or a ``.env`` file.

Tags:
    logenrich, configuration, settings, pydantic, caching

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogEnrichSettings(BaseSettings):
    """logenrich configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOGENRICH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="console")

    # ── Enrichment ───────────────────────────────────────────────
    enricher_section: str = Field(
        default="ApplicationLogEnricher",
        description="Configuration section bound onto ApplicationLogEnricherOptions",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, LogEnrichSettings] = {}


def get_settings(*, _force_reload: bool = False) -> LogEnrichSettings:
    """Load, validate, and cache a :class:`LogEnrichSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = LogEnrichSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
