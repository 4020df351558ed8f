"""
Layered configuration loading.

Two layers are merged into one root :class:`ConfigurationSection`::

    TOML file  →  LOGENRICH_* environment variables

The environment always wins. Keys are compared case-insensitively, so
``LOGENRICH_APPLICATIONLOGENRICHER__APPLICATIONNAME`` replaces the TOML
``[ApplicationLogEnricher] ApplicationName`` rather than sitting beside it.

:func:`load_enricher_section` goes one step further and returns the
section that :class:`~logenrich.core.settings.LogEnrichSettings` names in
``enricher_section``, ready to hand to ``add_application_log_enricher``.

Tags:
    logenrich, configuration, toml, env-vars, loader

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from logenrich.core.logging import get_logger
from logenrich.core.settings import get_settings

from .section import ConfigurationSection

logger = get_logger(__name__)

DEFAULT_PREFIX = "LOGENRICH_"


def _merge(layers: list[ConfigurationSection]) -> dict[str, str]:
    """Flatten *layers* into one mapping; later layers replace earlier keys."""
    merged: dict[str, str] = {}
    spelling: dict[str, str] = {}
    for layer in layers:
        for key, value in layer.to_dict().items():
            previous = spelling.pop(key.lower(), None)
            if previous is not None:
                del merged[previous]
            spelling[key.lower()] = key
            merged[key] = value
    return merged


def load_configuration(
    toml_file: Path | str | None = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> ConfigurationSection:
    """Return the merged root :class:`ConfigurationSection`.

    Args:
        toml_file: Optional TOML file, the lowest-priority layer
        prefix: Environment variable prefix, stripped before mapping
        environ: Environment to read instead of ``os.environ``

    Raises:
        InvalidConfigError: If *toml_file* cannot be read or parsed.
    """
    layers: list[ConfigurationSection] = []
    if toml_file is not None:
        layers.append(ConfigurationSection.from_toml(toml_file))
    layers.append(ConfigurationSection.from_env(prefix, environ))

    merged = _merge(layers)
    logger.debug(
        "configuration_loaded",
        toml_file=str(toml_file) if toml_file is not None else None,
        prefix=prefix,
        keys=len(merged),
    )
    return ConfigurationSection(merged)


def load_enricher_section(
    toml_file: Path | str | None = None,
    *,
    section: str | None = None,
    prefix: str = DEFAULT_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> ConfigurationSection:
    """Load configuration and return the application enricher's section.

    *section* defaults to ``get_settings().enricher_section``
    (``LOGENRICH_ENRICHER_SECTION``), itself ``ApplicationLogEnricher``
    unless overridden. The result may be empty; binding an empty section
    yields default options.
    """
    path = section or get_settings().enricher_section
    found = load_configuration(toml_file, prefix=prefix, environ=environ).get_section(path)
    if not found.exists():
        logger.debug("enricher_section_missing", section=path)
    return found
