"""Hierarchical configuration sections and their loaders.

Quick start::

    from logenrich.config import load_enricher_section

    section = load_enricher_section(toml_file="logenrich.toml")
    section.get("ApplicationName")
"""

from .loader import DEFAULT_PREFIX, load_configuration, load_enricher_section
from .section import (
    KEY_DELIMITER,
    ConfigurationSection,
    combine_path,
    flatten_mapping,
)

__all__ = [
    # Section
    "ConfigurationSection",
    "KEY_DELIMITER",
    "combine_path",
    "flatten_mapping",
    # Loader
    "DEFAULT_PREFIX",
    "load_configuration",
    "load_enricher_section",
]
