"""
logenrich - static key/value tags for every log record.

Register enrichers at startup, install the structlog processor, and every
record carries the application's identity::

    from logenrich import ServiceCollection, add_application_log_enricher
    from logenrich.core.logging import configure_logging

    services = add_application_log_enricher(
        ServiceCollection(), {"ApplicationName": "checkout", "EnvironmentName": "prod"}
    )
    configure_logging(services=services)
"""

from logenrich.config import ConfigurationSection, load_configuration, load_enricher_section
from logenrich.core import (
    EnrichmentError,
    InvalidArgumentError,
    ServiceCollection,
    configure_logging,
    get_logger,
)
from logenrich.enrichment import (
    ApplicationEnricherTags,
    ApplicationLogEnricher,
    ApplicationLogEnricherOptions,
    EnrichmentTagCollector,
    StaticEnrichmentProcessor,
    StaticLogEnricher,
    TagCollector,
    add_application_log_enricher,
    add_static_log_enricher,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationEnricherTags",
    "ApplicationLogEnricher",
    "ApplicationLogEnricherOptions",
    "ConfigurationSection",
    "EnrichmentError",
    "EnrichmentTagCollector",
    "InvalidArgumentError",
    "ServiceCollection",
    "StaticEnrichmentProcessor",
    "StaticLogEnricher",
    "TagCollector",
    "add_application_log_enricher",
    "add_static_log_enricher",
    "configure_logging",
    "get_logger",
    "load_configuration",
    "load_enricher_section",
]
