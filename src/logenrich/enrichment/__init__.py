"""Static log enrichment: contracts, collector, enrichers and registration."""

from .application import (
    ApplicationEnricherTags,
    ApplicationLogEnricher,
    ApplicationLogEnricherOptions,
    bind_application_options,
)
from .collector import EnrichmentTagCollector
from .processor import StaticEnrichmentProcessor, collect_static_tags
from .protocols import StaticLogEnricher, TagCollector, TagValue
from .registration import add_application_log_enricher, add_static_log_enricher

__all__ = [
    # Contracts
    "StaticLogEnricher",
    "TagCollector",
    "TagValue",
    "EnrichmentTagCollector",
    # Application enricher
    "ApplicationEnricherTags",
    "ApplicationLogEnricher",
    "ApplicationLogEnricherOptions",
    "bind_application_options",
    # Registration
    "add_static_log_enricher",
    "add_application_log_enricher",
    # Pipeline
    "StaticEnrichmentProcessor",
    "collect_static_tags",
]
