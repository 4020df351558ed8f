"""
structlog processor that applies registered static enrichers.

For every event the processor creates a fresh
:class:`~logenrich.enrichment.collector.EnrichmentTagCollector`, invokes
each enricher in registration order, and merges the collected tags into
the event dict. Keys already present in the event (set at the call site
or by an earlier processor) are never overwritten.

Exceptions raised by an enricher propagate to structlog unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structlog.types import EventDict, WrappedLogger

from logenrich.core.container import ServiceCollection
from logenrich.core.errors import ensure_not_none

from .collector import EnrichmentTagCollector
from .protocols import StaticLogEnricher, TagValue


def collect_static_tags(enrichers: Iterable[StaticLogEnricher]) -> dict[str, TagValue]:
    """Run *enrichers* in order against one new collector and return its tags."""
    collector = EnrichmentTagCollector()
    for enricher in enrichers:
        enricher.enrich(collector)
    return collector.to_dict()


class StaticEnrichmentProcessor:
    """Merge static enricher tags into each structlog event.

    Args:
        source: A :class:`ServiceCollection` (its static enrichers are
            snapshotted at construction) or an iterable of enrichers.
    """

    def __init__(self, source: ServiceCollection | Iterable[StaticLogEnricher]) -> None:
        ensure_not_none(source, "source")
        if isinstance(source, ServiceCollection):
            enrichers: list[Any] = source.static_enrichers
        else:
            enrichers = list(source)
        self._enrichers: tuple[StaticLogEnricher, ...] = tuple(enrichers)

    @property
    def enrichers(self) -> tuple[StaticLogEnricher, ...]:
        return self._enrichers

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        if not self._enrichers:
            return event_dict
        for key, value in collect_static_tags(self._enrichers).items():
            event_dict.setdefault(key, value)
        return event_dict
