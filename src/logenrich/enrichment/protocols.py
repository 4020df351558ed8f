"""
Enrichment contracts.

Manifesto:
    A log enricher is anything with the right shape. Protocols let an
    application register a plain class without inheriting from a
    framework base, while registration can still check the shape at
    runtime via ``@runtime_checkable``.

Architecture:
    ::

        protocols.py
        ├── TagCollector       - write-only sink, one per log record
        └── StaticLogEnricher  - contributes tags that never change

Tags:
    protocol, enrichment, logging, logenrich, contracts

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable

TagValue: TypeAlias = str | int | float | bool


@runtime_checkable
class TagCollector(Protocol):
    """Where an enricher puts the tags it is producing."""

    def add(self, key: str, value: TagValue) -> None:
        """Add a tag to the record being built."""
        ...


@runtime_checkable
class StaticLogEnricher(Protocol):
    """
    A component that augments log records with properties which are
    unchanging over the life of the object.

    Implementations are invoked once per record, possibly from several
    threads at once, and must not raise for absent configuration: a value
    that was never configured is simply not added.
    """

    def enrich(self, collector: TagCollector) -> None:
        """Called to collect tags for a log record."""
        ...
