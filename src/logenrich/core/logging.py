"""
Structured logging with static enrichment.

Configures structlog so that every emitted record passes through the
static enrichment processor: each enricher registered in a
:class:`~logenrich.core.container.ServiceCollection` contributes its tags
before the record is rendered.

Architecture:
    ::

        configure_logging(level="INFO", json_format=True, services=services)
            ↓
        structlog processor chain:
          1. filter_by_level
          2. merge_contextvars
          3. add_log_level / add_logger_name
          4. TimeStamper (UTC ISO-8601)
          5. StaticEnrichmentProcessor   ← when services are given
             or service metadata         ← otherwise
          6. ECS renaming (JSON only)
          7. JSONRenderer / ConsoleRenderer

Examples:
    >>> from logenrich import ServiceCollection, add_application_log_enricher
    >>> from logenrich.core.logging import configure_logging, get_logger
    >>> services = add_application_log_enricher(
    ...     ServiceCollection(), lambda o: setattr(o, "application_name", "svc-A")
    ... )
    >>> configure_logging(json_format=True, services=services)
    >>> get_logger(__name__).info("started")
    >>> # {"event": "started", "service.name": "svc-A", ...}

Tags:
    logging, structlog, enrichment, ecs, json-logging, logenrich

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

if TYPE_CHECKING:
    from logenrich.core.container import ServiceCollection

# Store service name for metadata
_SERVICE_NAME = "logenrich"
_configured = False


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp ``service.name`` when logging without a container."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _elasticsearch_compatible(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Make field names Elasticsearch/ECS compatible."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")

    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")

    return event_dict


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    services: ServiceCollection | None = None,
    service: str = "logenrich",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
            ``LOGENRICH_LOG_LEVEL``.
        json_format: True for JSON, False for console. Defaults to
            ``LOGENRICH_LOG_FORMAT``.
        services: Container whose static enrichers tag every record.
            When given, records carry only the tags those enrichers emit.
        service: ``service.name`` stamped on every record when *services*
            is None
    """
    from logenrich.core.settings import get_settings
    from logenrich.enrichment.processor import StaticEnrichmentProcessor

    global _SERVICE_NAME, _configured
    _SERVICE_NAME = service

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_format == "json"

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if services is not None:
        processors.append(StaticEnrichmentProcessor(services))
    else:
        processors.append(_add_service_metadata)

    if json_format:
        processors.append(_elasticsearch_compatible)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


__all__ = [
    "configure_logging",
    "get_logger",
    "is_configured",
]
