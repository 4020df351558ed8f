"""
Registration helpers for static log enrichers.

Manifesto:
    Applications choose between code-first and file-first configuration
    without duplicating registration logic. Every entry point validates
    its arguments before touching the container, then funnels through one
    private helper so the side effects are identical whichever path is
    taken.

Usage::

    from logenrich import ServiceCollection, add_application_log_enricher

    services = ServiceCollection()

    # Default (empty) options
    add_application_log_enricher(services)

    # Code-first
    add_application_log_enricher(
        services, lambda o: setattr(o, "application_name", "svc-A")
    )

    # File-first
    config = load_configuration(toml_file="logenrich.toml")
    add_application_log_enricher(services, config.get_section("ApplicationLogEnricher"))

Each call appends an independent enricher with its own options snapshot;
calls accumulate and return the same ``services`` for chaining.

Guardrails:
    ❌ DON'T: Pass None to mean "no configuration"
    ✅ DO: Omit the argument

    ❌ DON'T: Mutate options after registration and expect new tags
    ✅ DO: Register again with the new configuration

Tags:
    enrichment, registration, dependency-injection, options, logenrich

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, overload

from logenrich.config.section import ConfigurationSection
from logenrich.core.container import ServiceCollection
from logenrich.core.errors import InvalidArgumentError, ensure_not_none
from logenrich.core.logging import get_logger

from .application import (
    ApplicationLogEnricher,
    ApplicationLogEnricherOptions,
    bind_application_options,
)
from .protocols import StaticLogEnricher

logger = get_logger(__name__)

ConfigureOptions = Callable[[ApplicationLogEnricherOptions], Any]

_UNSET: Any = object()


def add_static_log_enricher(
    services: ServiceCollection,
    enricher: StaticLogEnricher | type[StaticLogEnricher],
) -> ServiceCollection:
    """Register a static enricher instance, or a class built with no arguments.

    Raises:
        InvalidArgumentError: If *services* is not a ServiceCollection,
            *enricher* is None, or *enricher* has no ``enrich`` method.
    """
    _ensure_services(services)
    ensure_not_none(enricher, "enricher")

    if isinstance(enricher, type):
        if not callable(getattr(enricher, "enrich", None)):
            raise InvalidArgumentError(
                f"{enricher.__name__} does not implement enrich(collector)",
                argument="enricher",
                value=enricher,
            )
        enricher = enricher()
    elif not isinstance(enricher, StaticLogEnricher):
        raise InvalidArgumentError(
            f"{type(enricher).__name__} does not implement enrich(collector)",
            argument="enricher",
            value=enricher,
        )

    services.register(StaticLogEnricher, enricher)
    logger.debug(
        "static_enricher_registered",
        enricher=type(enricher).__name__,
        position=len(services.get_services(StaticLogEnricher)),
    )
    return services


@overload
def add_application_log_enricher(services: ServiceCollection) -> ServiceCollection: ...


@overload
def add_application_log_enricher(
    services: ServiceCollection, source: ConfigureOptions
) -> ServiceCollection: ...


@overload
def add_application_log_enricher(
    services: ServiceCollection, source: ConfigurationSection | Mapping[str, Any]
) -> ServiceCollection: ...


def add_application_log_enricher(services: Any, source: Any = _UNSET) -> ServiceCollection:
    """Register an :class:`ApplicationLogEnricher` in *services*.

    Args:
        services: Container to register into.
        source: Omitted for default options; a callable that mutates a fresh
            :class:`ApplicationLogEnricherOptions`; or a
            :class:`ConfigurationSection` (or plain mapping) whose keys
            populate the options by name.

    Returns:
        *services*, for chaining.

    Raises:
        InvalidArgumentError: If *services* is not a ServiceCollection,
            *source* is passed as None, or *source* is of an unsupported
            type. Nothing is registered in that case.
    """
    _ensure_services(services)

    if source is _UNSET:
        return add_application_log_enricher(services, _configure_nothing)

    ensure_not_none(source, "source")

    if isinstance(source, ConfigurationSection):
        section: ConfigurationSection | None = source
        configure: ConfigureOptions = _configure_nothing
    elif isinstance(source, Mapping):
        section = ConfigurationSection.from_mapping(source)
        configure = _configure_nothing
    elif callable(source):
        section = None
        configure = source
    else:
        raise InvalidArgumentError(
            "source must be a configure callable, a ConfigurationSection or a mapping, "
            f"not {type(source).__name__}",
            argument="source",
            value=source,
        )

    options = _add_log_enricher_options(services, configure, section)
    return add_static_log_enricher(services, ApplicationLogEnricher(options))


def _configure_nothing(options: ApplicationLogEnricherOptions) -> None:
    pass


def _add_log_enricher_options(
    services: ServiceCollection,
    configure: ConfigureOptions,
    section: ConfigurationSection | None = None,
) -> ApplicationLogEnricherOptions:
    """Build, configure and store one options snapshot.

    The callback runs first, then the section is bound over it.
    """
    options = ApplicationLogEnricherOptions()
    configure(options)

    if section is not None:
        if not section.exists():
            logger.debug("options_section_empty", section=section.path)
        bind_application_options(options, section)

    services.configure_options(ApplicationLogEnricherOptions, options)
    return options


def _ensure_services(services: Any) -> ServiceCollection:
    ensure_not_none(services, "services")
    if not isinstance(services, ServiceCollection):
        raise InvalidArgumentError(
            f"services must be a ServiceCollection, not {type(services).__name__}",
            argument="services",
            value=services,
        )
    return services
