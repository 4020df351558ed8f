"""
Ordered dependency-injection registry.

:class:`ServiceCollection` keeps, per service type, an ordered list of
registered implementations, and per options type an ordered list of bound
options snapshots. Registrations accumulate; nothing is ever replaced, and
resolution order is registration order.

Usage::

    from logenrich.core.container import ServiceCollection
    from logenrich.enrichment import StaticLogEnricher

    services = ServiceCollection()
    services.register(StaticLogEnricher, MyEnricher())
    services.static_enrichers          # [MyEnricher()]

    # As a context manager for automatic cleanup:
    with ServiceCollection() as services:
        ...
"""

from __future__ import annotations

from typing import Any

from .errors import ensure_not_none
from .logging import get_logger

logger = get_logger(__name__)


class ServiceCollection:
    """Explicit, ordered registry of services and options.

    Implementations are stored as given (instances, not factories), so the
    same object is handed to every consumer for the life of the collection.
    """

    def __init__(self) -> None:
        self._services: dict[type, list[Any]] = {}
        self._options: dict[type, list[Any]] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, service_type: type, implementation: Any) -> ServiceCollection:
        """Append *implementation* to the list for *service_type*."""
        ensure_not_none(service_type, "service_type")
        ensure_not_none(implementation, "implementation")
        self._services.setdefault(service_type, []).append(implementation)
        logger.debug(
            "service_registered",
            service_type=service_type.__name__,
            implementation=type(implementation).__name__,
            count=len(self._services[service_type]),
        )
        return self

    def configure_options(self, options_type: type, options: Any) -> ServiceCollection:
        """Append a bound *options* snapshot for *options_type*."""
        ensure_not_none(options_type, "options_type")
        ensure_not_none(options, "options")
        self._options.setdefault(options_type, []).append(options)
        return self

    # ── Resolution ───────────────────────────────────────────────

    def get_services(self, service_type: type) -> list[Any]:
        """Registered implementations of *service_type*, in registration order."""
        return list(self._services.get(service_type, ()))

    def get_options(self, options_type: type) -> list[Any]:
        """Bound options snapshots of *options_type*, in registration order."""
        return list(self._options.get(options_type, ()))

    @property
    def static_enrichers(self) -> list[Any]:
        """Every registered :class:`~logenrich.enrichment.StaticLogEnricher`."""
        from logenrich.enrichment.protocols import StaticLogEnricher

        return self.get_services(StaticLogEnricher)

    def __contains__(self, service_type: object) -> bool:
        return bool(self._services.get(service_type))  # type: ignore[call-overload]

    def __len__(self) -> int:
        return sum(len(impls) for impls in self._services.values())

    def __repr__(self) -> str:
        counts = {t.__name__: len(impls) for t, impls in self._services.items()}
        return f"ServiceCollection({counts})"

    # ── Lifecycle ────────────────────────────────────────────────

    def close(self) -> None:
        """Close registered implementations that expose ``close()`` and drop all registrations."""
        for implementations in self._services.values():
            for implementation in implementations:
                close = getattr(implementation, "close", None)
                if callable(close):
                    close()
        self._services.clear()
        self._options.clear()

    def __enter__(self) -> ServiceCollection:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
