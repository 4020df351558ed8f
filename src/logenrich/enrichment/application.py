"""
Application metadata enricher.

Tags every log record with the identity of the running application:
name, environment, build version and deployment ring. Values come from
:class:`ApplicationLogEnricherOptions`, bound once at startup either in
code or from a configuration section such as::

    [ApplicationLogEnricher]
    ApplicationName = "checkout"
    EnvironmentName = "prod"
    BuildVersion = "2024.06.1"

Binding is explicit: :func:`bind_application_options` maps each known
configuration key onto one options field. Unknown keys are ignored.

Tags:
    enrichment, application-metadata, options, logenrich

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from logenrich.config.section import ConfigurationSection
from logenrich.core.logging import get_logger

from .protocols import TagCollector

logger = get_logger(__name__)


class ApplicationEnricherTags:
    """Tag names emitted by :class:`ApplicationLogEnricher`."""

    APPLICATION_NAME = "service.name"
    ENVIRONMENT_NAME = "deployment.environment"
    BUILD_VERSION = "service.version"
    DEPLOYMENT_RING = "DeploymentRing"

    @classmethod
    def all(cls) -> tuple[str, ...]:
        return (cls.APPLICATION_NAME, cls.ENVIRONMENT_NAME, cls.BUILD_VERSION, cls.DEPLOYMENT_RING)


@dataclass
class ApplicationLogEnricherOptions:
    """
    Static values for :class:`ApplicationLogEnricher`.

    A field left as ``None`` (or blank) produces no tag.

    Attributes:
        application_name: Emitted as ``service.name``
        environment_name: Emitted as ``deployment.environment``
        build_version: Emitted as ``service.version``
        deployment_ring: Emitted as ``DeploymentRing``
    """

    application_name: str | None = None
    environment_name: str | None = None
    build_version: str | None = None
    deployment_ring: str | None = None


# Configuration key (lower-cased) -> options field
_SECTION_BINDINGS: dict[str, str] = {
    "applicationname": "application_name",
    "application_name": "application_name",
    "environmentname": "environment_name",
    "environment_name": "environment_name",
    "buildversion": "build_version",
    "build_version": "build_version",
    "deploymentring": "deployment_ring",
    "deployment_ring": "deployment_ring",
}


def bind_application_options(
    options: ApplicationLogEnricherOptions,
    section: ConfigurationSection,
) -> ApplicationLogEnricherOptions:
    """Populate *options* from the direct children of *section*.

    Keys match case-insensitively in PascalCase or snake_case. Blank
    values leave the field untouched. Returns *options* for chaining.
    """
    for key, value in section.items():
        field_name = _SECTION_BINDINGS.get(key.lower())
        if field_name is None:
            logger.debug("option_key_ignored", section=section.path, key=key)
            continue
        if not value.strip():
            continue
        setattr(options, field_name, value)
    return options


class ApplicationLogEnricher:
    """Static enricher for application metadata.

    Tags are computed once from the options; every :meth:`enrich` call
    replays the same tuple, so concurrent use needs no locking.
    """

    def __init__(self, options: ApplicationLogEnricherOptions | None = None) -> None:
        self._options = replace(options) if options is not None else ApplicationLogEnricherOptions()
        candidates = (
            (ApplicationEnricherTags.APPLICATION_NAME, self._options.application_name),
            (ApplicationEnricherTags.ENVIRONMENT_NAME, self._options.environment_name),
            (ApplicationEnricherTags.BUILD_VERSION, self._options.build_version),
            (ApplicationEnricherTags.DEPLOYMENT_RING, self._options.deployment_ring),
        )
        self._tags: tuple[tuple[str, str], ...] = tuple(
            (tag, value) for tag, value in candidates if value is not None and value.strip()
        )

    @property
    def options(self) -> ApplicationLogEnricherOptions:
        """Copy of the options this enricher was built from."""
        return replace(self._options)

    @property
    def tags(self) -> tuple[tuple[str, str], ...]:
        return self._tags

    def enrich(self, collector: TagCollector) -> None:
        for tag, value in self._tags:
            collector.add(tag, value)

    def __repr__(self) -> str:
        return f"ApplicationLogEnricher({dict(self._tags)!r})"
