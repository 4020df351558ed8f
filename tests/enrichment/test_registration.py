"""Tests for static enricher registration helpers.

Covers the three ways of registering the application enricher, argument
guards that must fire before any side effect, and additive registration.
"""

from __future__ import annotations

import pytest

from logenrich.config.section import ConfigurationSection
from logenrich.core.container import ServiceCollection
from logenrich.core.errors import InvalidArgumentError
from logenrich.enrichment import (
    ApplicationLogEnricher,
    ApplicationLogEnricherOptions,
    EnrichmentTagCollector,
    StaticLogEnricher,
    add_application_log_enricher,
    add_static_log_enricher,
)


def _tags(enricher) -> dict:
    collector = EnrichmentTagCollector()
    enricher.enrich(collector)
    return collector.to_dict()


def _set_name(value: str):
    def configure(options: ApplicationLogEnricherOptions) -> None:
        options.application_name = value

    return configure


# =============================================================================
# Fluent return and side effects
# =============================================================================


class TestAddApplicationLogEnricher:
    def test_default_returns_same_services(self, services):
        assert add_application_log_enricher(services) is services

    def test_default_registers_one_enricher_with_empty_options(self, services):
        add_application_log_enricher(services)
        enrichers = services.static_enrichers
        assert len(enrichers) == 1
        assert isinstance(enrichers[0], ApplicationLogEnricher)
        assert services.get_options(ApplicationLogEnricherOptions) == [ApplicationLogEnricherOptions()]
        assert _tags(enrichers[0]) == {}

    def test_configure_callback(self, services):
        result = add_application_log_enricher(services, _set_name("svc-A"))
        assert result is services
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {"service.name": "svc-A"}

    def test_configuration_section(self, services):
        root = ConfigurationSection.from_mapping(
            {"ApplicationLogEnricher": {"ApplicationName": "svc-B"}}
        )
        result = add_application_log_enricher(services, root.get_section("ApplicationLogEnricher"))
        assert result is services
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {"service.name": "svc-B"}

    def test_plain_mapping_is_wrapped(self, services):
        add_application_log_enricher(services, {"ApplicationName": "svc-M", "BuildVersion": "4"})
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {"service.name": "svc-M", "service.version": "4"}

    def test_empty_section_gives_default_options(self, services):
        add_application_log_enricher(services, ConfigurationSection().get_section("Missing"))
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {}

    def test_none_section_values_emit_no_tags(self, services):
        add_application_log_enricher(
            services, ConfigurationSection({"ApplicationName": None, "EnvironmentName": None})
        )
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {}
        assert services.get_options(ApplicationLogEnricherOptions) == [ApplicationLogEnricherOptions()]

    def test_unset_field_is_omitted(self, services):
        add_application_log_enricher(services, _set_name("svc-A"))
        (enricher,) = services.static_enrichers
        tags = _tags(enricher)
        assert "deployment.environment" not in tags
        assert "service.version" not in tags

    def test_configure_runs_on_fresh_options(self, services):
        seen = []
        add_application_log_enricher(services, seen.append)
        add_application_log_enricher(services, seen.append)
        assert seen[0] is not seen[1]
        assert seen[0] == ApplicationLogEnricherOptions()

    def test_chaining(self):
        services = add_application_log_enricher(
            add_application_log_enricher(ServiceCollection(), _set_name("a")),
            {"ApplicationName": "b"},
        )
        assert [_tags(e)["service.name"] for e in services.static_enrichers] == ["a", "b"]


# =============================================================================
# Additive, independent registrations
# =============================================================================


class TestAccumulation:
    def test_two_registrations_do_not_cross_contaminate(self, services):
        add_application_log_enricher(services, _set_name("svc-A"))
        add_application_log_enricher(services, {"ApplicationName": "svc-B"})

        first, second = services.static_enrichers
        assert _tags(first) == {"service.name": "svc-A"}
        assert _tags(second) == {"service.name": "svc-B"}

        options = services.get_options(ApplicationLogEnricherOptions)
        assert [o.application_name for o in options] == ["svc-A", "svc-B"]

    def test_mutating_stored_options_does_not_change_tags(self, services):
        add_application_log_enricher(services, _set_name("svc-A"))
        services.get_options(ApplicationLogEnricherOptions)[0].application_name = "changed"
        (enricher,) = services.static_enrichers
        assert _tags(enricher) == {"service.name": "svc-A"}


# =============================================================================
# Argument guards (fail fast, nothing registered)
# =============================================================================


class TestGuards:
    @pytest.mark.parametrize(
        "source",
        [
            pytest.param((), id="default"),
            pytest.param((_set_name("x"),), id="configure"),
            pytest.param((ConfigurationSection(),), id="section"),
        ],
    )
    def test_none_services(self, source):
        with pytest.raises(InvalidArgumentError) as exc_info:
            add_application_log_enricher(None, *source)
        assert exc_info.value.argument == "services"

    def test_non_collection_services_rejected_before_callback(self):
        calls = []
        with pytest.raises(InvalidArgumentError) as exc_info:
            add_application_log_enricher([], calls.append)
        assert exc_info.value.argument == "services"
        assert calls == []

    def test_non_collection_services_rejected_for_static_enricher(self, fixed_enricher_cls):
        with pytest.raises(InvalidArgumentError) as exc_info:
            add_static_log_enricher({}, fixed_enricher_cls())
        assert exc_info.value.argument == "services"

    def test_none_source_registers_nothing(self, services):
        with pytest.raises(InvalidArgumentError) as exc_info:
            add_application_log_enricher(services, None)
        assert exc_info.value.argument == "source"
        assert services.static_enrichers == []
        assert services.get_options(ApplicationLogEnricherOptions) == []

    def test_unsupported_source_type(self, services):
        with pytest.raises(InvalidArgumentError):
            add_application_log_enricher(services, 42)
        assert len(services) == 0

    def test_failing_callback_registers_nothing(self, services):
        def configure(options):
            raise RuntimeError("bad config code")

        with pytest.raises(RuntimeError):
            add_application_log_enricher(services, configure)
        assert len(services) == 0
        assert services.get_options(ApplicationLogEnricherOptions) == []

    def test_invalid_argument_is_value_error(self, services):
        with pytest.raises(ValueError):
            add_application_log_enricher(services, None)


# =============================================================================
# Generic static enricher registration
# =============================================================================


class TestAddStaticLogEnricher:
    def test_instance(self, services, fixed_enricher_cls):
        enricher = fixed_enricher_cls(region="eu")
        assert add_static_log_enricher(services, enricher) is services
        assert services.get_services(StaticLogEnricher) == [enricher]

    def test_class_is_instantiated(self, services, noarg_enricher_cls):
        add_static_log_enricher(services, noarg_enricher_cls)
        (enricher,) = services.static_enrichers
        assert isinstance(enricher, noarg_enricher_cls)
        assert _tags(enricher) == {"component": "noarg"}

    def test_rejects_none(self, services, fixed_enricher_cls):
        with pytest.raises(InvalidArgumentError):
            add_static_log_enricher(None, fixed_enricher_cls())
        with pytest.raises(InvalidArgumentError):
            add_static_log_enricher(services, None)
        assert len(services) == 0

    def test_rejects_non_enricher(self, services):
        with pytest.raises(InvalidArgumentError):
            add_static_log_enricher(services, object())
        with pytest.raises(InvalidArgumentError):
            add_static_log_enricher(services, dict)
        assert len(services) == 0

    def test_mixed_registrations_keep_order(self, services, fixed_enricher_cls):
        custom = fixed_enricher_cls(region="eu")
        add_application_log_enricher(services, _set_name("svc"))
        add_static_log_enricher(services, custom)
        enrichers = services.static_enrichers
        assert isinstance(enrichers[0], ApplicationLogEnricher)
        assert enrichers[1] is custom
