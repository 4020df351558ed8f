"""
Shared pytest fixtures and configuration for logenrich tests.

This module provides:
- Settings-cache cleanup for test isolation
- structlog reset so one test's configure_logging() cannot leak
- Small enricher doubles shared across test modules

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments.
"""

import logging
import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure logenrich package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from logenrich.core.container import ServiceCollection
from logenrich.core.settings import clear_settings_cache


# =============================================================================
# Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_state() -> Generator[None, None, None]:
    """Clear cached settings and structlog config around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)


# =============================================================================
# Enricher Doubles
# =============================================================================


class FixedEnricher:
    """Static enricher that always adds the same tags."""

    def __init__(self, **tags):
        self.tags = tags
        self.calls = 0

    def enrich(self, collector) -> None:
        self.calls += 1
        for key, value in self.tags.items():
            collector.add(key, value)


class NoArgEnricher:
    """Static enricher constructible without arguments."""

    def enrich(self, collector) -> None:
        collector.add("component", "noarg")


@pytest.fixture
def services() -> ServiceCollection:
    return ServiceCollection()


@pytest.fixture
def fixed_enricher_cls() -> type[FixedEnricher]:
    return FixedEnricher


@pytest.fixture
def noarg_enricher_cls() -> type[NoArgEnricher]:
    return NoArgEnricher
