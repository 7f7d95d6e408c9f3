"""Shared test fixtures for typedecode."""
from __future__ import annotations

from datetime import datetime

import pytest

from typedecode.config import ConversionConfig
from typedecode.conversions import ConversionRegistry
from typedecode.dependencies import get_default_registry


@pytest.fixture
def registry() -> ConversionRegistry:
    """An empty, open registry."""
    return ConversionRegistry()


@pytest.fixture
def default_registry() -> ConversionRegistry:
    """The sealed process-wide default registry."""
    return get_default_registry()


@pytest.fixture
def sealed_defaults() -> ConversionRegistry:
    """A private sealed registry with the default rule set."""
    reg = ConversionRegistry.with_defaults()
    reg.seal()
    return reg


@pytest.fixture
def warn_on_shadowed(monkeypatch):
    """Turn on shadowed-rule warnings for registries without an explicit setting."""
    monkeypatch.setattr(ConversionConfig, "WARN_ON_SHADOWED_RULES", True)


@pytest.fixture
def new_year() -> datetime:
    return datetime.fromisoformat("2020-01-01T00:00:00+00:00")
