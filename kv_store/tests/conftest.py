"""Pytest configuration and fixtures for kv_store tests."""

from __future__ import annotations

import io
from typing import Generator

import pytest
import structlog
from hypothesis import HealthCheck, settings
from prometheus_client import CollectorRegistry

from kv_store.domain.entities import KVStore
from kv_store.domain.value_objects import StoreEvent
from kv_store.infrastructure.config import get_config
from kv_store.infrastructure.container import Container
from kv_store.infrastructure.metrics import MetricsRegistry

# Autouse fixtures below hold no per-example state
settings.register_profile("kv_store", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("kv_store")


class RecordingObserver:
    """StoreObserver that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[StoreEvent] = []

    def on_event(self, event: StoreEvent) -> None:
        self.events.append(event)

    @property
    def outcomes(self) -> list:
        return [event.outcome for event in self.events]


@pytest.fixture(autouse=True)
def _isolate_globals() -> Generator[None, None, None]:
    """Reset the container singleton, cached config and structlog between tests."""
    Container.reset()
    get_config.cache_clear()
    structlog.reset_defaults()
    yield
    Container.reset()
    get_config.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def recorder() -> RecordingObserver:
    """Provide an observer that records events."""
    return RecordingObserver()


@pytest.fixture
def store(recorder: RecordingObserver) -> KVStore:
    """Provide an empty store wired to the recording observer."""
    return KVStore(observer=recorder)


@pytest.fixture
def store_with_data(recorder: RecordingObserver) -> KVStore:
    """Provide a store seeded with three animals (seeding emits no events)."""
    return KVStore(
        observer=recorder,
        initial={"cat": "meow", "dog": "bark", "horse": "neigh"},
    )


@pytest.fixture
def stream() -> io.StringIO:
    """Provide an in-memory text stream for console output."""
    return io.StringIO()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-based tests")
