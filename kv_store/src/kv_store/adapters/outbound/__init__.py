"""Outbound adapters - StoreObserver implementations."""

from kv_store.adapters.outbound.composite_observer import CompositeStoreObserver
from kv_store.adapters.outbound.console_observer import ConsoleStoreObserver
from kv_store.adapters.outbound.logging_observer import LoggingStoreObserver
from kv_store.adapters.outbound.metrics_observer import MetricsStoreObserver

__all__ = [
    "CompositeStoreObserver",
    "ConsoleStoreObserver",
    "LoggingStoreObserver",
    "MetricsStoreObserver",
]
