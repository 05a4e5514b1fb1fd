"""Prometheus observer counting store outcomes."""

from __future__ import annotations

from kv_store.domain.value_objects import StoreEvent, StoreOutcome
from kv_store.infrastructure.metrics import MetricsRegistry


class MetricsStoreObserver:
    """StoreObserver that feeds the operation counter and entries gauge.

    The entries gauge tracks INSERTED and REMOVED outcomes only, so entries
    seeded through ``KVStore(initial=...)`` or ``clone()`` are not counted.
    """

    def __init__(self, metrics: MetricsRegistry) -> None:
        self._metrics = metrics

    def on_event(self, event: StoreEvent) -> None:
        self._metrics.operations_total.labels(
            operation=event.operation.value,
            outcome=event.outcome.value,
        ).inc()

        if event.outcome is StoreOutcome.INSERTED:
            self._metrics.entries.inc()
        elif event.outcome is StoreOutcome.REMOVED:
            self._metrics.entries.dec()
