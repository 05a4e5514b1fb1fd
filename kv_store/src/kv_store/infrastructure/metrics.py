"""Prometheus metrics for the key-value store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all key-value store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.operations_total = Counter(
            "kv_store_operations_total",
            "Total number of store operations",
            ["operation", "outcome"],  # operation: set, get, remove
            registry=self._registry,
        )

        self.entries = Gauge(
            "kv_store_entries",
            "Number of entries currently held",
            registry=self._registry,
        )

        self.info = Info(
            "kv_store",
            "Key-value store information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The collector registry the metrics are registered with."""
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None
_server_started = False


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Metrics and the HTTP server are created once per process; later calls
    return the existing registry and leave the server running.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry, used on the first call only

    Returns:
        The metrics registry
    """
    global _metrics, _server_started
    if _metrics is None:
        _metrics = MetricsRegistry(registry)

    from kv_store import __version__
    _metrics.info.info({
        "version": __version__,
    })

    if not _server_started:
        start_http_server(port, registry=_metrics.registry)
        _server_started = True

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
