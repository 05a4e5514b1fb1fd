"""Dependency injection container for the key-value store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Mapping, TextIO

import structlog
from opentelemetry import trace

from kv_store.adapters.outbound import (
    CompositeStoreObserver,
    ConsoleStoreObserver,
    LoggingStoreObserver,
    MetricsStoreObserver,
)
from kv_store.domain.entities import KVStore
from kv_store.infrastructure.config import Config, get_config
from kv_store.infrastructure.logging import setup_logging
from kv_store.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from kv_store.infrastructure.tracing import setup_tracing
from kv_store.ports.outbound import StoreObserver


@dataclass
class Container:
    """Wires configuration, logging, tracing and metrics into stores."""

    config: Config
    logger: structlog.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry
    stream: TextIO | None = None

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
        stream: TextIO | None = None,
    ) -> Container:
        """Create and initialize the container with all dependencies.

        Args:
            config: Settings to use; the global config when None.
            metrics: Metrics registry; built from config when None.
            stream: Output stream for logs and console diagnostics.
        """
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        obs = config.observability

        logger = setup_logging(obs.log_level, obs.log_format, stream=stream)
        tracer = setup_tracing(obs.otel_service_name, obs.otel_endpoint)

        if metrics is None:
            metrics = setup_metrics(obs.metrics_port) if obs.metrics_enabled else get_metrics()

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            stream=stream,
        )

        logger.info(
            "kv_store_container_initialized",
            diagnostics=list(config.store.diagnostics),
            metrics_enabled=obs.metrics_enabled,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None

    def build_observer(self) -> StoreObserver | None:
        """Assemble the observer chain selected by ``store.diagnostics``.

        Returns:
            None when no diagnostics are enabled, the single observer when
            one is, otherwise a composite in configuration order.
        """
        observers: list[StoreObserver] = []
        for diagnostic in self.config.store.diagnostics:
            if diagnostic == "console":
                observers.append(ConsoleStoreObserver(self.stream))
            elif diagnostic == "log":
                observers.append(
                    LoggingStoreObserver(
                        self.logger.bind(component="store"),
                        log_values=self.config.store.log_values,
                    )
                )
            elif diagnostic == "metrics":
                observers.append(MetricsStoreObserver(self.metrics))

        if not observers:
            return None
        if len(observers) == 1:
            return observers[0]
        return CompositeStoreObserver(*observers)

    def build_store(self, initial: Mapping[str, str] | None = None) -> KVStore:
        """Create a store reporting through the configured observers."""
        return KVStore(observer=self.build_observer(), initial=initial)


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
