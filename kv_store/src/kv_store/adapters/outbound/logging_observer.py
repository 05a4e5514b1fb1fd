"""Structured-logging observer for store outcomes."""

from __future__ import annotations

from typing import Any

import structlog

from kv_store.domain.value_objects import StoreEvent
from kv_store.infrastructure.logging import get_logger


class LoggingStoreObserver:
    """StoreObserver that emits one structlog event per outcome.

    Event names are ``kv_<outcome>`` (e.g. ``kv_inserted``, ``kv_not_found``).
    Mutations log at INFO, reads and misses at DEBUG. Stored values are left
    out unless ``log_values`` is set.
    """

    def __init__(
        self,
        logger: structlog.BoundLogger | None = None,
        log_values: bool = False,
    ) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)
        self._log_values = log_values

    def on_event(self, event: StoreEvent) -> None:
        fields: dict[str, Any] = {
            "operation": event.operation.value,
            "key": event.key,
        }
        if self._log_values:
            if event.value is not None:
                fields["value"] = event.value
            if event.previous is not None:
                fields["previous"] = event.previous

        name = f"kv_{event.outcome.value}"
        if event.outcome.is_mutation:
            self._logger.info(name, **fields)
        else:
            self._logger.debug(name, **fields)
