"""Store Observer port for operation outcome reporting.

The store reports every set/get/remove outcome through this port instead of
printing. Adapters decide what an outcome turns into: a console line, a
structured log event, a metric increment.

Exceptions raised by an observer propagate to the caller of the store
operation. The store has already applied the operation by then.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from kv_store.domain.value_objects import StoreEvent


class StoreObserver(Protocol):
    """Protocol for receiving store operation outcomes.

    Example:
        class Recorder:
            def __init__(self) -> None:
                self.events: list[StoreEvent] = []

            def on_event(self, event: StoreEvent) -> None:
                self.events.append(event)

        store = KVStore(observer=Recorder())
    """

    @abstractmethod
    def on_event(self, event: StoreEvent) -> None:
        """Handle one operation outcome.

        Args:
            event: The outcome just produced by the store.
        """
        ...
