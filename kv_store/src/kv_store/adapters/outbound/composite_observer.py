"""Fan-out observer delivering each outcome to several observers."""

from __future__ import annotations

from kv_store.domain.value_objects import StoreEvent
from kv_store.ports.outbound.store_observer import StoreObserver


class CompositeStoreObserver:
    """StoreObserver that forwards every event to its children in order.

    An exception from one child stops delivery to the ones after it.
    """

    def __init__(self, *observers: StoreObserver) -> None:
        self._observers: tuple[StoreObserver, ...] = observers

    @property
    def observers(self) -> tuple[StoreObserver, ...]:
        return self._observers

    def on_event(self, event: StoreEvent) -> None:
        for observer in self._observers:
            observer.on_event(event)

    def __len__(self) -> int:
        return len(self._observers)
