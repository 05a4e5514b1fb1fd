"""Outbound ports - collaborators the store reports to."""

from kv_store.ports.outbound.store_observer import StoreObserver

__all__ = [
    "StoreObserver",
]
