"""Inbound ports - API contracts for the key-value store."""

from kv_store.ports.inbound.key_value_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
