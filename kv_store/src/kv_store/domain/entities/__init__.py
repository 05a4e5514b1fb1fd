"""Domain entities: the store and its snapshot enumerator."""

from kv_store.domain.entities.enumerator import StoreEnumerator
from kv_store.domain.entities.store import KVStore

__all__ = [
    "KVStore",
    "StoreEnumerator",
]
