"""Value objects for the key-value store domain.

Exports:
    Entries:
        - Entry: A (key, value) pair with ``key: value`` formatting

    Outcomes:
        - StoreOperation: SET, GET, REMOVE
        - StoreOutcome: INSERTED, UPDATED, FOUND, NOT_FOUND, REMOVED, ABSENT
        - StoreEvent: One operation outcome, delivered to observers
        - StoreStats: Counters snapshot
"""

from kv_store.domain.value_objects.entry import (
    Entry,
    StoreEvent,
    StoreOperation,
    StoreOutcome,
)
from kv_store.domain.value_objects.stats import StoreStats

__all__ = [
    "Entry",
    "StoreEvent",
    "StoreOperation",
    "StoreOutcome",
    "StoreStats",
]
