"""In-memory key-value store.

KVStore maps string keys to string values with exact-match lookup. It does
no I/O of its own: every set/get/remove produces a StoreEvent that is handed
to an optional StoreObserver, which decides whether the outcome is printed,
logged or counted.

Not-found conditions are ordinary ``None`` returns, never exceptions.

Thread Safety:
    None. Callers sharing a store across threads must serialize access.
"""

from __future__ import annotations

from typing import Mapping

from kv_store.domain.entities.enumerator import StoreEnumerator
from kv_store.domain.value_objects import (
    Entry,
    StoreEvent,
    StoreOperation,
    StoreOutcome,
    StoreStats,
)
from kv_store.ports.outbound.store_observer import StoreObserver


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


class KVStore:
    """Mapping from string keys to string values.

    Two stores are equal when they hold the same set of (key, value) pairs;
    the attached observer and the operation counters do not take part in
    equality.

    Example:
        >>> store = KVStore()
        >>> store.set("cat", "meow") is None
        True
        >>> store.get("cat")
        'meow'
        >>> store.remove("cat")
        'meow'
        >>> store.get("cat") is None
        True
    """

    # Mutable with value equality
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        observer: StoreObserver | None = None,
        initial: Mapping[str, str] | None = None,
    ) -> None:
        """Create a store.

        Args:
            observer: Receives one StoreEvent per set/get/remove.
                Events are discarded when None.
            initial: Entries to seed the store with. Seeding emits no events.

        Raises:
            TypeError: If a seeded key or value is not a str.
        """
        self._observer = observer
        self._map: dict[str, str] = {}

        self._inserts = 0
        self._updates = 0
        self._hits = 0
        self._misses = 0
        self._removals = 0
        self._failed_removals = 0

        if initial:
            for key, value in initial.items():
                _require_str("key", key)
                _require_str("value", value)
                self._map[key] = value

    @property
    def observer(self) -> StoreObserver | None:
        """The observer receiving operation outcomes."""
        return self._observer

    def _emit(self, event: StoreEvent) -> None:
        if self._observer is not None:
            self._observer.on_event(event)

    def set(self, key: str, value: str) -> str | None:
        """Insert or overwrite the value for ``key``.

        Args:
            key: Lookup key.
            value: Value to store.

        Returns:
            The replaced value, or None if the key was new.

        Raises:
            TypeError: If key or value is not a str.
        """
        _require_str("key", key)
        _require_str("value", value)

        previous = self._map.get(key)
        self._map[key] = value

        if previous is None:
            self._inserts += 1
            self._emit(StoreEvent(StoreOperation.SET, StoreOutcome.INSERTED, key, value))
        else:
            self._updates += 1
            self._emit(
                StoreEvent(StoreOperation.SET, StoreOutcome.UPDATED, key, value, previous)
            )
        return previous

    def get(self, key: str) -> str | None:
        """Return the value stored for ``key``, or None if absent."""
        _require_str("key", key)

        value = self._map.get(key)
        if value is None:
            self._misses += 1
            self._emit(StoreEvent(StoreOperation.GET, StoreOutcome.NOT_FOUND, key))
        else:
            self._hits += 1
            self._emit(StoreEvent(StoreOperation.GET, StoreOutcome.FOUND, key, value))
        return value

    def remove(self, key: str) -> str | None:
        """Delete ``key`` and return its value, or None if it was absent.

        Removing an absent key leaves the store unchanged.
        """
        _require_str("key", key)

        value = self._map.pop(key, None)
        if value is None:
            self._failed_removals += 1
            self._emit(StoreEvent(StoreOperation.REMOVE, StoreOutcome.ABSENT, key))
        else:
            self._removals += 1
            self._emit(StoreEvent(StoreOperation.REMOVE, StoreOutcome.REMOVED, key, value))
        return value

    def iter(self) -> StoreEnumerator:
        """Snapshot the current entries into a fresh enumerator.

        Order follows the underlying table and is not guaranteed.
        """
        return StoreEnumerator(self.entries())

    def entries(self) -> list[Entry]:
        """Snapshot the current entries as Entry values."""
        return [Entry(key, value) for key, value in self._map.items()]

    def keys(self) -> list[str]:
        """Snapshot the current keys."""
        return list(self._map)

    def items(self) -> list[tuple[str, str]]:
        """Snapshot the current (key, value) pairs."""
        return list(self._map.items())

    def clone(self) -> KVStore:
        """Return an independent store with the same entries and observer.

        Counters start at zero in the clone.
        """
        return KVStore(observer=self._observer, initial=self._map)

    def get_stats(self) -> StoreStats:
        """Return operation counters for monitoring."""
        return StoreStats(
            size=len(self._map),
            inserts=self._inserts,
            updates=self._updates,
            hits=self._hits,
            misses=self._misses,
            removals=self._removals,
            failed_removals=self._failed_removals,
        )

    def __iter__(self) -> StoreEnumerator:
        return self.iter()

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KVStore):
            return NotImplemented
        return self._map == other._map

    def __copy__(self) -> KVStore:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> KVStore:
        # Observers are collaborators, not owned state
        clone = self.clone()
        memo[id(self)] = clone
        return clone

    def __repr__(self) -> str:
        return f"KVStore(size={len(self._map)})"
