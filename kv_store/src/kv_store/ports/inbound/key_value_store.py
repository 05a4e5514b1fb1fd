"""Key-Value Store port.

This inbound port defines the contract callers program against. KVStore is
the in-memory implementation.

Key concepts:
- Missing keys are reported as ``None``, never raised
- Iteration is a snapshot: later mutations are not visible
- Entry order is unspecified; compare enumerations as sets
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

from kv_store.domain.value_objects import StoreStats

if TYPE_CHECKING:
    from kv_store.domain.entities import StoreEnumerator


class KeyValueStore(Protocol):
    """Protocol for exact-match string key-value storage.

    Thread Safety:
        Not required. Implementations may assume a single caller.
    """

    @abstractmethod
    def set(self, key: str, value: str) -> str | None:
        """Insert or overwrite a value.

        Returns:
            The replaced value, or None if the key was new.
        """
        ...

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None if absent. Never mutates."""
        ...

    @abstractmethod
    def remove(self, key: str) -> str | None:
        """Delete ``key``.

        Returns:
            The removed value, or None if the key was absent.
        """
        ...

    @abstractmethod
    def iter(self) -> StoreEnumerator:
        """Return a snapshot enumerator of ``key: value`` strings."""
        ...

    @abstractmethod
    def get_stats(self) -> StoreStats:
        """Return operation counters for monitoring."""
        ...
