"""Operation statistics for store monitoring."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreStats:
    """Point-in-time counters for a store."""

    size: int  # Entries currently held
    inserts: int  # set() on a new key
    updates: int  # set() replacing a value
    hits: int  # get() on a present key
    misses: int  # get() on an absent key
    removals: int  # remove() on a present key
    failed_removals: int  # remove() on an absent key

    @property
    def hit_ratio(self) -> float:
        """Fraction of get() calls that found their key."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
