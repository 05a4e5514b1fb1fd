"""Entries and operation outcomes for the key-value store.

These value objects describe what the store holds and what happened on each
operation. They carry no behaviour beyond formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Entry:
    """A (key, value) pair held by the store.

    Example:
        >>> Entry("cat", "meow").format()
        'cat: meow'
    """

    key: str
    value: str

    def format(self) -> str:
        """Render the entry as a human-readable ``key: value`` line."""
        return f"{self.key}: {self.value}"

    def __str__(self) -> str:
        return self.format()


class StoreOperation(Enum):
    """Store operations that report an outcome."""

    SET = "set"
    GET = "get"
    REMOVE = "remove"


class StoreOutcome(Enum):
    """Outcome of a single store operation."""

    INSERTED = "inserted"  # set, no previous value
    UPDATED = "updated"  # set, previous value replaced
    FOUND = "found"  # get, key present
    NOT_FOUND = "not_found"  # get, key absent
    REMOVED = "removed"  # remove, key present
    ABSENT = "absent"  # remove, key absent

    @property
    def is_mutation(self) -> bool:
        """True if the outcome changed the store contents."""
        return self in (StoreOutcome.INSERTED, StoreOutcome.UPDATED, StoreOutcome.REMOVED)


@dataclass(frozen=True, slots=True)
class StoreEvent:
    """Record of one store operation, delivered to observers.

    Attributes:
        operation: The operation performed.
        outcome: What the operation did.
        key: The key the operation addressed.
        value: New value (set), found value (get) or removed value (remove).
        previous: Replaced value when ``outcome`` is UPDATED.
    """

    operation: StoreOperation
    outcome: StoreOutcome
    key: str
    value: str | None = None
    previous: str | None = None

    def message(self) -> str:
        """Render the human-readable diagnostic line for this event."""
        if self.outcome is StoreOutcome.INSERTED:
            return "Record successfully set"
        if self.outcome is StoreOutcome.UPDATED:
            return (
                f"Value for key '{self.key}' was updated "
                f"from '{self.previous}' to '{self.value}'"
            )
        if self.outcome is StoreOutcome.FOUND:
            return f"Item with key '{self.key}' found"
        if self.outcome is StoreOutcome.NOT_FOUND:
            return f"Item with key '{self.key}' doesn't exist in store"
        if self.outcome is StoreOutcome.REMOVED:
            return f"Item with key '{self.key}' and value '{self.value}' successfully removed"
        return f"No such item '{self.key}' exists"
