"""Snapshot enumerator over store entries.

The enumerator materializes every entry as a ``key: value`` string when it
is created and then walks that private list with a cursor. Later mutations
of the store are never visible through it.

State machine:
    index starts at 0; each successful advance moves it by one; once it
    reaches ``len(snapshot)`` it stays there and every further ``next()``
    returns None.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from kv_store.domain.value_objects import Entry


class StoreEnumerator(Iterator[str]):
    """One-shot, forward-only sequence of formatted store entries.

    Example:
        enumerator = store.iter()
        while (line := enumerator.next()) is not None:
            print(line)
    """

    def __init__(self, entries: Iterable[Entry]) -> None:
        """Snapshot the given entries.

        Args:
            entries: Entries to format; consumed immediately.
        """
        self._lines: list[str] = [entry.format() for entry in entries]
        self._index = 0

    @property
    def index(self) -> int:
        """Cursor position (number of entries already returned)."""
        return self._index

    @property
    def remaining(self) -> int:
        """Number of entries not yet returned."""
        return len(self._lines) - self._index

    @property
    def exhausted(self) -> bool:
        """True once every entry has been returned."""
        return self._index >= len(self._lines)

    def next(self) -> str | None:
        """Return the next entry and advance, or None when exhausted."""
        if self._index < len(self._lines):
            line = self._lines[self._index]
            self._index += 1
            return line
        return None

    def __next__(self) -> str:
        line = self.next()
        if line is None:
            raise StopIteration
        return line

    def __iter__(self) -> StoreEnumerator:
        return self

    def __len__(self) -> int:
        """Snapshot length, independent of the cursor."""
        return len(self._lines)

    def __repr__(self) -> str:
        return f"StoreEnumerator(index={self._index}, length={len(self._lines)})"
