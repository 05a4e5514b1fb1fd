"""Console observer writing plain-text operation outcomes.

This adapter reproduces the inline console diagnostics of a bare store: one
human-readable line per set/get/remove. The text is for people, not parsers.
"""

from __future__ import annotations

import sys
from typing import TextIO

from kv_store.domain.value_objects import StoreEvent


class ConsoleStoreObserver:
    """StoreObserver that writes ``event.message()`` lines to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the observer.

        Args:
            stream: Destination stream. When None, ``sys.stdout`` is looked
                up on every write so redirection (and pytest capture) works.
        """
        self._stream = stream

    def on_event(self, event: StoreEvent) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(event.message() + "\n")
