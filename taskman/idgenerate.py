"""Thread-safe sequential identifier generator."""

from __future__ import annotations

import threading


class IdGenerator:
    """Hands out increasing integer identifiers, starting at ``initial_value``."""

    def __init__(self, initial_value: int = 0) -> None:
        self._lock = threading.Lock()
        self._next = initial_value

    def next_id(self) -> int:
        """Return the current identifier and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def __str__(self) -> str:
        return str(self._next)