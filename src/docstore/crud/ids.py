"""Sequential string identifiers for stored documents"""

import threading


class IdGenerator:
    """Hands out "1", "2", "3", ... ; safe to call from several threads."""

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return str(value)
