"""Bounded in-memory execution history."""

import threading
from collections import deque
from typing import Optional

from core.application.dtos import ExecutionHistoryEntry

DEFAULT_HISTORY_CAPACITY = 50


class HistoryStore:
    """
    FIFO buffer of execution history entries.

    Holds at most ``capacity`` entries; appending to a full store evicts the
    oldest entry first. All access goes through one lock.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got: {capacity}")
        self._capacity = capacity
        self._entries: deque[ExecutionHistoryEntry] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, entry: ExecutionHistoryEntry) -> Optional[ExecutionHistoryEntry]:
        """
        Append an entry, evicting the oldest one when full.

        Args:
            entry: Entry to append

        Returns:
            The evicted entry, if any
        """
        with self._lock:
            evicted = None
            if len(self._entries) >= self._capacity:
                evicted = self._entries.popleft()
            self._entries.append(entry)
            return evicted

    def snapshot(self) -> list[ExecutionHistoryEntry]:
        """Return a copy of all entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def last(self) -> Optional[ExecutionHistoryEntry]:
        """Return the most recently appended entry, or None."""
        with self._lock:
            return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
