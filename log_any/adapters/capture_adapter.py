"""
Capture adapter - keeps messages in memory for inspection

Used by tests and by ``log_any.testing.LogCapture``.
"""

from __future__ import annotations

import re
import threading
from typing import Any, Dict, List, Optional, Pattern, Union

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry
from log_any.core.log_level import LogLevel


class CaptureStore:
    """
    Thread-safe list of captured messages.

    Each message is a dict with ``message``, ``level`` (lower-case method
    name), ``category`` and ``extra``. One store is shared by every adapter
    instance it is handed to, so messages from all categories end up in the
    same ordered list.
    """

    def __init__(self):
        self._messages: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        with self._lock:
            self._messages.append(
                {
                    "message": entry.message,
                    "level": entry.level.method_name,
                    "category": entry.category,
                    "extra": entry.extra,
                }
            )

    @property
    def messages(self) -> List[Dict[str, Any]]:
        """Snapshot of captured messages, oldest first."""
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def messages_for(self, category: str) -> List[Dict[str, Any]]:
        return [m for m in self.messages if m["category"] == category]

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        """Check whether any captured message matches ``pattern`` (regex search)."""
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return any(compiled.search(m["message"]) for m in self.messages)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


DEFAULT_STORE = CaptureStore()


class CaptureAdapter(BaseAdapter):
    """Record messages in a CaptureStore instead of writing them anywhere."""

    def __init__(
        self,
        category: str = "",
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
        store: Optional[CaptureStore] = None,
    ):
        """
        Initialize capture adapter.

        Args:
            category: Category served by this instance
            log_level: Minimum enabled level
            store: Store to append to (default: the process-wide store)
        """
        super().__init__(category, log_level)
        self.store = store if store is not None else DEFAULT_STORE

    def write(self, entry: LogEntry) -> None:
        self.store.append(entry)

    @property
    def messages(self) -> List[Dict[str, Any]]:
        return self.store.messages

    def clear(self) -> None:
        self.store.clear()

    def contains(self, pattern: Union[str, Pattern]) -> bool:
        return self.store.contains(pattern)

    def messages_for(self, category: str) -> List[Dict[str, Any]]:
        return self.store.messages_for(category)
