"""
Helpers for testing code that logs through log_any

Example:
    from log_any.testing import LogCapture

    with LogCapture() as logs:
        run_job()
    logs.assert_contains(r"job \\d+ finished")
    logs.assert_level("warning", "retrying")
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Pattern, Union

from log_any.adapters.capture_adapter import CaptureAdapter, CaptureStore
from log_any.core.binding import AdapterBinding, Selector
from log_any.core.log_level import LogLevel
from log_any.core.manager import Manager, get_manager

PatternLike = Union[str, Pattern]


def _compile(pattern: PatternLike) -> Pattern:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


class LogCapture:
    """
    Capture messages for a category selector while the block runs.

    The capture is installed as a manager override, so it sees messages
    even for categories the application has bound elsewhere.

    Messages are dicts with ``message``, ``level`` (lower-case level name),
    ``category`` and ``extra``.
    """

    def __init__(
        self,
        category: Selector = None,
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
        manager: Optional[Manager] = None,
    ):
        """
        Initialize capture.

        Args:
            category: Selector to capture (default: every category)
            log_level: Minimum captured level
            manager: Manager to bind on (default: the process-wide one)
        """
        self.category = category
        self.log_level = LogLevel.coerce(log_level)
        self.store = CaptureStore()
        self._manager = manager
        self._binding: Optional[AdapterBinding] = None

    def start(self) -> "LogCapture":
        if self._binding is not None:
            raise RuntimeError("LogCapture already started")
        manager = self._manager or get_manager()
        self._binding = manager.set_override(
            CaptureAdapter,
            self.category,
            log_level=self.log_level,
            store=self.store,
        )
        self._manager = manager
        return self

    def stop(self) -> None:
        if self._binding is not None:
            self._manager.remove_adapter(self._binding)
            self._binding = None

    def __enter__(self) -> "LogCapture":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @property
    def messages(self) -> List[Dict[str, Any]]:
        return self.store.messages

    @property
    def texts(self) -> List[str]:
        return [m["message"] for m in self.store.messages]

    def clear(self) -> None:
        self.store.clear()

    def _describe(self) -> str:
        lines = [f"  [{m['category']}] {m['level']}: {m['message']}" for m in self.messages]
        return "\n".join(lines) if lines else "  (no messages)"

    # Assertions

    def assert_contains(self, pattern: PatternLike) -> None:
        """Fail unless some message matches ``pattern``."""
        compiled = _compile(pattern)
        if not any(compiled.search(text) for text in self.texts):
            raise AssertionError(
                f"No message matches {compiled.pattern!r}; captured:\n{self._describe()}"
            )

    def assert_not_contains(self, pattern: PatternLike) -> None:
        """Fail if any message matches ``pattern``."""
        compiled = _compile(pattern)
        matching = [text for text in self.texts if compiled.search(text)]
        if matching:
            raise AssertionError(f"Unexpected messages matching {compiled.pattern!r}: {matching}")

    def assert_contains_only(self, pattern: PatternLike) -> None:
        """Fail unless exactly one message was captured and it matches."""
        texts = self.texts
        if len(texts) != 1 or not _compile(pattern).search(texts[0]):
            raise AssertionError(
                f"Expected a single message matching {_compile(pattern).pattern!r}; "
                f"captured:\n{self._describe()}"
            )

    def assert_empty(self) -> None:
        """Fail if anything was captured."""
        if self.messages:
            raise AssertionError(f"Expected no messages; captured:\n{self._describe()}")

    def assert_category_contains(self, category: str, pattern: PatternLike) -> None:
        """Fail unless a message from ``category`` matches ``pattern``."""
        compiled = _compile(pattern)
        if not any(compiled.search(m["message"]) for m in self.store.messages_for(category)):
            raise AssertionError(
                f"No message in category {category!r} matches {compiled.pattern!r}; "
                f"captured:\n{self._describe()}"
            )

    def assert_level(self, level: Union[LogLevel, int, str], pattern: PatternLike) -> None:
        """Fail unless a message at ``level`` matches ``pattern``."""
        name = LogLevel.coerce(level).method_name
        compiled = _compile(pattern)
        if not any(
            m["level"] == name and compiled.search(m["message"]) for m in self.messages
        ):
            raise AssertionError(
                f"No {name} message matches {compiled.pattern!r}; "
                f"captured:\n{self._describe()}"
            )

    def __len__(self) -> int:
        return len(self.store)

    def __repr__(self) -> str:
        """String representation."""
        return f"LogCapture(category={self.category!r}, messages={len(self.store)})"
