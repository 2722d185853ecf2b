"""
Base adapter interface

Adapters are the consuming side of the facade: a proxy hands every message
to the adapter bound to its category, and the adapter decides where it goes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from log_any.core.log_entry import LogEntry
from log_any.core.log_level import (
    LogLevel,
    LEVEL_FROM_NAME,
    LOGGING_ALIASES,
    LOGGING_METHODS,
)


class BaseAdapter(ABC):
    """
    Abstract base class for log adapters.

    Subclasses implement ``write(entry)`` and usually ``is_enabled``.
    One instance is created per category by the manager, so ``category`` is
    the category this instance serves; ``structured`` also receives the
    category explicitly for adapters shared between categories.

    Every level method (``trace`` ... ``emergency`` plus aliases) and every
    detection method (``is_trace`` ...) is generated from the level tables.
    """

    def __init__(
        self,
        category: str = "",
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
    ):
        """
        Initialize adapter.

        Args:
            category: Category served by this instance
            log_level: Minimum enabled level (name, alias, number or LogLevel)
        """
        self.category = category
        self.log_level = LogLevel.coerce(log_level)

    @abstractmethod
    def write(self, entry: LogEntry) -> None:
        """
        Deliver a log entry.

        Args:
            entry: The log entry to write
        """
        pass

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether messages at ``level`` would be written."""
        return level >= self.log_level

    def structured(
        self,
        level: LogLevel,
        category: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Receive one message from a proxy.

        Args:
            level: Message level
            category: Category of the proxy that produced the message
            message: Rendered message text
            extra: Structured data attached by the caller
        """
        if not self.is_enabled(level):
            return
        self.write(
            LogEntry(
                level=level,
                message=message,
                category=category,
                extra=dict(extra) if extra else {},
            )
        )

    def log(self, level: Union[LogLevel, int, str], message: str, **extra: Any) -> None:
        """Log ``message`` at ``level`` under this adapter's category."""
        self.structured(LogLevel.message_level(level), self.category, message, extra)

    def flush(self) -> None:
        """Flush buffered output (no-op by default)."""

    def close(self) -> None:
        """Release resources (no-op by default)."""

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{type(self).__name__}(category={self.category!r}, "
            f"log_level={self.log_level.name})"
        )


def _make_log_method(level: LogLevel):
    def method(self, message: str, **extra: Any) -> None:
        self.structured(level, self.category, message, extra)

    method.__name__ = level.method_name
    method.__doc__ = f"Log a message at {level.name} level."
    return method


def _make_detection_method(level: LogLevel):
    def method(self) -> bool:
        return self.is_enabled(level)

    method.__name__ = f"is_{level.method_name}"
    method.__doc__ = f"Check whether {level.name} is enabled."
    return method


for _name in LOGGING_METHODS + list(LOGGING_ALIASES):
    _level = LEVEL_FROM_NAME[_name]
    setattr(BaseAdapter, _name, _make_log_method(_level))
    setattr(BaseAdapter, f"is_{_name}", _make_detection_method(_level))

del _name, _level
