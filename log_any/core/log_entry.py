"""
Log entry data structure

A single message on its way from a proxy to an adapter.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any
import threading

from log_any.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything an adapter may want to record about one message.
    ``extra`` holds the structured keyword data passed by the caller.
    """

    level: LogLevel
    message: str
    category: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "category": self.category,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "extra": self.extra,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel[data["level"]],
            message=data["message"],
            category=data.get("category", ""),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            thread_id=data.get("thread_id", 0),
            thread_name=data.get("thread_name", ""),
            extra=data.get("extra", {}),
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:9}] "
            f"[{self.category}] "
            f"{self.message}"
        )
