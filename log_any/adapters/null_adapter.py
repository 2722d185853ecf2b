"""Null adapter - the default when nothing is configured"""

from typing import Any, Dict, Optional

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry
from log_any.core.log_level import LogLevel


class NullAdapter(BaseAdapter):
    """Discard every message; every level is disabled."""

    def __init__(self, category: str = "", **params: Any):
        super().__init__(category, log_level=LogLevel.OFF)

    def is_enabled(self, level: LogLevel) -> bool:
        return False

    def structured(
        self,
        level: LogLevel,
        category: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        pass

    def write(self, entry: LogEntry) -> None:
        pass
