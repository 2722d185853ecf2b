"""
JSON formatter for structured logging

Formats log entries as JSON objects, one per line
"""

import json
from log_any.core.log_entry import LogEntry
from log_any.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Keyword data passed to a proxy call (``log.info("saved", user=7)``)
    appears under ``extra``.
    """

    def __init__(
        self,
        include_extra: bool = True,
        include_thread_info: bool = False,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_extra: Include extra fields in output
            include_thread_info: Include thread_id and thread_name
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
        """
        self.include_extra = include_extra
        self.include_thread_info = include_thread_info
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": entry.timestamp.isoformat(),
            "level": entry.level.name,
            "category": entry.category,
            "message": entry.message,
        }

        if self.include_thread_info:
            log_dict["thread_id"] = entry.thread_id
            log_dict["thread_name"] = entry.thread_name

        if self.include_extra and entry.extra:
            log_dict["extra"] = entry.extra

        # Values json can't encode fall back to repr
        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=repr,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
