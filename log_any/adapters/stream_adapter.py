"""Stream adapters for stderr and stdout with optional ANSI colors"""

import sys
from typing import Union

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry
from log_any.core.log_level import LogLevel
from log_any.formatters.text_formatter import TextFormatter


class StreamAdapter(BaseAdapter):
    """Write log messages to a text stream."""

    def __init__(
        self,
        category: str = "",
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
        stream=None,
        formatter=None,
        colored: bool = False,
    ):
        """
        Initialize stream adapter.

        Args:
            category: Category served by this instance
            log_level: Minimum enabled level
            stream: Output stream (default: sys.stderr)
            formatter: Log formatter (default: message only)
            colored: Wrap lines in the level's ANSI color
        """
        super().__init__(category, log_level)
        self._stream = stream
        self.formatter = formatter or TextFormatter("{message}")
        self.colored = colored

    @property
    def stream(self):
        # Resolved late so that pytest's capsys and redirect_stdout see output
        return self._stream or self._default_stream()

    def _default_stream(self):
        return sys.stderr

    def write(self, entry: LogEntry):
        """Write log entry to the stream."""
        msg = self.formatter.format(entry)

        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        stream = self.stream
        stream.write(msg + "\n")
        stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()


class StderrAdapter(StreamAdapter):
    """Write log messages to standard error."""

    def _default_stream(self):
        return sys.stderr


class StdoutAdapter(StreamAdapter):
    """Write log messages to standard output."""

    def _default_stream(self):
        return sys.stdout
