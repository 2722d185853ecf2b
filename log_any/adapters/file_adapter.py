"""File adapter"""

import threading
from pathlib import Path
from typing import Dict, Union

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry
from log_any.core.log_level import LogLevel
from log_any.formatters.text_formatter import TextFormatter


class _SharedFile:
    """Open file shared by every FileAdapter writing to the same path."""

    def __init__(self, path: Path, mode: str, encoding: str):
        path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self.handle = open(path, mode, encoding=encoding)
        self.users = 0
        self.lock = threading.Lock()

    def write_line(self, line: str) -> None:
        with self.lock:
            self.handle.write(line + "\n")
            self.handle.flush()

    def flush(self) -> None:
        with self.lock:
            self.handle.flush()


_open_files: Dict[Path, _SharedFile] = {}
_open_files_lock = threading.Lock()


def _acquire(path: Path, mode: str, encoding: str) -> _SharedFile:
    # Only the first opener's mode applies, so "w" truncates once
    with _open_files_lock:
        shared = _open_files.get(path)
        if shared is None:
            shared = _SharedFile(path, mode, encoding)
            _open_files[path] = shared
        shared.users += 1
        return shared


def _release(shared: _SharedFile) -> None:
    with _open_files_lock:
        shared.users -= 1
        if shared.users == 0:
            _open_files.pop(shared.path, None)
            shared.handle.close()


class FileAdapter(BaseAdapter):
    """
    Append log messages to a file, one line each.

    Adapters writing to the same path (one per category under a binding)
    share a single open file; it is closed when the last of them closes.
    """

    def __init__(
        self,
        path: Union[str, Path],
        category: str = "",
        log_level: Union[LogLevel, int, str] = LogLevel.TRACE,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter=None,
    ):
        """
        Initialize file adapter.

        Args:
            path: Path to log file
            category: Category served by this instance
            log_level: Minimum enabled level
            mode: File open mode (default: 'a' for append); ignored when the
                  path is already open
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: "[local time] message")
        """
        super().__init__(category, log_level)
        self.path = Path(path)
        self.mode = mode
        self.encoding = encoding
        self.formatter = formatter or TextFormatter()
        self._file = _acquire(self.path.resolve(), mode, encoding)

    def write(self, entry: LogEntry):
        """Write log entry to file."""
        if self._file:
            self._file.write_line(self.formatter.format(entry))

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Release the file; the last adapter on a path closes it."""
        if self._file:
            _release(self._file)
            self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"FileAdapter(path='{self.path}', log_level={self.log_level.name})"
