"""
Adapter forwarding to Python's standard logging module

Levels keep their numeric values; the ones the logging module does not know
(TRACE, NOTICE, ALERT, EMERGENCY) get registered level names.
"""

import logging
import os
import sys
from typing import Any, Dict, Optional

from log_any.adapters.base import BaseAdapter
from log_any.core.log_entry import LogEntry
from log_any.core.log_level import LogLevel

_EXTRA_LEVEL_NAMES = (
    LogLevel.TRACE,
    LogLevel.NOTICE,
    LogLevel.ALERT,
    LogLevel.EMERGENCY,
)

# Keys Logger.makeRecord refuses in ``extra``
RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

RENAMED_KEY_PREFIX = "log_any_"

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def register_level_names() -> None:
    """Teach the logging module the names of the extra levels."""
    for level in _EXTRA_LEVEL_NAMES:
        if logging.getLevelName(int(level)) != level.name:
            logging.addLevelName(int(level), level.name)


def record_extra(extra: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Make keyword data safe to pass as ``Logger.log(extra=...)``.

    Keys that clash with LogRecord attributes (``name``, ``msg``,
    ``lineno`` ...) get the ``log_any_`` prefix.
    """
    if not extra:
        return None
    return {
        (RENAMED_KEY_PREFIX + key if key in RESERVED_RECORD_KEYS else key): value
        for key, value in extra.items()
    }


def _caller_stacklevel() -> int:
    """stacklevel pointing a record at the first frame outside log_any."""
    frame = sys._getframe(1)
    stacklevel = 1
    while frame.f_back is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
        frame = frame.f_back
        stacklevel += 1
    return stacklevel


class StdlibAdapter(BaseAdapter):
    """
    Forward messages to ``logging.getLogger(logger_name or category)``.

    Level detection is delegated to ``Logger.isEnabledFor`` so the logging
    configuration (levels, handlers, propagation) stays in charge. Keyword
    data passed to the proxy becomes the record's ``extra``; keys that name
    LogRecord attributes are renamed with a ``log_any_`` prefix.
    """

    def __init__(self, category: str = "", logger_name: Optional[str] = None):
        super().__init__(category)
        register_level_names()
        self.logger = logging.getLogger(logger_name or category or None)

    def is_enabled(self, level: LogLevel) -> bool:
        return self.logger.isEnabledFor(int(level))

    def structured(
        self,
        level: LogLevel,
        category: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self.logger.isEnabledFor(int(level)):
            return
        self.logger.log(
            int(level),
            message,
            extra=record_extra(extra),
            stacklevel=_caller_stacklevel(),
        )

    def write(self, entry: LogEntry) -> None:
        self.logger.log(
            int(entry.level),
            entry.message,
            extra=record_extra(entry.extra),
            stacklevel=_caller_stacklevel(),
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"StdlibAdapter(logger={self.logger.name!r})"
