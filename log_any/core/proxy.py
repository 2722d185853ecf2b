"""
Logger proxy - the object library code logs through

A proxy knows its category and the adapter currently bound to it. The
manager re-points live proxies when the application changes bindings, so a
module-level ``log = get_logger(__name__)`` keeps working after
configuration happens.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from log_any.core.log_level import (
    LogLevel,
    LEVEL_FROM_NAME,
    LOGGING_ALIASES,
    LOGGING_METHODS,
)
from log_any.core.util import Filter, Formatter, default_formatter, join_parts


class Proxy:
    """
    Per-category logging handle.

    Level methods (``trace`` ... ``emergency`` and the aliases ``inform``,
    ``warn``, ``err``, ``crit``, ``fatal``) take message parts that are
    joined with spaces, plus keyword data that reaches the adapter as
    structured ``extra``. Each has an ``...f`` variant that formats its
    arguments and an ``is_...`` predicate.

    A call at a disabled level returns before any string work, so
    ``log.trace(...)`` costs about as much as ``if log.is_trace(): ...``.

    Example:
        log = get_logger("myapp.db")
        log.info("connected to", host)
        log.debugf("query took %.2f ms: %s", elapsed, params)
        if log.is_trace():
            log.trace(expensive_dump())
    """

    def __init__(
        self,
        adapter: Any,
        category: str = "",
        filter: Optional[Filter] = None,
        formatter: Optional[Formatter] = None,
        prefix: str = "",
    ):
        """
        Initialize proxy.

        Args:
            adapter: Adapter receiving this proxy's messages
            category: Category of this proxy
            filter: ``filter(category, level, message)`` returning the
                    message to log, or None/"" to drop it
            formatter: ``formatter(category, level, fmt, *args)`` used by
                    the ``...f`` methods (default: %-style formatting)
            prefix: Text prepended to every message
        """
        if filter is not None and not callable(filter):
            raise TypeError("filter must be callable")
        if formatter is not None and not callable(formatter):
            raise TypeError("formatter must be callable")

        self._adapter = adapter
        self._category = category
        self._filter = filter
        self._formatter = formatter or default_formatter
        self._prefix = prefix or ""

    @property
    def category(self) -> str:
        return self._category

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def prefix(self) -> str:
        return self._prefix

    def _rebind(self, adapter: Any) -> None:
        """Point this proxy at a new adapter (called by the manager)."""
        self._adapter = adapter

    def _emit(self, level: LogLevel, message: Optional[str], extra: Dict[str, Any]) -> None:
        if not message:
            return
        if self._filter is not None:
            message = self._filter(self._category, level, message)
            if not message:
                return
        if self._prefix:
            message = self._prefix + message
        self._adapter.structured(level, self._category, message, extra)

    def log(self, level: Union[LogLevel, int, str], *parts: Any, **extra: Any) -> None:
        """Log at a level given by name, alias, number or LogLevel."""
        level = LogLevel.message_level(level)
        if not self._adapter.is_enabled(level):
            return
        self._emit(level, join_parts(parts), extra)

    def logf(self, level: Union[LogLevel, int, str], fmt: Any, *args: Any, **extra: Any) -> None:
        """Formatted variant of log()."""
        level = LogLevel.message_level(level)
        if not self._adapter.is_enabled(level):
            return
        self._emit(level, self._formatter(self._category, level, fmt, *args), extra)

    def is_enabled(self, level: Union[LogLevel, int, str]) -> bool:
        return self._adapter.is_enabled(LogLevel.message_level(level))

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(category={self._category!r}, adapter={self._adapter!r})"


class NullProxy(Proxy):
    """
    Proxy that never logs, whatever adapter is bound.

    Every logging method is a no-op and every detection method returns
    False. Selected with ``get_logger(proxy_class="Null")``.
    """

    def log(self, level, *parts, **extra) -> None:
        pass

    def logf(self, level, fmt, *args, **extra) -> None:
        pass

    def is_enabled(self, level) -> bool:
        return False


def _make_log_method(level: LogLevel):
    def method(self, *parts: Any, **extra: Any) -> None:
        if not self._adapter.is_enabled(level):
            return
        self._emit(level, join_parts(parts), extra)

    method.__doc__ = f"Log message parts at {level.name} level."
    return method


def _make_logf_method(level: LogLevel):
    def method(self, fmt: Any, *args: Any, **extra: Any) -> None:
        if not self._adapter.is_enabled(level):
            return
        self._emit(level, self._formatter(self._category, level, fmt, *args), extra)

    method.__doc__ = f"Format and log a message at {level.name} level."
    return method


def _make_detection_method(level: LogLevel):
    def method(self) -> bool:
        return self._adapter.is_enabled(level)

    method.__doc__ = f"Check whether {level.name} is enabled."
    return method


def _noop(self, *args: Any, **kwargs: Any) -> None:
    pass


def _never(self) -> bool:
    return False


for _name in LOGGING_METHODS + list(LOGGING_ALIASES):
    _level = LEVEL_FROM_NAME[_name]
    for _method_name, _method in (
        (_name, _make_log_method(_level)),
        (f"{_name}f", _make_logf_method(_level)),
        (f"is_{_name}", _make_detection_method(_level)),
    ):
        _method.__name__ = _method_name
        setattr(Proxy, _method_name, _method)

    setattr(NullProxy, _name, _noop)
    setattr(NullProxy, f"{_name}f", _noop)
    setattr(NullProxy, f"is_{_name}", _never)

del _name, _level, _method_name, _method
