"""
log_any - a logging facade that brings loggers and listeners together

Libraries produce logs through a proxy:

    from log_any import get_logger
    log = get_logger(__name__)
    log.info("connected")
    log.debugf("arguments are: %s", args)

Applications decide where logs go:

    import log_any
    log_any.set_adapter("Stderr", log_level="info")
    log_any.set_adapter("File", category="myapp.db", path="logs/db.log")

Nothing is written until an application binds an adapter.
"""

__version__ = "1.0.0"

import sys
from typing import Any, Optional, Union

from log_any.core.log_level import LogLevel
from log_any.core.log_entry import LogEntry
from log_any.core.config import FacadeConfig
from log_any.core.proxy import Proxy, NullProxy
from log_any.core.binding import AdapterBinding
from log_any.core.manager import Manager, get_manager, reset_manager

# Import submodules (not all classes by default)
from log_any import adapters
from log_any import formatters


def get_logger(
    category: Optional[str] = None,
    default_adapter: Any = None,
    proxy_class: Union[str, type, None] = None,
    **proxy_params: Any,
) -> Proxy:
    """
    Get a logger for a category.

    Args:
        category: Category name (default: the calling module's ``__name__``)
        default_adapter: Adapter used for this category until the
                  application binds one, e.g. ``"Stderr"`` or
                  ``("File", {"path": "app.log"})``
        proxy_class: ``"Null"``, a short proxy name, ``"+pkg.mod.Class"``
                  or a class
        proxy_params: Passed to the proxy (filter, formatter, prefix)

    Returns:
        Proxy for the category
    """
    if category is None:
        category = sys._getframe(1).f_globals.get("__name__", "")
    return get_manager().get_logger(
        category,
        default_adapter=default_adapter,
        proxy_class=proxy_class,
        **proxy_params,
    )


def set_adapter(adapter: Any, category: Any = None, **params: Any) -> AdapterBinding:
    """Bind an adapter on the process-wide manager (see Manager.set_adapter)."""
    return get_manager().set_adapter(adapter, category, **params)


def remove_adapter(binding: AdapterBinding) -> bool:
    """Remove a binding from the process-wide manager."""
    return get_manager().remove_adapter(binding)


def temporary_adapter(adapter: Any, category: Any = None, **params: Any):
    """Context manager binding an adapter for the duration of a block."""
    return get_manager().temporary(adapter, category, **params)


__all__ = [
    "get_logger",
    "set_adapter",
    "remove_adapter",
    "temporary_adapter",
    "get_manager",
    "reset_manager",
    "Manager",
    "Proxy",
    "NullProxy",
    "AdapterBinding",
    "FacadeConfig",
    "LogEntry",
    "LogLevel",
    "adapters",
    "formatters",
]
