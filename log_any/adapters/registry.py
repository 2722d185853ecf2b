"""
Adapter name resolution

Applications name adapters the short way (``"File"``) or point at their own
class (``"+myapp.logging.SlackAdapter"``). Third-party packages can publish
adapters under the ``log_any.adapters`` entry point group.
"""

from __future__ import annotations

import importlib
import threading
from importlib.metadata import entry_points
from typing import Dict, Type

from log_any.adapters.base import BaseAdapter
from log_any.adapters.capture_adapter import CaptureAdapter
from log_any.adapters.file_adapter import FileAdapter
from log_any.adapters.null_adapter import NullAdapter
from log_any.adapters.stdlib_adapter import StdlibAdapter
from log_any.adapters.stream_adapter import StderrAdapter, StdoutAdapter

ENTRY_POINT_GROUP = "log_any.adapters"

_BUILTIN_ADAPTERS: Dict[str, type] = {
    "Null": NullAdapter,
    "File": FileAdapter,
    "Stderr": StderrAdapter,
    "Stdout": StdoutAdapter,
    "Capture": CaptureAdapter,
    "Test": CaptureAdapter,
    "Stdlib": StdlibAdapter,
}

_registered: Dict[str, type] = {}
_lock = threading.Lock()


def register_adapter(name: str, adapter_class: type) -> None:
    """
    Make ``adapter_class`` available under ``name``.

    Raises:
        ValueError: If the name is empty or starts with '+'
        TypeError: If adapter_class is not a class
    """
    if not name or name.startswith("+"):
        raise ValueError(f"Invalid adapter name: {name!r}")
    if not isinstance(adapter_class, type):
        raise TypeError("adapter_class must be a class")
    with _lock:
        _registered[name] = adapter_class


def unregister_adapter(name: str) -> None:
    """Forget an adapter registered with register_adapter."""
    with _lock:
        _registered.pop(name, None)


def import_object(path: str):
    """
    Import ``pkg.module.Name`` or ``pkg.module:Name``.

    Raises:
        ImportError: If the module or attribute cannot be found
    """
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ImportError(f"Not an importable object path: {path!r}")

    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError:
        raise ImportError(f"Module {module_name!r} has no attribute {attr!r}") from None


def _from_entry_points(name: str):
    eps = entry_points()
    if hasattr(eps, "select"):
        candidates = eps.select(group=ENTRY_POINT_GROUP, name=name)
    else:
        candidates = [ep for ep in eps.get(ENTRY_POINT_GROUP, []) if ep.name == name]
    for ep in candidates:
        return ep.load()
    return None


def resolve_adapter_class(name: str) -> Type[BaseAdapter]:
    """
    Turn an adapter name into a class.

    Lookup order: ``+dotted.path``, registered names, built-in names,
    installed entry points.

    Raises:
        ValueError: If no adapter is known under ``name``
        ImportError: If a ``+`` path cannot be imported
    """
    if name.startswith("+"):
        return import_object(name[1:])

    with _lock:
        adapter_class = _registered.get(name)
    if adapter_class is not None:
        return adapter_class

    adapter_class = _BUILTIN_ADAPTERS.get(name)
    if adapter_class is not None:
        return adapter_class

    adapter_class = _from_entry_points(name)
    if adapter_class is not None:
        return adapter_class

    raise ValueError(f"Unknown adapter: {name!r}")


def available_adapters() -> Dict[str, type]:
    """Built-in and registered adapters by name (entry points excluded)."""
    with _lock:
        result = dict(_BUILTIN_ADAPTERS)
        result.update(_registered)
    return result
