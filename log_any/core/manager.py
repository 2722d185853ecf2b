"""
Adapter manager - the process-wide category registry

Maps categories to adapters. Library code only ever sees proxies; the
application changes bindings here and every live proxy follows.
"""

from __future__ import annotations

import atexit
import sys
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Union
from weakref import WeakSet

from log_any.adapters.registry import import_object
from log_any.core import proxy as proxy_module
from log_any.core.binding import AdapterBinding, Selector
from log_any.core.binding_builder import BindingBuilder
from log_any.core.config import FacadeConfig
from log_any.core.proxy import Proxy


class Manager:
    """
    Registry of adapter bindings.

    Resolution order for a category:
        0. overrides (``set_override``), matched like bindings below and
           checked before them
        1. category bindings for the category itself, then for each ancestor
           (``a.b.c`` -> ``a.b`` -> ``a``), newest binding first
        2. regex bindings, newest first
        3. bindings for every category, newest first
        4. the default set for the category (or an ancestor) by
           ``set_default``
        5. the configured global default (Null unless configured)

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        manager = get_manager()
        manager.set_adapter("Stderr", log_level="info")
        manager.set_adapter("File", category="myapp.db", path="db.log")

        with manager.temporary("Capture", category="myapp"):
            ...
    """

    def __init__(self, config: Optional[FacadeConfig] = None):
        """Initialize manager."""
        self._config = config or FacadeConfig.from_env()
        self._bindings: List[AdapterBinding] = []
        self._overrides: List[AdapterBinding] = []
        self._defaults: Dict[str, AdapterBinding] = {}
        self._default_binding = self._make_default_binding(self._config)
        self._proxies: WeakSet = WeakSet()
        self._lock = threading.RLock()

    @staticmethod
    def _make_default_binding(config: FacadeConfig) -> AdapterBinding:
        return AdapterBinding(
            selector=None,
            adapter=config.default_adapter,
            params=dict(config.default_adapter_params),
            name="default",
        )

    @property
    def config(self) -> FacadeConfig:
        return self._config

    def configure(self, config: FacadeConfig) -> None:
        """
        Replace the configuration.

        The old default adapter is closed and live proxies are re-pointed.
        """
        default_binding = self._make_default_binding(config)
        with self._lock:
            old = self._default_binding
            self._config = config
            self._default_binding = default_binding
            self._refresh_proxies()
        self._report(old.close())

    # Bindings

    def set_adapter(
        self,
        adapter: Any,
        category: Selector = None,
        **params: Any,
    ) -> AdapterBinding:
        """
        Bind an adapter to a category selector.

        Args:
            adapter: Adapter name (``"File"``, ``"+pkg.mod.Class"``),
                     class, or instance
            category: None for all categories, a category name (covers its
                      descendants too), or a compiled regex
            params: Adapter constructor params

        Returns:
            The binding, usable with ``remove_adapter``

        Raises:
            ValueError: If the adapter name is unknown
            TypeError: If adapter or category has an unsupported type
        """
        binding = AdapterBinding(selector=category, adapter=adapter, params=params)
        self.add_binding(binding)
        return binding

    def add_binding(self, binding: AdapterBinding) -> None:
        """Register a prepared binding; it takes precedence over older ones."""
        with self._lock:
            self._bindings.append(binding)
            self._refresh_proxies()

    def remove_adapter(self, binding: AdapterBinding) -> bool:
        """
        Remove a binding or override.

        Proxies served by it fall back to the next match, then the adapters
        it created are closed.

        Returns:
            True if the binding was removed, False if not found
        """
        with self._lock:
            for registry in (self._overrides, self._bindings):
                if any(existing is binding for existing in registry):
                    registry[:] = [b for b in registry if b is not binding]
                    break
            else:
                return False
            self._refresh_proxies()
        self._report(binding.close())
        return True

    def clear(self) -> None:
        """Remove every binding, override and per-category default."""
        with self._lock:
            removed = self._overrides + self._bindings + list(self._defaults.values())
            self._overrides = []
            self._bindings = []
            self._defaults = {}
            self._refresh_proxies()
        for binding in removed:
            self._report(binding.close())

    def set_override(
        self,
        adapter: Any,
        category: Selector = None,
        **params: Any,
    ) -> AdapterBinding:
        """
        Bind an adapter ahead of every regular binding.

        Used by test capture: an override for every category wins over the
        application's category bindings. Removed with ``remove_adapter``.
        """
        binding = AdapterBinding(
            selector=category,
            adapter=adapter,
            params=params,
        )
        binding.name = f"override:{binding.name}"
        with self._lock:
            self._overrides.append(binding)
            self._refresh_proxies()
        return binding

    def set_default(self, category: str, adapter: Any, **params: Any) -> AdapterBinding:
        """
        Set the adapter used for ``category`` (and descendants) when no
        binding matches.

        A later call for the same category replaces the earlier default.
        """
        binding = AdapterBinding(
            selector=category,
            adapter=adapter,
            params=params,
            name=f"default@{category}",
        )
        with self._lock:
            old = self._defaults.get(category)
            self._defaults[category] = binding
            self._refresh_proxies()
        if old is not None:
            self._report(old.close())
        return binding

    @contextmanager
    def temporary(
        self,
        adapter: Any,
        category: Selector = None,
        **params: Any,
    ) -> Iterator[AdapterBinding]:
        """
        Bind an adapter for the duration of a ``with`` block.

        Example:
            with manager.temporary("Capture", category="myapp") as binding:
                run()
            messages = binding.adapter_for("myapp").messages
        """
        binding = self.set_adapter(adapter, category, **params)
        try:
            yield binding
        finally:
            self.remove_adapter(binding)

    def bind(self, name: Optional[str] = None) -> BindingBuilder:
        """
        Start building a binding.

        Example:
            manager.bind().for_category("myapp.db").to("File", path="db.log").build()
        """
        return BindingBuilder(self, name)

    def bindings(self) -> List[AdapterBinding]:
        """Snapshot of bindings, newest first."""
        with self._lock:
            return list(reversed(self._bindings))

    def overrides(self) -> List[AdapterBinding]:
        """Snapshot of overrides, newest first."""
        with self._lock:
            return list(reversed(self._overrides))

    def defaults(self) -> Dict[str, AdapterBinding]:
        with self._lock:
            return dict(self._defaults)

    # Resolution

    def lineage(self, category: str) -> List[str]:
        """
        The category followed by its ancestors, nearest first.

        ``"a.b::c"`` -> ``["a.b::c", "a.b", "a"]``
        """
        separators = self._config.category_separators
        result = [category]
        current = category
        while True:
            cut = max(current.rfind(sep) for sep in separators)
            if cut <= 0:
                return result
            current = current[:cut]
            result.append(current)

    @staticmethod
    def _match(
        bindings: List[AdapterBinding], category: str, lineage: List[str]
    ) -> Optional[AdapterBinding]:
        newest_first = list(reversed(bindings))

        for candidate in lineage:
            for binding in newest_first:
                if binding.kind == "category" and binding.matches(candidate):
                    return binding

        for binding in newest_first:
            if binding.kind == "pattern" and binding.matches(category):
                return binding

        for binding in newest_first:
            if binding.kind == "all":
                return binding
        return None

    def find_binding(self, category: str) -> AdapterBinding:
        """Get the binding that serves ``category``."""
        with self._lock:
            lineage = self.lineage(category)

            for registry in (self._overrides, self._bindings):
                binding = self._match(registry, category, lineage)
                if binding is not None:
                    return binding

            for candidate in lineage:
                default = self._defaults.get(candidate)
                if default is not None:
                    return default

            return self._default_binding

    def get_adapter(self, category: str) -> Any:
        """Get the adapter instance serving ``category``."""
        with self._lock:
            return self.find_binding(category).adapter_for(category)

    def _refresh_proxies(self) -> None:
        for live in list(self._proxies):
            live._rebind(self.get_adapter(live.category))

    # Proxies

    def resolve_proxy_class(self, proxy_class: Union[str, type, None] = None) -> type:
        """
        Turn a proxy class spec into a class.

        ``""``/None -> configured proxy class or Proxy, ``"Null"`` ->
        NullProxy, ``"Name"`` -> ``log_any.core.proxy.NameProxy``,
        ``"+pkg.mod.Class"`` -> that class.

        Raises:
            ValueError: If a short name is unknown
            ImportError: If a ``+`` path cannot be imported
        """
        if isinstance(proxy_class, type):
            return proxy_class

        spec = proxy_class or self._config.proxy_class
        if not spec:
            return Proxy
        if spec.startswith("+"):
            return import_object(spec[1:])

        resolved = getattr(proxy_module, f"{spec}Proxy", None)
        if not isinstance(resolved, type):
            raise ValueError(f"Unknown proxy class: {spec!r}")
        return resolved

    def get_logger(
        self,
        category: str,
        default_adapter: Any = None,
        proxy_class: Union[str, type, None] = None,
        **proxy_params: Any,
    ) -> Proxy:
        """
        Create a proxy for ``category``.

        Args:
            category: Category name
            default_adapter: Adapter spec used for this category when no
                      binding matches; a ``(spec, params)`` tuple passes
                      constructor params
            proxy_class: Proxy class spec (see resolve_proxy_class)
            proxy_params: Proxy constructor params (filter, formatter, prefix)

        Returns:
            New proxy bound to the current adapter for ``category``
        """
        if not isinstance(category, str):
            raise TypeError("category must be a string")

        cls = self.resolve_proxy_class(proxy_class)

        if default_adapter is not None:
            if isinstance(default_adapter, tuple):
                spec, params = default_adapter
                self.set_default(category, spec, **dict(params))
            else:
                self.set_default(category, default_adapter)

        with self._lock:
            new_proxy = cls(self.get_adapter(category), category=category, **proxy_params)
            self._proxies.add(new_proxy)
        return new_proxy

    def live_proxy_count(self) -> int:
        with self._lock:
            return len(self._proxies)

    # Lifecycle

    def shutdown(self) -> None:
        """Close every adapter the manager created."""
        with self._lock:
            bindings = (
                self._overrides
                + self._bindings
                + list(self._defaults.values())
                + [self._default_binding]
            )
        for binding in bindings:
            self._report(binding.close())

    @staticmethod
    def _report(errors: List[Exception]) -> None:
        for e in errors:
            print(f"Adapter error: {e}", file=sys.stderr)

    def __repr__(self) -> str:
        """String representation."""
        with self._lock:
            return (
                f"Manager(bindings={[b.name for b in reversed(self._bindings)]}, "
                f"defaults={list(self._defaults)}, "
                f"default={self._config.default_adapter!r})"
            )


_manager: Optional[Manager] = None
_manager_lock = threading.Lock()


def get_manager() -> Manager:
    """Get the process-wide manager, creating it on first use."""
    global _manager
    if _manager is None:
        with _manager_lock:
            if _manager is None:
                _manager = Manager()
                atexit.register(_manager.shutdown)
    return _manager


def reset_manager(config: Optional[FacadeConfig] = None) -> Manager:
    """
    Replace the process-wide manager with a fresh one.

    The old manager is shut down. Proxies created from it keep their
    adapters but no longer follow configuration changes.
    """
    global _manager
    with _manager_lock:
        old = _manager
        _manager = Manager(config)
        atexit.register(_manager.shutdown)
    if old is not None:
        atexit.unregister(old.shutdown)
        old.shutdown()
    return _manager
