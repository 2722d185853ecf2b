"""
Adapter binding data structure

One registry entry: which categories it covers and which adapter serves them.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Union

from log_any.adapters.registry import resolve_adapter_class

Selector = Union[None, str, Pattern]


def is_adapter_instance(obj: Any) -> bool:
    """Check whether ``obj`` is a ready adapter rather than a name or class."""
    return (
        not isinstance(obj, (str, type))
        and callable(getattr(obj, "structured", None))
        and callable(getattr(obj, "is_enabled", None))
    )


@dataclass(eq=False)
class AdapterBinding:
    """
    Binding of a category selector to an adapter.

    Attributes:
        selector: None for every category, a category name (which also
                  covers its descendants), or a compiled regex searched
                  against the category
        adapter: Adapter name, class, or ready instance
        params: Constructor params for name/class adapters
        name: Human-readable name for debugging
    """

    selector: Selector
    adapter: Any
    params: Dict[str, Any] = field(default_factory=dict)
    name: str = ""
    _adapter_class: Optional[type] = field(default=None, init=False, repr=False)
    _instances: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    _lock: Any = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self):
        """Validate and resolve the adapter spec."""
        if self.selector is not None and not isinstance(self.selector, (str, re.Pattern)):
            raise TypeError("category must be None, a string or a compiled regex")

        if is_adapter_instance(self.adapter):
            if self.params:
                raise TypeError("params cannot be combined with an adapter instance")
        elif isinstance(self.adapter, str):
            if not self.adapter:
                raise ValueError("adapter name must not be empty")
            self._adapter_class = resolve_adapter_class(self.adapter)
        elif isinstance(self.adapter, type):
            self._adapter_class = self.adapter
        else:
            raise TypeError(
                f"adapter must be a name, a class or an adapter instance, "
                f"not {type(self.adapter).__name__}"
            )

        if not self.name:
            self.name = f"{self.adapter_name}@{self.describe_selector()}"

    @property
    def kind(self) -> str:
        """'all', 'category' or 'pattern'."""
        if self.selector is None:
            return "all"
        if isinstance(self.selector, str):
            return "category"
        return "pattern"

    @property
    def adapter_name(self) -> str:
        if isinstance(self.adapter, str):
            return self.adapter
        if self._adapter_class is not None:
            return self._adapter_class.__name__
        return type(self.adapter).__name__

    def describe_selector(self) -> str:
        if self.selector is None:
            return "*"
        if isinstance(self.selector, str):
            return self.selector
        return f"/{self.selector.pattern}/"

    def matches(self, category: str) -> bool:
        """
        Check if this binding covers ``category`` directly.

        Category selectors match only the exact name here; the manager walks
        the ancestors of a category to implement inheritance.
        """
        if self.selector is None:
            return True
        if isinstance(self.selector, str):
            return self.selector == category
        return self.selector.search(category) is not None

    def adapter_for(self, category: str) -> Any:
        """
        Get the adapter serving ``category``, creating it on first use.

        Instances given at bind time are shared by every category.
        """
        if self._adapter_class is None:
            return self.adapter

        with self._lock:
            instance = self._instances.get(category)
            if instance is None:
                instance = self._adapter_class(category=category, **self.params)
                self._instances[category] = instance
            return instance

    def created_adapters(self) -> List[Any]:
        """Adapters instantiated by this binding."""
        with self._lock:
            return list(self._instances.values())

    def close(self) -> List[Exception]:
        """
        Close adapters this binding created.

        Returns:
            Exceptions raised by adapter ``close()`` calls
        """
        with self._lock:
            instances = list(self._instances.values())
            self._instances.clear()

        errors: List[Exception] = []
        for instance in instances:
            close = getattr(instance, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception as e:
                errors.append(e)
        return errors

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"AdapterBinding(name={self.name!r}, "
            f"selector={self.describe_selector()!r}, "
            f"adapter={self.adapter_name!r})"
        )


def compile_selector(pattern: Union[str, Pattern], case_sensitive: bool = True) -> Pattern:
    """Compile a regex selector."""
    if isinstance(pattern, str):
        flags = 0 if case_sensitive else re.IGNORECASE
        return re.compile(pattern, flags)
    return pattern
