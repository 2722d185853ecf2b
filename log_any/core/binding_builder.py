"""
Binding builder with fluent API

Provides a fluent interface for constructing adapter bindings
"""

from __future__ import annotations

from typing import Any, Optional, Pattern, Union, TYPE_CHECKING

from log_any.core.binding import AdapterBinding, Selector, compile_selector

if TYPE_CHECKING:
    from log_any.core.manager import Manager


class BindingBuilder:
    """
    Fluent builder for adapter bindings.

    Example:
        manager.bind("db") \\
            .for_category("myapp.db") \\
            .to("File", path="logs/db.log", log_level="debug") \\
            .build()
    """

    def __init__(self, manager: "Manager", name: Optional[str] = None):
        """
        Initialize binding builder.

        Args:
            manager: Manager to register the binding with
            name: Optional binding name (derived from adapter and selector
                  if not provided)
        """
        self._manager = manager
        self._name = name or ""
        self._selector: Selector = None
        self._adapter: Any = None
        self._params: dict = {}

    def named(self, name: str) -> "BindingBuilder":
        """
        Set binding name for debugging.

        Args:
            name: Human-readable binding name

        Returns:
            Self for method chaining
        """
        self._name = name
        return self

    def for_category(self, category: str) -> "BindingBuilder":
        """
        Bind a category and all of its descendants.

        Args:
            category: Category name, e.g. ``"myapp.db"``

        Returns:
            Self for method chaining
        """
        if not isinstance(category, str):
            raise TypeError("category must be a string")
        self._selector = category
        return self

    def matching(
        self,
        pattern: Union[str, Pattern],
        case_sensitive: bool = True
    ) -> "BindingBuilder":
        """
        Bind every category the regex pattern matches (``re.search``).

        Args:
            pattern: Regular expression pattern (string or compiled)
            case_sensitive: Whether matching is case-sensitive

        Returns:
            Self for method chaining

        Example:
            manager.bind().matching(r"\\.(auth|audit)$").to("File", path="audit.log")
        """
        self._selector = compile_selector(pattern, case_sensitive)
        return self

    def for_all(self) -> "BindingBuilder":
        """Bind every category."""
        self._selector = None
        return self

    def to(self, adapter: Any, **params: Any) -> "BindingBuilder":
        """
        Specify the adapter for this binding.

        Args:
            adapter: Adapter name, class, or instance
            params: Adapter constructor params

        Returns:
            Self for method chaining
        """
        self._adapter = adapter
        self._params = params
        return self

    def build(self) -> AdapterBinding:
        """
        Build and register the binding.

        Returns:
            The created AdapterBinding

        Raises:
            ValueError: If no adapter is specified
        """
        if self._adapter is None:
            raise ValueError("Binding must have an adapter")

        binding = AdapterBinding(
            selector=self._selector,
            adapter=self._adapter,
            params=self._params,
            name=self._name,
        )
        self._manager.add_binding(binding)
        return binding
