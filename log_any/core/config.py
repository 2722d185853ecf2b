"""
Facade configuration management

Controls what happens to messages when the application has not bound an
adapter to a category.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

ENV_DEFAULT_ADAPTER = "LOG_ANY_DEFAULT_ADAPTER"
ENV_PROXY_CLASS = "LOG_ANY_PROXY_CLASS"


@dataclass
class FacadeConfig:
    """
    Facade configuration.

    The default adapter is only used for categories that match no binding
    and have no per-category default.
    """

    # Fallback adapter
    default_adapter: str = "Null"
    default_adapter_params: Dict[str, Any] = field(default_factory=dict)

    # Category hierarchy
    category_separators: Tuple[str, ...] = (".", "::")

    # Proxy settings
    proxy_class: str = ""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.default_adapter, str) or not self.default_adapter:
            raise ValueError("default_adapter must be a non-empty adapter name")
        if isinstance(self.category_separators, str):
            self.category_separators = (self.category_separators,)
        else:
            self.category_separators = tuple(self.category_separators)
        if not self.category_separators or not all(self.category_separators):
            raise ValueError("category_separators must contain non-empty strings")

    @classmethod
    def default(cls) -> "FacadeConfig":
        """Create default configuration (discard everything)."""
        return cls()

    @classmethod
    def debug_config(cls) -> "FacadeConfig":
        """Create configuration that prints DEBUG and above to stderr."""
        return cls(
            default_adapter="Stderr",
            default_adapter_params={"log_level": "debug"},
        )

    @classmethod
    def testing_config(cls) -> "FacadeConfig":
        """Create configuration that captures everything in memory."""
        return cls(default_adapter="Capture")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FacadeConfig":
        """
        Create configuration from environment variables.

        ``LOG_ANY_DEFAULT_ADAPTER`` holds an adapter name optionally followed
        by comma separated ``key=value`` params, e.g.
        ``File,path=/tmp/app.log,log_level=info``.

        Args:
            environ: Mapping to read (default: os.environ)

        Returns:
            New FacadeConfig instance

        Raises:
            ValueError: If a param is not in key=value form
        """
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        spec = environ.get(ENV_DEFAULT_ADAPTER, "").strip()
        if spec:
            name, params = parse_adapter_spec(spec)
            kwargs["default_adapter"] = name
            kwargs["default_adapter_params"] = params

        proxy_class = environ.get(ENV_PROXY_CLASS, "").strip()
        if proxy_class:
            kwargs["proxy_class"] = proxy_class

        return cls(**kwargs)


def parse_adapter_spec(spec: str) -> Tuple[str, Dict[str, str]]:
    """
    Split ``Name,key=value,...`` into the adapter name and its params.

    Raises:
        ValueError: If the spec is empty or a param is malformed
    """
    name, *pairs = [part.strip() for part in spec.split(",")]
    if not name:
        raise ValueError(f"Invalid adapter spec: {spec!r}")

    params: Dict[str, str] = {}
    for pair in pairs:
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid adapter param {pair!r} in {spec!r}")
        params[key.strip()] = value.strip()
    return name, params
