"""
Helpers shared by proxies and adapters
"""

from typing import Any, Callable, Optional

UNDEF = "<undef>"

_SCALARS = (str, int, float, complex)


def dump_one_line(value: Any) -> str:
    """
    Render a value as a single-line string.

    Mappings are rendered with their keys sorted so the output is stable
    between runs; nested containers are rendered recursively.
    """
    if value is None:
        return UNDEF
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: repr(kv[0]))
        inner = ", ".join(f"{dump_one_line(k)}: {dump_one_line(v)}" for k, v in items)
        return "{" + inner + "}"
    if isinstance(value, list):
        return "[" + ", ".join(dump_one_line(v) for v in value) + "]"
    if isinstance(value, tuple):
        inner = ", ".join(dump_one_line(v) for v in value)
        return "(" + inner + ("," if len(value) == 1 else "") + ")"
    if isinstance(value, (set, frozenset)):
        if not value:
            return "set()"
        return "{" + ", ".join(sorted(dump_one_line(v) for v in value)) + "}"
    if isinstance(value, str):
        return repr(value)
    return " ".join(repr(value).split())


def render_param(value: Any) -> Any:
    """Prepare one formatting argument: None and non-scalars become strings."""
    if value is None:
        return UNDEF
    if isinstance(value, _SCALARS):
        return value
    return dump_one_line(value)


def default_formatter(category: str, level: int, fmt: Any, *args: Any) -> Optional[str]:
    """
    Render a ``...f`` call.

    ``fmt`` is a %-style format string; a callable ``fmt`` is called with no
    arguments and its result used as the message, so expensive messages are
    only built when the level is enabled.
    """
    if callable(fmt):
        return fmt()
    if fmt is None:
        return None

    params = tuple(render_param(arg) for arg in args)
    try:
        return str(fmt) % params
    except (TypeError, ValueError) as e:
        rendered = " ".join([str(fmt)] + [str(p) for p in params])
        return f"[FORMAT ERROR: {e}] {rendered}"


def join_parts(parts) -> str:
    """Join message parts with single spaces, skipping None and empty parts."""
    return " ".join(text for text in (_as_text(p) for p in parts) if text)


def _as_text(part: Any) -> str:
    if part is None:
        return ""
    return part if isinstance(part, str) else str(part)


Formatter = Callable[..., Optional[str]]
Filter = Callable[[str, int, str], Optional[str]]
