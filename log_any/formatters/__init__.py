"""
Log formatters module

Formatters turn a LogEntry into the line an adapter writes.
"""

from log_any.formatters.base_formatter import BaseFormatter
from log_any.formatters.text_formatter import TextFormatter
from log_any.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
]
