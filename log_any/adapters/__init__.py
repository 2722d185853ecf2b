"""Adapters module - log consumers chosen by the application"""

from log_any.adapters.base import BaseAdapter
from log_any.adapters.null_adapter import NullAdapter
from log_any.adapters.file_adapter import FileAdapter
from log_any.adapters.stream_adapter import StreamAdapter, StderrAdapter, StdoutAdapter
from log_any.adapters.capture_adapter import CaptureAdapter, CaptureStore
from log_any.adapters.stdlib_adapter import StdlibAdapter
from log_any.adapters.registry import (
    register_adapter,
    unregister_adapter,
    resolve_adapter_class,
    available_adapters,
)

__all__ = [
    "BaseAdapter",
    "NullAdapter",
    "FileAdapter",
    "StreamAdapter",
    "StderrAdapter",
    "StdoutAdapter",
    "CaptureAdapter",
    "CaptureStore",
    "StdlibAdapter",
    "register_adapter",
    "unregister_adapter",
    "resolve_adapter_class",
    "available_adapters",
]
