"""
Core module for the logging facade

This module contains the fundamental classes:
- LogLevel: Log level enumeration and method tables
- LogEntry: Log entry data structure
- FacadeConfig: Configuration management
- Proxy / NullProxy: Per-category logging handles
- Manager: Process-wide category -> adapter registry
"""

from log_any.core.log_level import LogLevel
from log_any.core.log_entry import LogEntry
from log_any.core.config import FacadeConfig
from log_any.core.proxy import Proxy, NullProxy
from log_any.core.binding import AdapterBinding
from log_any.core.binding_builder import BindingBuilder
from log_any.core.manager import Manager, get_manager, reset_manager

__all__ = [
    "LogLevel",
    "LogEntry",
    "FacadeConfig",
    "Proxy",
    "NullProxy",
    "AdapterBinding",
    "BindingBuilder",
    "Manager",
    "get_manager",
    "reset_manager",
]
