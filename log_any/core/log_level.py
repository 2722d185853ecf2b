"""
Log level enumeration and method name tables

Levels cover the union of the common logging packages (syslog severities
plus trace), ordered so that they can be passed to Python's logging module.
"""

from enum import IntEnum
from typing import Dict, List, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module: DEBUG, INFO,
    WARNING, ERROR and CRITICAL share the stdlib numbers.
    """

    TRACE = 5        # Most verbose, detailed tracing
    DEBUG = 10       # Debug information
    INFO = 20        # Informational messages
    NOTICE = 25      # Normal but significant
    WARNING = 30     # Warning messages
    ERROR = 40       # Error messages
    CRITICAL = 50    # Critical errors
    ALERT = 60       # Action must be taken immediately
    EMERGENCY = 70   # System is unusable
    OFF = 100        # Threshold only, disables everything

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def method_name(self) -> str:
        """Name of the proxy/adapter method for this level."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().lower()
        name = LOGGING_ALIASES.get(name, name)
        if name.upper() in cls.__members__:
            return cls[name.upper()]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, level: Union["LogLevel", int, str]) -> "LogLevel":
        """
        Convert a name, alias, number or LogLevel into a LogLevel.

        Raises:
            ValueError: If the value does not name a level
            TypeError: If the value has an unsupported type
        """
        if isinstance(level, cls):
            return level
        if isinstance(level, str):
            return cls.from_string(level)
        if isinstance(level, int) and not isinstance(level, bool):
            return cls(level)
        raise TypeError(f"Cannot convert {type(level).__name__} to LogLevel")

    @classmethod
    def message_level(cls, level: Union["LogLevel", int, str]) -> "LogLevel":
        """
        Convert a value into a level a message can be logged at.

        Raises:
            ValueError: For OFF, which is a threshold only
        """
        level = cls.coerce(level)
        if level is cls.OFF:
            raise ValueError("OFF is a threshold, not a message level")
        return level

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",      # White
            LogLevel.DEBUG: "\033[36m",      # Cyan
            LogLevel.INFO: "\033[32m",       # Green
            LogLevel.NOTICE: "\033[34m",     # Blue
            LogLevel.WARNING: "\033[33m",    # Yellow
            LogLevel.ERROR: "\033[31m",      # Red
            LogLevel.CRITICAL: "\033[35m",   # Magenta
            LogLevel.ALERT: "\033[1;35m",    # Bold magenta
            LogLevel.EMERGENCY: "\033[1;31m",  # Bold red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Canonical method names, most verbose first
LOGGING_METHODS: List[str] = [
    "trace",
    "debug",
    "info",
    "notice",
    "warning",
    "error",
    "critical",
    "alert",
    "emergency",
]

# Alias -> canonical method name
LOGGING_ALIASES: Dict[str, str] = {
    "inform": "info",
    "warn": "warning",
    "err": "error",
    "crit": "critical",
    "fatal": "critical",
}

DETECTION_METHODS: List[str] = [f"is_{name}" for name in LOGGING_METHODS]

DETECTION_ALIASES: Dict[str, str] = {
    f"is_{alias}": f"is_{name}" for alias, name in LOGGING_ALIASES.items()
}

# Method name (canonical or alias) -> level
LEVEL_FROM_NAME: Dict[str, LogLevel] = {
    name: LogLevel[name.upper()] for name in LOGGING_METHODS
}
LEVEL_FROM_NAME.update(
    {alias: LEVEL_FROM_NAME[name] for alias, name in LOGGING_ALIASES.items()}
)


def numeric_level(name: str) -> int:
    """
    Get the numeric value for a level name or alias.

    Raises:
        ValueError: If name is not a level
    """
    return int(LogLevel.from_string(name))
