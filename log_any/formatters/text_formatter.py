"""
Text formatter with customizable template

Formats log entries using a template string with placeholders
"""

from log_any.core.log_entry import LogEntry
from log_any.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    The default renders ``[Mon Oct 05 14:03:12 2026] message``, one line per
    message, the way the file and stream adapters have always written.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] {message}"
    DEFAULT_TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y"

    def __init__(self, template: str = None, timestamp_format: str = None):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Log level name
                     - {level:9}: Log level with padding
                     - {message}: Log message
                     - {category}: Category of the logger
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
            timestamp_format: strftime format for timestamps. A trailing
                     ``%f`` is cut to milliseconds.

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")

            # Detailed format
            formatter = TextFormatter(
                "{timestamp} [{level:9}] {category}: {message}",
                timestamp_format="%Y-%m-%d %H:%M:%S.%f",
            )
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format or self.DEFAULT_TIMESTAMP_FORMAT

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        timestamp_str = entry.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]

        format_dict = {
            "timestamp": timestamp_str,
            "level": entry.level.name,
            "message": entry.message,
            "category": entry.category,
            "thread": entry.thread_name,
            "thread_id": entry.thread_id,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {entry.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
