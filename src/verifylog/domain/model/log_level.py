"""Log severity enumeration."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log severity, ordered from least to most severe.

    Each logger convenience method maps to exactly one member.
    """

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    def __str__(self) -> str:
        """Format as LogLevel.NAME."""
        return f"LogLevel.{self.name}"
