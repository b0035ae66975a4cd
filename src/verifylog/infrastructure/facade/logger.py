"""Logging facade: one low-level log entry point plus convenience methods.

Code under test logs through the six convenience methods. Every one of
them ends in a single call:

    log(level, event_id, state, exception, formatter)

which is the call a LoggerMock records and verifies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.log_level import LogLevel
from verifylog.infrastructure.facade.log_values import FormattedLogValues

if TYPE_CHECKING:
    from collections.abc import Callable


def format_message(state: object, exception: BaseException | None) -> str:
    """Default formatter passed to Logger.log: str() of the state."""
    return str(state)


class Logger(ABC):
    """Base class of all facade loggers.

    Subclasses implement log(). Convenience methods build the structured
    state and forward to it.

    Attributes:
        category: Optional category name (usually the owning class)
    """

    def __init__(self, category: str | None = None) -> None:
        """Initialize logger.

        Args:
            category: Category name, None = uncategorized
        """
        self.category = category

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        event_id: EventId,
        state: object,
        exception: BaseException | None,
        formatter: Callable[[object, BaseException | None], str],
    ) -> None:
        """Write a log entry.

        Args:
            level: Severity
            event_id: Event identifier
            state: Message state, usually FormattedLogValues
            exception: Exception related to the entry
            formatter: Turns state and exception into message text
        """

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether level is enabled. All levels by default."""
        return True

    def _log(
        self,
        level: LogLevel,
        message: str | None,
        args: tuple[object, ...],
        event_id: EventId | int | None,
        exception: BaseException | None,
    ) -> None:
        self.log(
            level,
            EventId.coerce(event_id),
            FormattedLogValues(message, args),
            exception,
            format_message,
        )

    def log_trace(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at TRACE level."""
        self._log(LogLevel.TRACE, message, args, event_id, exception)

    def log_debug(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, message, args, event_id, exception)

    def log_information(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at INFORMATION level.

        Args:
            message: Template with {Name} placeholders, None for a null message
            *args: Placeholder values in order
            event_id: Event identifier (int or EventId)
            exception: Exception related to the entry
        """
        self._log(LogLevel.INFORMATION, message, args, event_id, exception)

    def log_warning(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, message, args, event_id, exception)

    def log_error(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, message, args, event_id, exception)

    def log_critical(
        self,
        message: str | None,
        *args: object,
        event_id: EventId | int | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, message, args, event_id, exception)
