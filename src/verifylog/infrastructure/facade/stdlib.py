"""Facade logger backed by the standard logging module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from verifylog.domain.model.log_level import LogLevel
from verifylog.infrastructure.facade.log_values import FormattedLogValues
from verifylog.infrastructure.facade.logger import Logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.event_id import EventId

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFORMATION: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


class StdlibLogger(Logger):
    """Writes facade log entries to a logging.Logger.

    Structured data travels in the record's extra attributes:
    event_id, template and log_values.

    Example:
        >>> logger = StdlibLogger.for_category(OrdersProcessor)
        >>> logger.log_information("Order {Id} shipped", 42)
    """

    def __init__(self, target: logging.Logger) -> None:
        """Initialize with target logger.

        Args:
            target: Standard library logger receiving the entries
        """
        super().__init__(category=target.name)
        self._target = target

    @classmethod
    def for_category(cls, category: type | str) -> StdlibLogger:
        """Build a logger named after a class or dotted name."""
        if isinstance(category, type):
            category = f"{category.__module__}.{category.__qualname__}"
        return cls(logging.getLogger(category))

    def is_enabled(self, level: LogLevel) -> bool:
        """Check target logger's effective level."""
        return self._target.isEnabledFor(LEVELS[level])

    def log(
        self,
        level: LogLevel,
        event_id: EventId,
        state: object,
        exception: BaseException | None,
        formatter: Callable[[object, BaseException | None], str],
    ) -> None:
        """Forward entry to the target logger."""
        if not self.is_enabled(level):
            return

        template = state.template if isinstance(state, FormattedLogValues) else None
        values = tuple(state) if isinstance(state, FormattedLogValues) else ()
        exc_info = None
        if exception is not None:
            exc_info = (type(exception), exception, exception.__traceback__)
        self._target.log(
            LEVELS[level],
            "%s",
            formatter(state, exception),
            exc_info=exc_info,
            extra={"event_id": event_id, "template": template, "log_values": values},
            stacklevel=4,
        )
