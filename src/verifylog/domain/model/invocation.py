"""Recorded low-level log invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.event_id import EventId
    from verifylog.domain.model.log_level import LogLevel


@dataclass(frozen=True, slots=True)
class Invocation:
    """Arguments of one Logger.log call as recorded by the mock.

    Read-only to the verification engine.

    Attributes:
        level: Severity passed to log
        event_id: Event id passed to log
        state: Message state (plain string or structured record)
        exception: Exception passed to log, if any
        formatter: Formatter callable passed to log
    """

    level: LogLevel
    event_id: EventId
    state: object
    exception: BaseException | None
    formatter: Callable[[object, BaseException | None], str] | None

    @property
    def values(self) -> tuple[object, ...]:
        """Values in Logger.log parameter order."""
        return (self.level, self.event_id, self.state, self.exception, self.formatter)

    def __str__(self) -> str:
        """Format as a log call with rendered state."""
        exception = "None" if self.exception is None else repr(self.exception)
        return f"Logger.log({self.level}, {self.event_id!r}, {str(self.state)!r}, {exception})"
