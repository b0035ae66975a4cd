"""Role-tagged arguments of one convenience logging call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from verifylog.domain.model.call_expression import Literal

if TYPE_CHECKING:
    from verifylog.domain.model.call_expression import ArgumentExpression
    from verifylog.domain.model.log_level import LogLevel


@dataclass(frozen=True, slots=True)
class ExtractedLogCallArgs:
    """Sub-expressions per role, plus literal values where known.

    Created per verification by the extractor, not retained afterwards.
    A role set to None was not written in the expression; an explicit
    None argument is Literal(None).

    Attributes:
        level: Severity resolved from the method name
        message: Message template expression
        args: Trailing template argument expressions
        event_id: Event id expression, None = absent
        exception: Exception expression, None = absent
    """

    level: LogLevel
    message: ArgumentExpression
    args: tuple[ArgumentExpression, ...] = ()
    event_id: ArgumentExpression | None = None
    exception: ArgumentExpression | None = None

    @property
    def message_value(self) -> object | None:
        """Literal message value, None if not a literal."""
        return _literal_value(self.message)

    @property
    def exception_value(self) -> object | None:
        """Literal exception value, None if absent or not a literal."""
        return _literal_value(self.exception)

    @property
    def event_id_value(self) -> object | None:
        """Literal event id value, None if absent or not a literal."""
        return _literal_value(self.event_id)

    @property
    def args_values(self) -> tuple[object | None, ...]:
        """Literal trailing arg values, None where an arg is not a literal."""
        return tuple(_literal_value(arg) for arg in self.args)

    @property
    def has_args(self) -> bool:
        """Whether trailing args were written in the expression."""
        return bool(self.args)


def _literal_value(expression: ArgumentExpression | None) -> object | None:
    if isinstance(expression, Literal):
        return expression.value
    return None
