"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from verifylog.application.comparator import MessageContext
from verifylog.domain.model.call_expression import CallExpression
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.invocation import Invocation
from verifylog.domain.model.log_level import LogLevel
from verifylog.infrastructure.expression.recorder import to_argument
from verifylog.infrastructure.facade.formatter import LogValuesFormatter
from verifylog.infrastructure.facade.log_values import FormattedLogValues
from verifylog.infrastructure.facade.logger import format_message
from verifylog.infrastructure.mocking.structural import structural_match

# Template and args used by the templated-equivalence tests
POSITION_TEMPLATE = "Processed {@Position} in {Elapsed:000} ms."
POSITION = {"Latitude": 25, "Longitude": 134}
ELAPSED = 34
POSITION_RENDERED = "Processed { Latitude = 25, Longitude = 134 } in 034 ms."


def make_call(method: str, *args: object, receiver: str = "logger", **kwargs: object) -> CallExpression:
    """Create a CallExpression as the recorder would capture it.

    Args:
        method: Invoked method name
        *args: Positional argument values (matchers become BuilderCall)
        receiver: Receiver name (default "logger")
        **kwargs: Keyword argument values

    Returns:
        CallExpression instance
    """
    return CallExpression(
        receiver=receiver,
        method=method,
        arguments=tuple(to_argument(a) for a in args),
        keywords=tuple((k, to_argument(v)) for k, v in kwargs.items()),
    )


def make_invocation(
    message: str | None,
    *args: object,
    level: LogLevel = LogLevel.INFORMATION,
    event_id: EventId | int | None = None,
    exception: BaseException | None = None,
) -> Invocation:
    """Create an Invocation as a convenience method would record it.

    Args:
        message: Template, None for a null message
        *args: Template args
        level: Severity (default INFORMATION)
        event_id: Event id (default EventId(0))
        exception: Exception (default None)

    Returns:
        Invocation instance
    """
    return Invocation(
        level=level,
        event_id=EventId.coerce(event_id),
        state=FormattedLogValues(message, args),
        exception=exception,
        formatter=format_message,
    )


def make_context(*expected_args: object, has_args: bool | None = None) -> MessageContext:
    """Create a MessageContext with the default collaborators.

    Args:
        *expected_args: Expected trailing args
        has_args: Override (default: whether expected_args is non-empty)

    Returns:
        MessageContext instance
    """
    return MessageContext(
        renderer=LogValuesFormatter(),
        structural_match=structural_match,
        expected_args=expected_args,
        has_args=bool(expected_args) if has_args is None else has_args,
    )
