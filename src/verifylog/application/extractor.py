"""Argument extractor: locate message, args, event id and exception roles.

Roles are found by binding the captured arguments to the convenience
method signature:

    log_x(message, *args, event_id=None, exception=None)

A role not written in the expression stays absent (None). Literal
event ids are coerced to EventId. Callables written for the message or
exception become Opaque and are evaluated when the matcher runs.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from verifylog.application.classifier import classify
from verifylog.domain.exceptions import UnsupportedExpressionError
from verifylog.domain.model.call_expression import Literal, Opaque
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.log_call_args import ExtractedLogCallArgs
from verifylog.infrastructure.expression.source import describe_callable

if TYPE_CHECKING:
    from verifylog.domain.model.call_expression import ArgumentExpression, CallExpression

_P = inspect.Parameter

CONVENIENCE_SIGNATURE = inspect.Signature(
    [
        _P("message", _P.POSITIONAL_OR_KEYWORD),
        _P("args", _P.VAR_POSITIONAL),
        _P("event_id", _P.KEYWORD_ONLY, default=None),
        _P("exception", _P.KEYWORD_ONLY, default=None),
    ]
)


def extract(call: CallExpression) -> ExtractedLogCallArgs:
    """Split a convenience call into role-tagged argument expressions.

    Args:
        call: Captured verification call

    Returns:
        ExtractedLogCallArgs for the call

    Raises:
        UnsupportedMethodError: If the method is not a convenience method
        UnsupportedExpressionError: If arguments do not fit the signature
            or a role holds a value of the wrong kind
    """
    level = classify(call)

    try:
        bound = CONVENIENCE_SIGNATURE.bind(*call.arguments, **dict(call.keywords))
    except TypeError as e:
        raise UnsupportedExpressionError(
            f"The arguments of `{call.method}` do not match "
            f"{call.method}{CONVENIENCE_SIGNATURE}: {e}."
        ) from e

    supplied = bound.arguments
    return ExtractedLogCallArgs(
        level=level,
        message=_message(supplied["message"]),
        args=tuple(supplied.get("args", ())),
        event_id=_event_id(supplied.get("event_id")),
        exception=_exception(supplied.get("exception")),
    )


def _message(expression: ArgumentExpression) -> ArgumentExpression:
    if not isinstance(expression, Literal):
        return expression

    value = expression.value
    if value is None or isinstance(value, str):
        return expression
    if callable(value):
        return Opaque(thunk=value, text=describe_callable(value))
    raise UnsupportedExpressionError(
        "The message must be a string, None, a matcher or a zero-argument callable, "
        f"got {type(value).__name__}."
    )


def _event_id(expression: ArgumentExpression | None) -> ArgumentExpression | None:
    if not isinstance(expression, Literal):
        return expression

    value = expression.value
    if value is None or isinstance(value, EventId) or (
        isinstance(value, int) and not isinstance(value, bool)
    ):
        return Literal(EventId.coerce(value))
    if callable(value):
        return Opaque(thunk=value, text=describe_callable(value))
    raise UnsupportedExpressionError(
        "The event id must be an int, an EventId, a matcher or a zero-argument callable, "
        f"got {type(value).__name__}."
    )


def _exception(expression: ArgumentExpression | None) -> ArgumentExpression | None:
    if not isinstance(expression, Literal):
        return expression

    value = expression.value
    if value is None or isinstance(value, BaseException):
        return expression
    if isinstance(value, type) and issubclass(value, BaseException):
        return expression
    if callable(value):
        return Opaque(thunk=value, text=describe_callable(value))
    raise UnsupportedExpressionError(
        "The exception must be an exception instance or class, None, a matcher "
        f"or a zero-argument callable, got {type(value).__name__}."
    )
