"""Matcher synthesizer: convenience call -> Logger.log call matcher.

Each of the five Logger.log slots gets one Matcher:

    level      equals the severity of the convenience method
    event_id   any, unless an event id literal or matcher was written
    state      message predicate (see _message_matcher)
    exception  any, unless an exception literal, class or matcher was written
    formatter  any
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, cast

from verifylog.application.comparator import MessageContext, compare_exceptions, compare_messages
from verifylog.domain.model.call_expression import BuilderCall, Literal, Opaque
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.log_state import NULL_MESSAGE
from verifylog.domain.model.matcher import LogCallMatcher, Matcher, MatcherKind

if TYPE_CHECKING:
    from verifylog.domain.model.call_expression import ArgumentExpression
    from verifylog.domain.model.log_call_args import ExtractedLogCallArgs
    from verifylog.domain.ports.mock import StructuralMatcherPort
    from verifylog.domain.ports.renderer import MessageRendererPort

ANY = Matcher(kind=MatcherKind.ANY, description="It.is_any()")


def synthesize(
    extracted: ExtractedLogCallArgs,
    *,
    renderer: MessageRendererPort,
    structural_match: StructuralMatcherPort,
    receiver: str = "logger",
) -> LogCallMatcher:
    """Build the Logger.log call matcher for extracted convenience args.

    Args:
        extracted: Role-tagged arguments of the convenience call
        renderer: Message renderer used by the comparator
        structural_match: Structural matcher used for trailing args
        receiver: Receiver name used when rendering the matcher

    Returns:
        LogCallMatcher over the five Logger.log slots
    """
    context = MessageContext(
        renderer=renderer,
        structural_match=structural_match,
        expected_args=tuple(_expected_arg(a) for a in extracted.args),
        has_args=extracted.has_args,
    )
    return LogCallMatcher(
        receiver=receiver,
        level=Matcher(
            kind=MatcherKind.EQUALS,
            description=str(extracted.level),
            value=extracted.level,
        ),
        event_id=_event_id_matcher(extracted.event_id),
        state=_message_matcher(extracted.message, context),
        exception=_exception_matcher(extracted.exception),
        formatter=ANY,
    )


def _expected_arg(expression: ArgumentExpression) -> object:
    match expression:
        case Literal(value=value):
            return value
        case BuilderCall(matcher=matcher):
            return matcher
        case Opaque():
            return expression.evaluate()


def _args_text(context: MessageContext) -> str:
    if not context.has_args:
        return ""
    return f", args={context.expected_args!r}"


def _compare_matcher(expected: str | None, text: str, context: MessageContext) -> Matcher:
    return Matcher(
        kind=MatcherKind.PREDICATE,
        description=f"It.is_(lambda state: compare_messages({text}, state{_args_text(context)}))",
        predicate=lambda state: compare_messages(expected, context, state),
    )


def _message_matcher(expression: ArgumentExpression, context: MessageContext) -> Matcher:
    match expression:
        case Literal(value=value):
            return _compare_matcher(value, repr(value), context)
        case BuilderCall(matcher=matcher):
            return _builder_message_matcher(matcher, context)
        case Opaque(text=text):
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=f"It.is_(lambda state: compare_messages({text}, state{_args_text(context)}))",
                predicate=lambda state: compare_messages(
                    _as_message(expression.evaluate()), context, state
                ),
            )


def _builder_message_matcher(matcher: Matcher, context: MessageContext) -> Matcher:
    match matcher.kind:
        case MatcherKind.ANY:
            return Matcher(kind=MatcherKind.ANY, description=matcher.description)
        case MatcherKind.EQUALS:
            return _compare_matcher(_as_message(matcher.value), matcher.description, context)
        case MatcherKind.PREDICATE:
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=matcher.description,
                predicate=lambda state: matcher.matches(str(state)),
            )
        case MatcherKind.NOT_NONE:
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=matcher.description,
                predicate=lambda state: str(state) != NULL_MESSAGE,
            )
        case MatcherKind.REGEX:
            source = cast("re.Pattern[str]", matcher.value)
            pattern = re.compile(source.pattern, source.flags | re.IGNORECASE)
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=matcher.description,
                predicate=lambda state: pattern.search(str(state)) is not None,
            )


def _as_message(value: object) -> str | None:
    return None if value is None else str(value)


def _event_id_matcher(expression: ArgumentExpression | None) -> Matcher:
    match expression:
        case None:
            return ANY
        case Literal(value=value):
            return Matcher(kind=MatcherKind.EQUALS, description=repr(value), value=value)
        case BuilderCall(matcher=matcher):
            return matcher
        case Opaque(text=text):
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=f"It.is_(lambda event_id: event_id == {text})",
                predicate=lambda event_id: event_id == EventId.coerce(expression.evaluate()),
            )


def _exception_matcher(expression: ArgumentExpression | None) -> Matcher:
    match expression:
        case None:
            return ANY
        case Literal(value=None):
            return Matcher(kind=MatcherKind.EQUALS, description="None", value=None)
        case Literal(value=type() as exception_type):
            return Matcher(
                kind=MatcherKind.NOT_NONE,
                description=f"It.is_not_none({exception_type.__name__})",
                value_type=exception_type,
            )
        case Literal(value=BaseException() as exception):
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=f"It.is_(lambda e: compare_exceptions({exception!r}, e))",
                predicate=lambda actual: compare_exceptions(exception, actual),
            )
        case Literal(value=value):
            raise TypeError(f"exception literal must be an exception, got {type(value).__name__}")
        case BuilderCall(matcher=matcher):
            return matcher
        case Opaque(text=text):
            return Matcher(
                kind=MatcherKind.PREDICATE,
                description=f"It.is_(lambda e: compare_exceptions({text}, e))",
                predicate=lambda actual: compare_exceptions(_as_exception(expression.evaluate()), actual),
            )


def _as_exception(value: object) -> BaseException | None:
    if value is None or isinstance(value, BaseException):
        return value
    raise TypeError(f"expected an exception, got {type(value).__name__}")
