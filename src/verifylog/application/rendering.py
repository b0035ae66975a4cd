"""Error translation: render captured calls, classify faults."""

from __future__ import annotations

from typing import TYPE_CHECKING

from verifylog.domain.exceptions import MockVerificationError
from verifylog.domain.model.call_expression import BuilderCall, Literal, Opaque
from verifylog.domain.model.enums import FaultKind

if TYPE_CHECKING:
    from verifylog.domain.model.call_expression import ArgumentExpression, CallExpression


def render_argument(expression: ArgumentExpression) -> str:
    """Render one argument expression as source-like text."""
    match expression:
        case Literal(value=value):
            return repr(value)
        case BuilderCall(matcher=matcher):
            return matcher.description
        case Opaque(text=text):
            return text


def render_expression(call: CallExpression) -> str:
    """Render a captured call back to source-like text.

    Example:
        lambda logger: logger.log_error('Failed {Id}', 7, exception=ValueError('x'))

    Args:
        call: Captured verification call

    Returns:
        Lambda text reproducing the call
    """
    arguments = [render_argument(a) for a in call.arguments]
    arguments.extend(f"{name}={render_argument(a)}" for name, a in call.keywords)
    return f"lambda {call.receiver}: {call.receiver}.{call.method}({', '.join(arguments)})"


def classify_fault(error: BaseException) -> FaultKind:
    """Tell a missing invocation apart from any other verification fault."""
    if isinstance(error, MockVerificationError):
        return FaultKind.EXPECTED_NO_MATCH
    return FaultKind.UNEXPECTED
