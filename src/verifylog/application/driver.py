"""Verification driver: capture, classify, synthesize, verify, translate.

Flow:
    capture_call      lambda -> CallExpression
    extract           CallExpression -> ExtractedLogCallArgs (classifies first)
    synthesize        ExtractedLogCallArgs -> LogCallMatcher
    mock.verify       LogCallMatcher -> raises MockVerificationError on mismatch

Capture and extraction errors propagate as they are. Everything raised
after that is caught once, here, and translated: a native mismatch into
VerifyLogError, anything else into VerifyLogUnexpectedError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, cast

from verifylog.application.extractor import extract
from verifylog.application.rendering import classify_fault, render_expression
from verifylog.application.synthesizer import synthesize
from verifylog.domain.exceptions import (
    MockVerificationError,
    VerifyLogError,
    VerifyLogUnexpectedError,
)
from verifylog.domain.model.enums import FaultKind
from verifylog.domain.model.times import Times
from verifylog.infrastructure.expression.recorder import capture_call
from verifylog.infrastructure.facade.formatter import LogValuesFormatter
from verifylog.infrastructure.mocking.structural import structural_match as default_structural_match

if TYPE_CHECKING:
    from verifylog.domain.ports.mock import LoggerMockPort, StructuralMatcherPort
    from verifylog.domain.ports.renderer import MessageRendererPort

logger = logging.getLogger(__name__)

TimesSpec = Times | Callable[[], Times] | None


def resolve_times(times: TimesSpec) -> Times | None:
    """Resolve a Times value or a deferred Times factory.

    Raises:
        TypeError: If the factory does not produce a Times
    """
    if times is None or isinstance(times, Times):
        return times
    resolved = times()
    if not isinstance(resolved, Times):
        raise TypeError(f"times factory must return Times, got {type(resolved).__name__}")
    return resolved


def verify(
    mock: LoggerMockPort,
    expression: Callable[..., object],
    times: TimesSpec = None,
    fail_message: str | None = None,
    *,
    renderer: MessageRendererPort | None = None,
    structural_match: StructuralMatcherPort | None = None,
) -> None:
    """Verify that the logger mock received a matching convenience call.

    Args:
        mock: Logger mock with a verify primitive
        expression: Lambda calling one convenience method on the logger
        times: Count constraint or zero-argument factory, None = at least once
        fail_message: Text prepended to the failure message
        renderer: Message renderer. Defaults to LogValuesFormatter.
        structural_match: Args matcher. Defaults to structural_match.

    Raises:
        UnsupportedExpressionError: If expression is not a single method call
        UnsupportedMethodError: If the method is not a convenience method
        VerifyLogError: If no (or not enough) recorded invocations match
        VerifyLogUnexpectedError: If anything else fails during verification
    """
    call = capture_call(expression)
    extracted = extract(call)
    rendered = render_expression(call)

    try:
        matcher = synthesize(
            extracted,
            renderer=renderer or LogValuesFormatter(),
            structural_match=structural_match or default_structural_match,
            receiver=call.receiver,
        )
        logger.debug("Verifying %s as %s", rendered, matcher)
        mock.verify(matcher, resolve_times(times), fail_message)
    except Exception as e:
        match classify_fault(e):
            case FaultKind.EXPECTED_NO_MATCH:
                native = cast("MockVerificationError", e)
                logger.debug("No match for %s: %s", rendered, native.summary)
                raise VerifyLogError(rendered, native) from e
            case FaultKind.UNEXPECTED:
                logger.debug("Verification of %s failed unexpectedly", rendered, exc_info=True)
                raise VerifyLogUnexpectedError(rendered, e) from e

    logger.debug("Verified %s", rendered)
