"""verify_log: public entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from verifylog.application.driver import verify

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.application.driver import TimesSpec
    from verifylog.domain.ports.mock import LoggerMockPort


def verify_log(
    mock: LoggerMockPort,
    expression: Callable[..., object],
    times: TimesSpec = None,
    fail_message: str | None = None,
) -> None:
    """Assert that mock received a matching convenience logging call.

    The expression is written against the convenience methods:

        verify_log(mock, lambda logger: logger.log_information("Processed * in * ms."))
        verify_log(mock, lambda logger: logger.log_error("Failed", exception=ValueError("x")))
        verify_log(mock, lambda logger: logger.log_debug(It.is_any()), Times.exactly(2))
        verify_log(mock, lambda logger: logger.log_trace("Noise"), Times.never)

    Messages match case-insensitively, as template or rendered text,
    with "*" and "?" wildcards.

    Args:
        mock: LoggerMock (plain or category)
        expression: Lambda calling one convenience method on the logger
        times: Times or zero-argument factory (e.g. Times.never), None = at least once
        fail_message: Text prepended to the failure message

    Raises:
        UnsupportedExpressionError: If expression is not a single method call
        UnsupportedMethodError: If the method is not a convenience method
        VerifyLogError: If no (or not enough) recorded invocations match
        VerifyLogUnexpectedError: If anything else fails during verification
    """
    verify(mock, expression, times, fail_message)
