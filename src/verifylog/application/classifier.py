"""Call-shape classifier: convenience method name to severity."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from verifylog.domain.exceptions import UnsupportedMethodError
from verifylog.domain.model.log_level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

    from verifylog.domain.model.call_expression import CallExpression

CONVENIENCE_METHODS: Mapping[str, LogLevel] = MappingProxyType(
    {
        "log_trace": LogLevel.TRACE,
        "log_debug": LogLevel.DEBUG,
        "log_information": LogLevel.INFORMATION,
        "log_warning": LogLevel.WARNING,
        "log_error": LogLevel.ERROR,
        "log_critical": LogLevel.CRITICAL,
    }
)


def classify(call: CallExpression) -> LogLevel:
    """Resolve the severity of a captured convenience call.

    Args:
        call: Captured verification call

    Returns:
        Severity of the invoked convenience method

    Raises:
        UnsupportedMethodError: If the method is not a convenience method
    """
    level = CONVENIENCE_METHODS.get(call.method)
    if level is None:
        raise UnsupportedMethodError(call.method, CONVENIENCE_METHODS)
    return level
