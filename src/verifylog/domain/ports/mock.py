"""Mock framework ports (interfaces).

The verification engine never touches recorded calls directly. It
builds a LogCallMatcher and hands it to the mock's verify primitive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from verifylog.domain.model.matcher import LogCallMatcher
    from verifylog.domain.model.times import Times


class StructuralMatcherPort(Protocol):
    """Checks a value against a partially specified expected value.

    Expected values may embed matchers at any position.
    """

    def __call__(self, expected: object, actual: object) -> bool:
        """Return True if actual satisfies expected."""
        ...


class LoggerMockPort(Protocol):
    """Logger mock able to verify recorded Logger.log invocations."""

    def verify(
        self,
        matcher: LogCallMatcher,
        times: Times | None = None,
        fail_message: str | None = None,
    ) -> None:
        """Verify recorded invocations against matcher.

        Args:
            matcher: Synthesized low-level call matcher
            times: Count constraint, None = at least once
            fail_message: Extra text prepended to the failure

        Raises:
            MockVerificationError: If the count constraint is not met
        """
        ...
