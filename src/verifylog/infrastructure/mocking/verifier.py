"""verify primitive: count matching invocations against a Times constraint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from verifylog.domain.exceptions import MockVerificationError
from verifylog.domain.model.times import Times
from verifylog.infrastructure.mocking.diagnostics import render_invocations

if TYPE_CHECKING:
    from verifylog.domain.model.configuration import VerifierConfig
    from verifylog.domain.model.invocation import Invocation
    from verifylog.domain.model.matcher import LogCallMatcher

logger = logging.getLogger(__name__)


def verify_invocations(
    invocations: tuple[Invocation, ...],
    matcher: LogCallMatcher,
    times: Times | None,
    fail_message: str | None,
    config: VerifierConfig,
    *,
    label: str = "logger",
) -> None:
    """Check that the number of matching invocations satisfies times.

    Matcher exceptions (e.g. a raising user predicate) propagate unchanged.

    Args:
        invocations: Recorded invocations
        matcher: Synthesized low-level call matcher
        times: Count constraint, None = at least once
        fail_message: Extra text prepended to the failure
        config: Diagnostics configuration
        label: Mock label for diagnostics

    Raises:
        MockVerificationError: If the count constraint is not met
    """
    times = times or Times.at_least_once()
    count = sum(1 for invocation in invocations if matcher.matches(invocation))
    logger.debug("%d of %d invocations matched %s", count, len(invocations), matcher)

    if times.validate(count):
        return

    raise MockVerificationError(
        summary=times.describe_failure(count),
        expression=str(matcher),
        fail_message=fail_message,
        diagnostics=render_invocations(invocations, config, label=label),
    )
