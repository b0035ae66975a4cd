"""Argument matchers and the synthesized low-level log call matcher."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.invocation import Invocation


class MatcherKind(Enum):
    """What a Matcher checks."""

    ANY = auto()  # any value of value_type, None included
    EQUALS = auto()  # actual == value
    PREDICATE = auto()  # user or synthesized predicate
    NOT_NONE = auto()  # any non-None value of value_type
    REGEX = auto()  # str(actual) searched with compiled pattern


@dataclass(frozen=True, slots=True)
class Matcher:
    """Predicate used in place of a literal in a verification expression.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        kind: Matcher kind
        description: Source-like text used in diagnostics
        value_type: Type the actual value must have (object = any)
        predicate: Predicate for PREDICATE matchers
        value: Expected value (EQUALS) or compiled pattern (REGEX)
    """

    kind: MatcherKind
    description: str
    value_type: type = object
    predicate: Callable[[Any], bool] | None = None
    value: object = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("description must not be empty")
        if not isinstance(self.value_type, type):
            raise TypeError(f"value_type must be a type, got {type(self.value_type).__name__}")
        if self.kind is MatcherKind.PREDICATE and not callable(self.predicate):
            raise TypeError("PREDICATE matcher requires a callable predicate")
        if self.kind is MatcherKind.REGEX and not isinstance(self.value, re.Pattern):
            raise TypeError("REGEX matcher requires a compiled pattern")

    def matches(self, actual: object) -> bool:
        """Check actual value against this matcher.

        Exceptions raised by predicates propagate unchanged.

        Args:
            actual: Recorded value

        Returns:
            True if actual satisfies the matcher
        """
        match self.kind:
            case MatcherKind.ANY:
                return actual is None or isinstance(actual, self.value_type)
            case MatcherKind.EQUALS:
                return bool(actual == self.value)
            case MatcherKind.PREDICATE:
                if actual is not None and not isinstance(actual, self.value_type):
                    return False
                predicate = cast("Callable[[Any], bool]", self.predicate)
                return bool(predicate(actual))
            case MatcherKind.NOT_NONE:
                return actual is not None and isinstance(actual, self.value_type)
            case MatcherKind.REGEX:
                pattern = cast("re.Pattern[str]", self.value)
                return actual is not None and pattern.search(str(actual)) is not None

    def __str__(self) -> str:
        """Return description."""
        return self.description

    def __repr__(self) -> str:
        """Return description."""
        return self.description


@dataclass(frozen=True, slots=True)
class LogCallMatcher:
    """Synthesized matcher for Logger.log(level, event_id, state, exception, formatter).

    Attributes:
        receiver: Receiver name used when rendering
        level: Severity slot
        event_id: Event id slot
        state: Message state slot
        exception: Exception slot
        formatter: Formatter slot
    """

    receiver: str
    level: Matcher
    event_id: Matcher
    state: Matcher
    exception: Matcher
    formatter: Matcher

    @property
    def slots(self) -> tuple[Matcher, Matcher, Matcher, Matcher, Matcher]:
        """Slot matchers in Logger.log parameter order."""
        return (self.level, self.event_id, self.state, self.exception, self.formatter)

    def matches(self, invocation: Invocation) -> bool:
        """Check a recorded invocation against all five slots."""
        return all(m.matches(v) for m, v in zip(self.slots, invocation.values, strict=True))

    def __str__(self) -> str:
        """Format as lambda receiver: receiver.log(...)."""
        args = ", ".join(m.description for m in self.slots)
        return f"lambda {self.receiver}: {self.receiver}.log({args})"
