"""Call-count constraints for verification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TimesKind(Enum):
    """Shape of a call-count constraint."""

    AT_LEAST_ONCE = auto()
    AT_LEAST = auto()
    AT_MOST_ONCE = auto()
    AT_MOST = auto()
    BETWEEN_INCLUSIVE = auto()
    BETWEEN_EXCLUSIVE = auto()
    EXACTLY = auto()
    NEVER = auto()
    ONCE = auto()


def _times(count: int) -> str:
    return "1 time" if count == 1 else f"{count} times"


@dataclass(frozen=True, slots=True)
class Times:
    """How many matching invocations a verification expects.

    Build with the factory classmethods, not the constructor.

    Attributes:
        kind: Constraint shape
        lower: Minimum count (inclusive unless BETWEEN_EXCLUSIVE)
        upper: Maximum count, None = unbounded
    """

    kind: TimesKind
    lower: int
    upper: int | None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.lower < 0:
            raise ValueError(f"lower must be >= 0, got {self.lower}")
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(f"upper ({self.upper}) must be >= lower ({self.lower})")

    @classmethod
    def at_least_once(cls) -> Times:
        """At least one matching invocation (the default)."""
        return cls(TimesKind.AT_LEAST_ONCE, 1, None)

    @classmethod
    def at_least(cls, count: int) -> Times:
        """At least count matching invocations."""
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        return cls(TimesKind.AT_LEAST, count, None)

    @classmethod
    def at_most_once(cls) -> Times:
        """Zero or one matching invocation."""
        return cls(TimesKind.AT_MOST_ONCE, 0, 1)

    @classmethod
    def at_most(cls, count: int) -> Times:
        """At most count matching invocations."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return cls(TimesKind.AT_MOST, 0, count)

    @classmethod
    def between(cls, lower: int, upper: int, *, inclusive: bool = True) -> Times:
        """Between lower and upper matching invocations.

        Args:
            lower: Lower bound
            upper: Upper bound; >= lower when inclusive, >= lower + 2 otherwise
            inclusive: Whether bounds are allowed counts
        """
        if lower < 0:
            raise ValueError(f"lower must be >= 0, got {lower}")
        if inclusive:
            if upper < lower:
                raise ValueError(f"upper ({upper}) must be >= lower ({lower})")
            return cls(TimesKind.BETWEEN_INCLUSIVE, lower, upper)
        if upper - lower < 2:
            raise ValueError(
                f"exclusive range ({lower}, {upper}) admits no count, upper must be >= lower + 2"
            )
        return cls(TimesKind.BETWEEN_EXCLUSIVE, lower, upper)

    @classmethod
    def exactly(cls, count: int) -> Times:
        """Exactly count matching invocations."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return cls(TimesKind.EXACTLY, count, count)

    @classmethod
    def never(cls) -> Times:
        """No matching invocation."""
        return cls(TimesKind.NEVER, 0, 0)

    @classmethod
    def once(cls) -> Times:
        """Exactly one matching invocation."""
        return cls(TimesKind.ONCE, 1, 1)

    def validate(self, count: int) -> bool:
        """Check whether count satisfies the constraint."""
        if self.kind is TimesKind.BETWEEN_EXCLUSIVE:
            return self.upper is not None and self.lower < count < self.upper
        if count < self.lower:
            return False
        return self.upper is None or count <= self.upper

    def describe_failure(self, count: int) -> str:
        """Describe a failed validation for count actual invocations."""
        prefix = "Expected invocation on the mock"
        match self.kind:
            case TimesKind.AT_LEAST_ONCE:
                return f"{prefix} at least once, but was never performed"
            case TimesKind.AT_LEAST:
                return f"{prefix} at least {_times(self.lower)}, but was {_times(count)}"
            case TimesKind.AT_MOST_ONCE:
                return f"{prefix} at most once, but was {_times(count)}"
            case TimesKind.AT_MOST:
                return f"{prefix} at most {_times(self.upper or 0)}, but was {_times(count)}"
            case TimesKind.BETWEEN_INCLUSIVE | TimesKind.BETWEEN_EXCLUSIVE:
                mode = "Inclusive" if self.kind is TimesKind.BETWEEN_INCLUSIVE else "Exclusive"
                return (
                    f"{prefix} between {self.lower} and {self.upper} times ({mode}), "
                    f"but was {_times(count)}"
                )
            case TimesKind.EXACTLY:
                return f"{prefix} exactly {_times(self.lower)}, but was {_times(count)}"
            case TimesKind.NEVER:
                return f"{prefix} should never have been performed, but was {_times(count)}"
            case TimesKind.ONCE:
                return f"{prefix} once, but was {_times(count)}"
