"""Log event identifier value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class EventId:
    """Identifies a logging event.

    Equality and hash use id only: EventId(10, "Order") == EventId(10).

    Attributes:
        id: Numeric event identifier.
        name: Optional human readable event name.
    """

    id: int
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"id must be int, got {type(self.id).__name__}")

    @classmethod
    def coerce(cls, value: EventId | int | None) -> EventId:
        """Normalize None/int/EventId into EventId.

        Args:
            value: None (event 0), an int id or an EventId

        Returns:
            EventId instance

        Raises:
            TypeError: If value has any other type
        """
        if value is None:
            return cls(0)
        if isinstance(value, EventId):
            return value
        return cls(value)

    def __eq__(self, other: object) -> bool:
        """Compare by id."""
        if isinstance(other, EventId):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        """Hash by id."""
        return hash(self.id)

    def __str__(self) -> str:
        """Format as name if present, else id."""
        return self.name if self.name else str(self.id)

    def __repr__(self) -> str:
        """Return constructor-like repr."""
        if self.name is None:
            return f"EventId({self.id})"
        return f"EventId({self.id}, {self.name!r})"
