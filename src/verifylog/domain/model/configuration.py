"""Verifier configuration (user config)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VerifierConfig:
    """Diagnostics configuration for the logger mock.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        show_invocations: Append the performed invocations table to failures.
        max_invocations: Max invocations listed. None = all (Data Completeness).
        width: Console width used to render the table.
    """

    show_invocations: bool = True
    max_invocations: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_invocations is not None and self.max_invocations < 1:
            raise ValueError(f"max_invocations must be >= 1, got {self.max_invocations}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
