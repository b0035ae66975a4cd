"""Conventions shared by structured log state values.

A structured log state is an ordered sequence of (name, value) pairs.
One pair, keyed ORIGINAL_FORMAT_KEY, carries the unformatted template;
the other pairs carry the template arguments in placeholder order.
States that also expose template and args keep arguments that have
no placeholder.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

ORIGINAL_FORMAT_KEY = "{OriginalFormat}"

# Text a null message renders to
NULL_MESSAGE = "[null]"


@runtime_checkable
class StructuredState(Protocol):
    """Structured state that keeps its template and every argument."""

    @property
    def template(self) -> str | None:
        """Original template, None for a null message."""
        ...

    @property
    def args(self) -> tuple[object, ...]:
        """All logged arguments, with or without a placeholder."""
        ...


@dataclass(frozen=True, slots=True)
class StructuredMessage:
    """Template and arguments recovered from a structured state.

    Attributes:
        template: Original unformatted template (NULL_MESSAGE for None).
        args: Argument values in placeholder order, then any without a placeholder.
    """

    template: str
    args: tuple[object, ...]


def split_structured(state: object) -> StructuredMessage | None:
    """Recover template and args from a structured state.

    Args:
        state: Recorded state passed to Logger.log

    Returns:
        StructuredMessage, or None when state is not a structured record
    """
    if isinstance(state, StructuredState) and isinstance(state.args, tuple):
        original = state.template
        return StructuredMessage(
            template=NULL_MESSAGE if original is None else str(original),
            args=state.args,
        )
    if isinstance(state, (str, bytes)) or not isinstance(state, Sequence):
        return None

    template: str | None = None
    args: list[object] = []
    for item in state:
        if not isinstance(item, tuple) or len(item) != 2:
            return None
        key, value = item
        if key == ORIGINAL_FORMAT_KEY:
            template = NULL_MESSAGE if value is None else str(value)
        else:
            args.append(value)

    if template is None:
        return None
    return StructuredMessage(template=template, args=tuple(args))
