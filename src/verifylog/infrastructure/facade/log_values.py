"""Structured log state: template plus positional arguments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

from verifylog.domain.model.log_state import NULL_MESSAGE, ORIGINAL_FORMAT_KEY
from verifylog.infrastructure.facade.formatter import LogValuesFormatter, parse_template

_FORMATTER = LogValuesFormatter()


class FormattedLogValues(Sequence[tuple[str, object]]):
    """State passed to Logger.log by the convenience methods.

    Behaves as an ordered sequence of (name, value) pairs: one pair per
    placeholder, followed by (ORIGINAL_FORMAT_KEY, template).
    str() renders the message.

    Example:
        >>> values = FormattedLogValues("Order {Id} shipped", (42,))
        >>> list(values)
        [('Id', 42), ('{OriginalFormat}', 'Order {Id} shipped')]
        >>> str(values)
        'Order 42 shipped'
    """

    __slots__ = ("_args", "_pairs", "_template")

    def __init__(self, template: str | None, args: tuple[object, ...] = ()) -> None:
        """Initialize with template and args.

        Args:
            template: Message template, None for a null message
            args: Values in placeholder order
        """
        self._template = template
        self._args = tuple(args)

        names = parse_template(template).names if template is not None else ()
        pairs: list[tuple[str, object]] = list(zip(names, self._args, strict=False))
        pairs.append((ORIGINAL_FORMAT_KEY, template if template is not None else NULL_MESSAGE))
        self._pairs = tuple(pairs)

    @property
    def template(self) -> str | None:
        """Original template."""
        return self._template

    @property
    def args(self) -> tuple[object, ...]:
        """Template arguments."""
        return self._args

    @overload
    def __getitem__(self, index: int) -> tuple[str, object]: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[tuple[str, object]]: ...

    def __getitem__(self, index: int | slice) -> tuple[str, object] | Sequence[tuple[str, object]]:
        """Return pair(s) by position."""
        return self._pairs[index]

    def __len__(self) -> int:
        """Number of pairs, template pair included."""
        return len(self._pairs)

    def __str__(self) -> str:
        """Render message text."""
        if self._template is None:
            return NULL_MESSAGE
        if not self._args:
            return self._template
        return _FORMATTER.render(self._template, self._args)

    def __repr__(self) -> str:
        """Return constructor-like repr."""
        return f"FormattedLogValues({self._template!r}, {self._args!r})"
