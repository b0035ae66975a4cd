"""Matcher builders for verification expressions.

Use in place of a literal argument:

    verify_log(mock, lambda logger: logger.log_error(
        It.is_regex(r"order \\d+ failed"),
        exception=It.is_any(ValueError),
    ))

unittest.mock.ANY is accepted wherever It.is_any() is.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from verifylog.domain.model.matcher import Matcher, MatcherKind
from verifylog.infrastructure.expression.source import describe_callable

if TYPE_CHECKING:
    from collections.abc import Callable


def _type_suffix(type_: type) -> str:
    return "" if type_ is object else type_.__name__


class It:
    """Namespace of matcher builders."""

    @staticmethod
    def is_any(type_: type = object) -> Matcher:
        """Match any value of type_, None included.

        Args:
            type_: Required type, object = anything
        """
        return Matcher(
            kind=MatcherKind.ANY,
            description=f"It.is_any({_type_suffix(type_)})",
            value_type=type_,
        )

    @staticmethod
    def is_(predicate: Callable[[object], bool], type_: type = object) -> Matcher:
        """Match values for which predicate returns True.

        In the message position the predicate receives the rendered
        message text.

        Args:
            predicate: One-argument predicate
            type_: Required type of non-None values

        Raises:
            TypeError: If predicate is not callable
        """
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        suffix = _type_suffix(type_)
        return Matcher(
            kind=MatcherKind.PREDICATE,
            description=f"It.is_({describe_callable(predicate)}{', ' + suffix if suffix else ''})",
            value_type=type_,
            predicate=predicate,
        )

    @staticmethod
    def is_not_none(type_: type = object) -> Matcher:
        """Match any non-None value of type_.

        In the message position this rejects null messages.
        """
        return Matcher(
            kind=MatcherKind.NOT_NONE,
            description=f"It.is_not_none({_type_suffix(type_)})",
            value_type=type_,
        )

    @staticmethod
    def is_regex(pattern: str | re.Pattern[str], flags: int = 0) -> Matcher:
        """Match values whose str() contains a match of pattern.

        In the message position matching is always case-insensitive.

        Args:
            pattern: Regular expression or compiled pattern
            flags: re flags for a string pattern

        Raises:
            re.error: If pattern is invalid (FAIL-FIRST)
        """
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)
        return Matcher(
            kind=MatcherKind.REGEX,
            description=f"It.is_regex({compiled.pattern!r})",
            value=compiled,
        )
