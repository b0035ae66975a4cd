"""Captured verification call expression.

A verification expression such as
    lambda logger: logger.log_information("Processed {Id}", It.is_any())
is captured as a CallExpression. Each argument is one variant of
ArgumentExpression:

    Literal      plain value written by the test
    BuilderCall  matcher produced by an It.* builder (or mock.ANY)
    Opaque       deferred helper evaluated at verification time
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.matcher import Matcher


@dataclass(frozen=True, slots=True)
class Literal:
    """Constant value.

    Attributes:
        value: The value as written
    """

    value: object


@dataclass(frozen=True, slots=True)
class BuilderCall:
    """Matcher builder invocation.

    Attributes:
        matcher: Matcher the builder produced
    """

    matcher: Matcher


@dataclass(frozen=True, slots=True)
class Opaque:
    """Arbitrary expression evaluated when the matcher runs.

    Attributes:
        thunk: Zero-argument callable producing the value
        text: Source-like rendition, e.g. "build_message()"
    """

    thunk: Callable[[], object]
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.thunk):
            raise TypeError("thunk must be callable")
        if not self.text:
            raise ValueError("text must not be empty")

    def evaluate(self) -> object:
        """Run the deferred expression."""
        return self.thunk()


ArgumentExpression = Literal | BuilderCall | Opaque


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Invocation of method on receiver with argument expressions.

    Owned by the test; the engine only reads it.

    Attributes:
        receiver: Receiver parameter name (e.g. "logger")
        method: Invoked method name
        arguments: Positional argument expressions
        keywords: Keyword argument expressions, in call order
    """

    receiver: str
    method: str
    arguments: tuple[ArgumentExpression, ...] = ()
    keywords: tuple[tuple[str, ArgumentExpression], ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.receiver:
            raise ValueError("receiver must not be empty")
        if not self.method:
            raise ValueError("method must not be empty")
