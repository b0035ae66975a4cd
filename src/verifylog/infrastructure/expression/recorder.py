"""Capture a verification lambda as a CallExpression.

The lambda runs once against a recording proxy standing in for the
logger. The proxy records the single method call the lambda makes:

    lambda logger: logger.log_warning("Retry {Attempt}", It.is_any())

becomes CallExpression("logger", "log_warning", (Literal(...), BuilderCall(...))).
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from unittest import mock

from verifylog.domain.exceptions import UnsupportedExpressionError, VerifyLogUnexpectedError
from verifylog.domain.model.call_expression import BuilderCall, CallExpression, Literal
from verifylog.domain.model.matcher import Matcher, MatcherKind
from verifylog.infrastructure.expression.source import describe_callable

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.call_expression import ArgumentExpression

NO_CALL = "A method name could not be resolved from the verification expression."

MOCK_ANY = Matcher(kind=MatcherKind.ANY, description="mock.ANY")


@dataclass(frozen=True, slots=True)
class _RecordedCall:
    method: str
    args: tuple[object, ...]
    kwargs: dict[str, object]


@dataclass(slots=True)
class _Recording:
    """Mutable capture state shared by proxy objects of one capture."""

    calls: list[_RecordedCall] = field(default_factory=list)
    misuse: str | None = None

    def flag(self, misuse: str) -> None:
        if self.misuse is None:
            self.misuse = misuse


class _Chained:
    """Result of a recorded call. Any use of it is a chained call."""

    def __init__(self, recording: _Recording, method: str) -> None:
        self._recording = recording
        self._method = method

    def __getattr__(self, name: str) -> _Chained:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        self._recording.flag(f"The result of `{self._method}` must not be used (accessed `{name}`).")
        return self

    def __call__(self, *args: object, **kwargs: object) -> _Chained:
        self._recording.flag(f"The result of `{self._method}` must not be called.")
        return self


class _RecordingMethod:
    """Bound method of the proxy; records its call."""

    def __init__(self, recording: _Recording, method: str) -> None:
        self._recording = recording
        self._method = method

    def __getattr__(self, name: str) -> _Chained:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        self._recording.flag(f"Member access `{self._method}.{name}` is not a method call.")
        return _Chained(self._recording, f"{self._method}.{name}")

    def __call__(self, *args: object, **kwargs: object) -> _Chained:
        self._recording.calls.append(_RecordedCall(self._method, args, dict(kwargs)))
        return _Chained(self._recording, self._method)


class _RecordingProxy:
    """Stands in for the logger while the verification lambda runs."""

    def __init__(self, recording: _Recording) -> None:
        self._recording = recording

    def __getattr__(self, name: str) -> _RecordingMethod:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return _RecordingMethod(self._recording, name)


def to_argument(value: object) -> ArgumentExpression:
    """Classify a recorded argument value.

    Matchers (and mock.ANY) become BuilderCall, everything else Literal.
    """
    if isinstance(value, Matcher):
        return BuilderCall(value)
    if value is mock.ANY:
        return BuilderCall(MOCK_ANY)
    return Literal(value)


def receiver_name(expression: Callable[..., object]) -> str:
    """Name of the lambda's logger parameter.

    Further parameters are allowed when they have defaults, as in
    lambda logger, m=m: getattr(logger, m)(...).

    Raises:
        UnsupportedExpressionError: If expression does not take the logger
            as its only required parameter
    """
    try:
        parameters = list(inspect.signature(expression).parameters.values())
    except (TypeError, ValueError) as e:
        raise UnsupportedExpressionError(
            f"The signature of {describe_callable(expression)} could not be inspected."
        ) from e

    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if (
        not parameters
        or parameters[0].kind not in positional
        or parameters[0].default is not inspect.Parameter.empty
        or any(p.default is inspect.Parameter.empty for p in parameters[1:])
    ):
        raise UnsupportedExpressionError(
            "The verification expression must take the logger as its only parameter, "
            f"e.g. lambda logger: logger.log_information(...); got {describe_callable(expression)}."
        )
    return parameters[0].name


def capture_call(expression: Callable[..., object]) -> CallExpression:
    """Run expression against a recording proxy and capture its call.

    Args:
        expression: Verification lambda taking the logger

    Returns:
        Captured CallExpression

    Raises:
        UnsupportedExpressionError: If expression is not callable, makes no call,
            makes more than one call, or chains on the call result
        VerifyLogUnexpectedError: If expression itself raises
    """
    if not callable(expression):
        raise UnsupportedExpressionError(
            f"Expected a lambda taking the logger, got {type(expression).__name__}."
        )

    receiver = receiver_name(expression)
    recording = _Recording()
    try:
        expression(_RecordingProxy(recording))
    except Exception as e:
        raise VerifyLogUnexpectedError(describe_callable(expression), e) from e

    if recording.misuse is not None:
        raise UnsupportedExpressionError(recording.misuse)
    if not recording.calls:
        raise UnsupportedExpressionError(NO_CALL)
    if len(recording.calls) > 1:
        methods = ", ".join(f"`{c.method}`" for c in recording.calls)
        raise UnsupportedExpressionError(
            f"The verification expression must make exactly one call, made {len(recording.calls)}: {methods}."
        )

    call = recording.calls[0]
    return CallExpression(
        receiver=receiver,
        method=call.method,
        arguments=tuple(to_argument(a) for a in call.args),
        keywords=tuple((k, to_argument(v)) for k, v in call.kwargs.items()),
    )
