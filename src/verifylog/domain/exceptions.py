"""Domain exceptions: all public errors of verifylog.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure use these, not define their own public exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable


class VerifyLogBaseError(Exception):
    """Base for all verifylog exceptions.

    Allows: except VerifyLogBaseError to catch all library errors.
    """


class UnsupportedExpressionError(VerifyLogBaseError, TypeError):
    """Verification expression is not a single method call on the logger.

    Inherits TypeError for semantic correctness (wrong kind of expression).

    Attributes:
        reason: Why the expression was rejected.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with rejection reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(
            "verifylog supports only verification expressions that call one of the "
            f"logger convenience methods. {reason}"
        )


class UnsupportedMethodError(VerifyLogBaseError, TypeError):
    """Invoked method is not one of the logger convenience methods.

    Attributes:
        method: Offending method name.
        supported: Supported method names, in severity order.
    """

    def __init__(self, method: str, supported: Iterable[str]) -> None:
        """Initialize with offending method and supported names."""
        if not method:
            raise ValueError("method must not be empty")
        self.method = method
        self.supported = tuple(supported)
        super().__init__(
            "verifylog supports only the logger convenience methods "
            f"({', '.join(self.supported)}).\n\n"
            f"The resolved method `{method}` in the verification expression is not one of these."
        )


class MockVerificationError(VerifyLogBaseError, AssertionError):
    """Native mock failure: no (or not enough) matching invocations.

    Raised by the mock layer's verify primitive. The driver wraps it
    into VerifyLogError; users normally never see it directly.

    Attributes:
        summary: Count expectation line, e.g. "Expected invocation ... but was 1 time".
        expression: Rendered low-level matcher expression.
        fail_message: User supplied failure text, if any.
        diagnostics: Performed invocations section (may be empty).
    """

    def __init__(
        self,
        *,
        summary: str,
        expression: str,
        fail_message: str | None = None,
        diagnostics: str = "",
    ) -> None:
        """Initialize with the parts of the native diagnostic."""
        if not summary:
            raise ValueError("summary must not be empty")
        self.summary = summary
        self.expression = expression
        self.fail_message = fail_message
        self.diagnostics = diagnostics

        parts = [fail_message] if fail_message else []
        parts.append(f"{summary}: {expression}")
        if diagnostics:
            parts.extend(["", diagnostics])
        super().__init__("\n".join(parts))


class VerifyLogError(VerifyLogBaseError, AssertionError):
    """No recorded log invocation satisfied the verification expression.

    Inherits AssertionError so test runners report it as a failed assertion.
    The native MockVerificationError is kept as __cause__.

    Attributes:
        expression: Rendered original verification expression.
        native: Native mock failure.
    """

    def __init__(self, expression: str, native: MockVerificationError) -> None:
        """Initialize with rendered expression and native failure."""
        self.expression = expression
        self.native = native

        parts = [native.fail_message] if native.fail_message else []
        parts.append(f"{native.summary}: {expression}")
        parts.extend(["", f"Low-level call: {native.expression}"])
        if native.diagnostics:
            parts.extend(["", native.diagnostics])
        super().__init__("\n".join(parts))
        self.__cause__ = native


class VerifyLogUnexpectedError(VerifyLogBaseError, RuntimeError):
    """Verification broke for a reason other than a missing invocation.

    Wraps the original exception, preserved via __cause__. Distinct from
    VerifyLogError: the assertion did not fail, the verification did.

    Attributes:
        expression: Rendered verification expression (may be a placeholder).
        original: Original exception.
    """

    def __init__(self, expression: str, original: BaseException) -> None:
        """Initialize with rendered expression and original exception."""
        self.expression = expression
        self.original = original
        super().__init__(
            f"An unexpected error occurred while verifying {expression}: "
            f"{type(original).__name__}: {original}\n\n"
            "This is not a missing log invocation. Check the helpers and predicates "
            "used by the verification expression; if they are correct, report it as "
            "a verifylog bug."
        )
        self.__cause__ = original
