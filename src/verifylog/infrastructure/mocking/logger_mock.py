"""Logger mock recording Logger.log calls with unittest.mock."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

from verifylog.domain.model.configuration import VerifierConfig
from verifylog.domain.model.invocation import Invocation
from verifylog.infrastructure.facade.logger import Logger
from verifylog.infrastructure.mocking.verifier import verify_invocations

if TYPE_CHECKING:
    from collections.abc import Callable

    from verifylog.domain.model.event_id import EventId
    from verifylog.domain.model.log_level import LogLevel
    from verifylog.domain.model.matcher import LogCallMatcher
    from verifylog.domain.model.times import Times


class MockLogger(Logger):
    """Facade logger forwarding every log call to a Mock."""

    def __init__(self, log_mock: Mock, category: str | None = None) -> None:
        """Initialize with the recording mock."""
        super().__init__(category=category)
        self._log_mock = log_mock

    def log(
        self,
        level: LogLevel,
        event_id: EventId,
        state: object,
        exception: BaseException | None,
        formatter: Callable[[object, BaseException | None], str],
    ) -> None:
        """Record call on the mock."""
        self._log_mock(level, event_id, state, exception, formatter)


class LoggerMock:
    """Mock of the logging facade.

    Inject .object into the code under test, then verify recorded calls.

    Example:
        >>> mock = LoggerMock(OrdersProcessor)
        >>> OrdersProcessor(mock.object).process(order)
        >>> verify_log(mock, lambda logger: logger.log_information("Processed *"))

    Attributes:
        category: Category name, None for a plain logger mock
    """

    def __init__(
        self,
        category: type | str | None = None,
        *,
        config: VerifierConfig | None = None,
    ) -> None:
        """Initialize mock.

        Args:
            category: Class or name the logger is created for
            config: Diagnostics configuration. Uses defaults if None.
        """
        if isinstance(category, type):
            category = category.__qualname__
        self.category = category
        self._config = config or VerifierConfig()
        self._log_mock = Mock(name="log", return_value=None)
        self._object = MockLogger(self._log_mock, category=category)

    @property
    def object(self) -> Logger:
        """Logger to hand to the code under test."""
        return self._object

    @property
    def log_mock(self) -> Mock:
        """Underlying Mock recording Logger.log calls."""
        return self._log_mock

    @property
    def config(self) -> VerifierConfig:
        """Diagnostics configuration."""
        return self._config

    @property
    def invocations(self) -> tuple[Invocation, ...]:
        """Recorded Logger.log invocations in call order."""
        return tuple(Invocation(*call.args) for call in self._log_mock.call_args_list)

    def verify(
        self,
        matcher: LogCallMatcher,
        times: Times | None = None,
        fail_message: str | None = None,
    ) -> None:
        """Verify recorded invocations against matcher.

        Args:
            matcher: Synthesized low-level call matcher
            times: Count constraint, None = at least once
            fail_message: Extra text prepended to the failure

        Raises:
            MockVerificationError: If the count constraint is not met
        """
        verify_invocations(
            self.invocations,
            matcher,
            times,
            fail_message,
            self._config,
            label=self._label,
        )

    def reset(self) -> None:
        """Forget recorded invocations."""
        self._log_mock.reset_mock()

    @property
    def _label(self) -> str:
        if self.category is None:
            return "logger"
        return f"logger[{self.category}]"

    def __repr__(self) -> str:
        """Return constructor-like repr."""
        return f"LoggerMock({self.category!r})"
