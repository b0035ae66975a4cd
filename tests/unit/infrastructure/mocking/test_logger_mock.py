"""Tests for infrastructure/mocking/logger_mock.py and verifier.py."""

import pytest

from verifylog.domain.exceptions import MockVerificationError
from verifylog.domain.model.configuration import VerifierConfig
from verifylog.domain.model.event_id import EventId
from verifylog.domain.model.log_level import LogLevel
from verifylog.domain.model.matcher import LogCallMatcher, Matcher, MatcherKind
from verifylog.domain.model.times import Times
from verifylog.infrastructure.facade.logger import Logger
from verifylog.infrastructure.mocking.logger_mock import LoggerMock

ANY = Matcher(kind=MatcherKind.ANY, description="It.is_any()")


def level_matcher(level: LogLevel) -> LogCallMatcher:
    return LogCallMatcher(
        receiver="logger",
        level=Matcher(kind=MatcherKind.EQUALS, description=str(level), value=level),
        event_id=ANY,
        state=ANY,
        exception=ANY,
        formatter=ANY,
    )


class Sample:
    """Category owner."""


class TestLoggerMockRecording:
    """Tests for invocation recording."""

    def test_object_is_facade_logger(self) -> None:
        assert isinstance(LoggerMock().object, Logger)

    def test_records_invocations_in_order(self) -> None:
        mock = LoggerMock()
        mock.object.log_information("first {N}", 1)
        mock.object.log_error("second", event_id=3)

        first, second = mock.invocations
        assert first.level is LogLevel.INFORMATION
        assert str(first.state) == "first 1"
        assert second.level is LogLevel.ERROR
        assert second.event_id == EventId(3)

    def test_log_mock_sees_low_level_call(self) -> None:
        mock = LoggerMock()
        mock.object.log_warning("w")
        assert mock.log_mock.call_count == 1

    def test_reset(self) -> None:
        mock = LoggerMock()
        mock.object.log_debug("x")
        mock.reset()
        assert mock.invocations == ()

    def test_category_from_class(self) -> None:
        mock = LoggerMock(Sample)
        assert mock.category == "Sample"
        assert mock.object.category == "Sample"
        assert repr(mock) == "LoggerMock('Sample')"


class TestLoggerMockVerify:
    """Tests for the verify primitive."""

    def test_default_requires_at_least_once(self) -> None:
        mock = LoggerMock()
        mock.object.log_debug("x")
        mock.verify(level_matcher(LogLevel.DEBUG))

        with pytest.raises(MockVerificationError) as exc_info:
            mock.verify(level_matcher(LogLevel.ERROR))
        assert exc_info.value.summary == (
            "Expected invocation on the mock at least once, but was never performed"
        )

    def test_times_reports_actual_count(self) -> None:
        mock = LoggerMock()
        mock.object.log_debug("x")

        with pytest.raises(MockVerificationError) as exc_info:
            mock.verify(level_matcher(LogLevel.DEBUG), Times.at_least(2))
        assert "at least 2 times, but was 1 time" in str(exc_info.value)

    def test_never_with_no_match(self) -> None:
        mock = LoggerMock()
        mock.object.log_debug("x")
        mock.verify(level_matcher(LogLevel.ERROR), Times.never())

    def test_fail_message_and_diagnostics(self) -> None:
        mock = LoggerMock(Sample)
        mock.object.log_debug("Order {Id}", 5)

        with pytest.raises(MockVerificationError) as exc_info:
            mock.verify(level_matcher(LogLevel.ERROR), fail_message="error expected")
        message = str(exc_info.value)
        assert message.splitlines()[0] == "error expected"
        assert "Performed invocations on logger[Sample]:" in message
        assert "Order 5" in message

    def test_diagnostics_disabled(self) -> None:
        mock = LoggerMock(config=VerifierConfig(show_invocations=False))
        mock.object.log_debug("x")

        with pytest.raises(MockVerificationError) as exc_info:
            mock.verify(level_matcher(LogLevel.ERROR))
        assert exc_info.value.diagnostics == ""
        assert "Performed invocations" not in str(exc_info.value)

    def test_predicate_error_propagates(self) -> None:
        mock = LoggerMock()
        mock.object.log_debug("x")
        failing = Matcher(kind=MatcherKind.PREDICATE, description="boom", predicate=lambda v: 1 / 0)
        matcher = LogCallMatcher(
            receiver="logger",
            level=ANY,
            event_id=ANY,
            state=failing,
            exception=ANY,
            formatter=ANY,
        )
        with pytest.raises(ZeroDivisionError):
            mock.verify(matcher)
