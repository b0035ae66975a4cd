"""Tests for domain/model/matcher.py."""

import re

import pytest

from tests.factories import make_invocation
from verifylog.domain.model.log_level import LogLevel
from verifylog.domain.model.matcher import LogCallMatcher, Matcher, MatcherKind

ANY = Matcher(kind=MatcherKind.ANY, description="It.is_any()")


class TestMatcherFailFirst:
    """Tests for FAIL-FIRST validation in Matcher."""

    def test_empty_description_raises(self) -> None:
        with pytest.raises(ValueError, match="description must not be empty"):
            Matcher(kind=MatcherKind.ANY, description="")

    def test_predicate_required(self) -> None:
        with pytest.raises(TypeError, match="requires a callable predicate"):
            Matcher(kind=MatcherKind.PREDICATE, description="p")

    def test_regex_requires_compiled_pattern(self) -> None:
        with pytest.raises(TypeError, match="requires a compiled pattern"):
            Matcher(kind=MatcherKind.REGEX, description="r", value="abc")

    def test_value_type_must_be_type(self) -> None:
        with pytest.raises(TypeError, match="value_type must be a type"):
            Matcher(kind=MatcherKind.ANY, description="a", value_type="str")  # type: ignore[arg-type]


class TestMatcherMatches:
    """Tests for Matcher.matches per kind."""

    def test_any_accepts_none_and_instances(self) -> None:
        matcher = Matcher(kind=MatcherKind.ANY, description="a", value_type=ValueError)
        assert matcher.matches(None)
        assert matcher.matches(ValueError("x"))
        assert not matcher.matches(KeyError("x"))

    def test_equals(self) -> None:
        matcher = Matcher(kind=MatcherKind.EQUALS, description="2", value=2)
        assert matcher.matches(2)
        assert not matcher.matches(3)

    def test_predicate_checks_type_first(self) -> None:
        matcher = Matcher(
            kind=MatcherKind.PREDICATE,
            description="p",
            value_type=str,
            predicate=lambda v: v.startswith("a"),
        )
        assert matcher.matches("abc")
        assert not matcher.matches("xyz")
        assert not matcher.matches(42)

    def test_predicate_exception_propagates(self) -> None:
        matcher = Matcher(kind=MatcherKind.PREDICATE, description="p", predicate=lambda v: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            matcher.matches("x")

    def test_not_none(self) -> None:
        matcher = Matcher(kind=MatcherKind.NOT_NONE, description="n")
        assert matcher.matches(0)
        assert not matcher.matches(None)

    def test_regex_searches_str(self) -> None:
        matcher = Matcher(kind=MatcherKind.REGEX, description="r", value=re.compile(r"\d+"))
        assert matcher.matches("order 42")
        assert matcher.matches(42)
        assert not matcher.matches("none")
        assert not matcher.matches(None)

    def test_str_is_description(self) -> None:
        assert str(ANY) == "It.is_any()"
        assert repr(ANY) == "It.is_any()"


class TestLogCallMatcher:
    """Tests for LogCallMatcher."""

    def _matcher(self, level: LogLevel) -> LogCallMatcher:
        return LogCallMatcher(
            receiver="logger",
            level=Matcher(kind=MatcherKind.EQUALS, description=str(level), value=level),
            event_id=ANY,
            state=ANY,
            exception=ANY,
            formatter=ANY,
        )

    def test_matches_all_slots(self) -> None:
        matcher = self._matcher(LogLevel.WARNING)
        assert matcher.matches(make_invocation("x", level=LogLevel.WARNING))
        assert not matcher.matches(make_invocation("x", level=LogLevel.ERROR))

    def test_str_renders_log_call(self) -> None:
        assert str(self._matcher(LogLevel.DEBUG)) == (
            "lambda logger: logger.log(LogLevel.DEBUG, It.is_any(), It.is_any(), "
            "It.is_any(), It.is_any())"
        )
