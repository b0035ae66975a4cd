"""Tests for infrastructure/mocking/diagnostics.py."""

from tests.factories import make_invocation
from verifylog.domain.model.configuration import VerifierConfig
from verifylog.domain.model.log_level import LogLevel
from verifylog.infrastructure.mocking.diagnostics import render_invocations


class TestRenderInvocations:
    """Tests for render_invocations."""

    def test_no_invocations(self) -> None:
        assert render_invocations((), VerifierConfig()) == "No invocations performed on logger."

    def test_table_lists_invocations(self) -> None:
        invocations = (
            make_invocation("Order {Id}", 7, level=LogLevel.WARNING, event_id=3),
            make_invocation(None, exception=ValueError("boom")),
        )
        text = render_invocations(invocations, VerifierConfig())
        assert text.splitlines()[0].strip() == "Performed invocations on logger:"
        assert "WARNING" in text
        assert "Order 7" in text
        assert "EventId(3)" in text
        assert "[null]" in text
        assert "ValueError('boom')" in text

    def test_max_invocations(self) -> None:
        invocations = tuple(make_invocation(f"message {i}") for i in range(5))
        text = render_invocations(invocations, VerifierConfig(max_invocations=2))
        assert "message 1" in text
        assert "message 2" not in text
        assert "... 3 more not shown (max_invocations=2)" in text

    def test_disabled(self) -> None:
        invocations = (make_invocation("x"),)
        assert render_invocations(invocations, VerifierConfig(show_invocations=False)) == ""

    def test_label(self) -> None:
        assert render_invocations((), VerifierConfig(), label="logger[Orders]") == (
            "No invocations performed on logger[Orders]."
        )

    def test_no_trailing_whitespace(self) -> None:
        text = render_invocations((make_invocation("x"),), VerifierConfig())
        assert all(line == line.rstrip() for line in text.splitlines())
