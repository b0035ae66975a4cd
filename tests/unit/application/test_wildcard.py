"""Tests for application/wildcard.py."""

import pytest

from verifylog.application.wildcard import equals_ignore_case, is_wildcard, wildcard_match


class TestIsWildcard:
    """Tests for is_wildcard."""

    @pytest.mark.parametrize("text", ["*", "Test*", "a*b", "\\**"])
    def test_unescaped_star(self, text: str) -> None:
        assert is_wildcard(text)

    @pytest.mark.parametrize("text", ["", None, "Test", "a\\*b", "a?b"])
    def test_no_unescaped_star(self, text: str | None) -> None:
        assert not is_wildcard(text)


class TestEqualsIgnoreCase:
    """Tests for equals_ignore_case."""

    def test_case_insensitive(self) -> None:
        assert equals_ignore_case("Test Message", "test message")

    def test_empty_and_none(self) -> None:
        assert equals_ignore_case(None, "")
        assert not equals_ignore_case(None, "x")
        assert not equals_ignore_case("x", "")


class TestWildcardMatch:
    """Tests for wildcard_match."""

    def test_star_matches_run(self) -> None:
        assert wildcard_match("Test*message", "Test gibberish message")
        assert not wildcard_match("Test*something", "Test gibberish message")

    def test_whole_string(self) -> None:
        assert not wildcard_match("Test*", "A Test message")
        assert wildcard_match("*Test*", "A Test message")

    def test_case_insensitive(self) -> None:
        assert wildcard_match("TEST*", "test message")

    def test_question_mark_with_star(self) -> None:
        assert wildcard_match("Order ? *", "Order 7 shipped")
        assert not wildcard_match("Order ? *", "Order 77 shipped")

    def test_without_star_is_equality(self) -> None:
        assert wildcard_match("order ?", "Order ?")
        assert not wildcard_match("order ?", "Order 7")

    def test_regex_characters_are_literal(self) -> None:
        assert wildcard_match("Cost (USD) *", "Cost (USD) 5.00")
        assert not wildcard_match("a.c*", "abc")

    def test_escaped_star_is_literal(self) -> None:
        assert wildcard_match("5 \\* 3 = *", "5 * 3 = 15")
        assert not wildcard_match("5 \\* 3 = *", "5 x 3 = 15")

    def test_star_spans_lines(self) -> None:
        assert wildcard_match("first*last", "first\nmiddle\nlast")

    def test_escaped_star_without_wildcard(self) -> None:
        assert wildcard_match("Progress 50\\*", "Progress 50*")
        assert wildcard_match("progress 50\\*", "PROGRESS 50*")
        assert not wildcard_match("Progress 50\\*", "Progress 50")
        assert not wildcard_match("Progress 50\\*", "Progress 50\\*")

    def test_escaped_question_mark_without_wildcard(self) -> None:
        assert wildcard_match("Retry\\?", "Retry?")
        assert not wildcard_match("Retry\\?", "Retry!")
