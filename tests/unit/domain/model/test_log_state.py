"""Tests for domain/model/log_state.py."""

from dataclasses import dataclass

from verifylog.domain.model.log_state import (
    NULL_MESSAGE,
    ORIGINAL_FORMAT_KEY,
    StructuredMessage,
    split_structured,
)


@dataclass(frozen=True)
class _Record:
    template: str | None
    args: tuple[object, ...]


class TestSplitStructured:
    """Tests for split_structured."""

    def test_pairs_with_template(self) -> None:
        state = [("Id", 7), ("Name", "x"), (ORIGINAL_FORMAT_KEY, "Order {Id} {Name}")]
        assert split_structured(state) == StructuredMessage("Order {Id} {Name}", (7, "x"))

    def test_none_template_is_null_sentinel(self) -> None:
        assert split_structured([(ORIGINAL_FORMAT_KEY, None)]) == StructuredMessage(NULL_MESSAGE, ())

    def test_plain_string_is_not_structured(self) -> None:
        assert split_structured("Order 7") is None

    def test_pairs_without_template_key(self) -> None:
        assert split_structured([("Id", 7)]) is None

    def test_non_pair_items(self) -> None:
        assert split_structured([1, 2, 3]) is None

    def test_non_sequence(self) -> None:
        assert split_structured(42) is None

    def test_state_with_template_and_args_keeps_every_arg(self) -> None:
        assert split_structured(_Record("Order {Id}", (1, 2))) == StructuredMessage("Order {Id}", (1, 2))

    def test_state_with_none_template(self) -> None:
        assert split_structured(_Record(None, ())) == StructuredMessage(NULL_MESSAGE, ())
