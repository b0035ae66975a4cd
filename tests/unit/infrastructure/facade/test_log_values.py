"""Tests for infrastructure/facade/log_values.py."""

from tests.factories import ELAPSED, POSITION, POSITION_RENDERED, POSITION_TEMPLATE
from verifylog.domain.model.log_state import StructuredMessage, split_structured
from verifylog.infrastructure.facade.log_values import FormattedLogValues


class TestFormattedLogValues:
    """Tests for FormattedLogValues."""

    def test_pairs_end_with_original_format(self) -> None:
        values = FormattedLogValues(POSITION_TEMPLATE, (POSITION, ELAPSED))
        assert list(values) == [
            ("@Position", POSITION),
            ("Elapsed", ELAPSED),
            ("{OriginalFormat}", POSITION_TEMPLATE),
        ]
        assert len(values) == 3
        assert values[-1] == ("{OriginalFormat}", POSITION_TEMPLATE)

    def test_str_renders(self) -> None:
        assert str(FormattedLogValues(POSITION_TEMPLATE, (POSITION, ELAPSED))) == POSITION_RENDERED

    def test_str_without_args_is_template(self) -> None:
        assert str(FormattedLogValues("Order {Id} shipped")) == "Order {Id} shipped"

    def test_null_message(self) -> None:
        values = FormattedLogValues(None)
        assert str(values) == "[null]"
        assert list(values) == [("{OriginalFormat}", "[null]")]

    def test_extra_args_have_no_pair(self) -> None:
        values = FormattedLogValues("Order {Id}", (1, 2))
        assert list(values) == [("Id", 1), ("{OriginalFormat}", "Order {Id}")]
        assert values.args == (1, 2)
        assert split_structured(values) == StructuredMessage("Order {Id}", (1, 2))

    def test_repr(self) -> None:
        assert repr(FormattedLogValues("x {A}", (1,))) == "FormattedLogValues('x {A}', (1,))"
