"""Tests for domain/model/event_id.py."""

import pytest

from verifylog.domain.model.event_id import EventId


class TestEventIdCreation:
    """Tests for EventId creation and validation."""

    def test_with_name(self) -> None:
        event_id = EventId(10, "OrderShipped")
        assert event_id.id == 10
        assert event_id.name == "OrderShipped"

    def test_bool_id_raises(self) -> None:
        with pytest.raises(TypeError, match="id must be int"):
            EventId(True)  # type: ignore[arg-type]

    def test_str_id_raises(self) -> None:
        with pytest.raises(TypeError, match="id must be int, got str"):
            EventId("10")  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        event_id = EventId(1)
        with pytest.raises(AttributeError):
            event_id.id = 2  # type: ignore[misc]


class TestEventIdEquality:
    """Tests for id-only equality."""

    def test_name_ignored(self) -> None:
        assert EventId(10, "Order") == EventId(10)
        assert hash(EventId(10, "Order")) == hash(EventId(10))

    def test_different_ids(self) -> None:
        assert EventId(10) != EventId(11)

    def test_not_equal_to_int(self) -> None:
        assert EventId(10) != 10


class TestEventIdCoerce:
    """Tests for EventId.coerce."""

    def test_none_is_zero(self) -> None:
        assert EventId.coerce(None) == EventId(0)

    def test_int(self) -> None:
        assert EventId.coerce(5) == EventId(5)

    def test_event_id_unchanged(self) -> None:
        event_id = EventId(5, "x")
        assert EventId.coerce(event_id) is event_id


class TestEventIdFormatting:
    """Tests for str/repr."""

    def test_str_prefers_name(self) -> None:
        assert str(EventId(10, "Order")) == "Order"
        assert str(EventId(10)) == "10"

    def test_repr(self) -> None:
        assert repr(EventId(10, "Order")) == "EventId(10, 'Order')"
        assert repr(EventId(10)) == "EventId(10)"
