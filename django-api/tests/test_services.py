"""Unit tests for EventService.

These test orchestration, partial updates and domain error raising.
Run with: pytest tests/test_services.py -v
"""

from datetime import date

import pytest

from agenda.domain import EventNotFoundError, ValidationError
from factories import at


class TestCreateEvent:
    """Tests for EventService.create_event."""

    def test_create_stores_event(self, service, store):
        event = service.create_event("Standup", at("2024-06-01T09:00"), at("2024-06-01T09:15"), ["work"])
        assert store.get_by_id(event.id) == event

    def test_create_rejects_inverted_range(self, service, store):
        with pytest.raises(ValidationError) as exc_info:
            service.create_event("Oops", at("2024-06-01T10:00"), at("2024-06-01T09:00"))
        assert exc_info.value.field == "endTime"
        assert store.get_all() == []

    def test_create_rejects_empty_title(self, service, store):
        with pytest.raises(ValidationError) as exc_info:
            service.create_event("", at("2024-06-01T09:00"), at("2024-06-01T10:00"))
        assert exc_info.value.field == "title"
        assert store.get_all() == []


class TestUpdateEvent:
    """Tests for EventService.update_event."""

    def test_partial_update_keeps_other_fields(self, service):
        event = service.create_event("A", at("2024-06-01T09:00"), at("2024-06-01T10:00"), ["x"])

        updated = service.update_event(event.id, title="B")

        assert updated.title == "B"
        assert updated.tags == ["x"]
        assert updated.start_time == event.start_time
        assert updated.end_time == event.end_time
        assert updated.created_at == event.created_at
        assert service.get_event(event.id) == updated

    def test_empty_tag_list_clears_tags(self, service):
        event = service.create_event("A", at("2024-06-01T09:00"), at("2024-06-01T10:00"), ["x"])
        assert service.update_event(event.id, tags=[]).tags == []

    def test_invalid_update_leaves_store_untouched(self, service):
        event = service.create_event("A", at("2024-06-01T09:00"), at("2024-06-01T10:00"))

        with pytest.raises(ValidationError) as exc_info:
            service.update_event(event.id, end_time=at("2024-06-01T08:00"))

        assert exc_info.value.field == "endTime"
        assert service.get_event(event.id) == event

    def test_update_missing_event_raises(self, service):
        with pytest.raises(EventNotFoundError):
            service.update_event("missing", title="B")


class TestDeleteEvent:
    """Tests for EventService.delete_event."""

    def test_delete_then_get_raises(self, service):
        event = service.create_event("A", at("2024-06-01T09:00"), at("2024-06-01T10:00"))
        service.delete_event(event.id)
        with pytest.raises(EventNotFoundError):
            service.get_event(event.id)

    def test_delete_missing_event_raises(self, service):
        with pytest.raises(EventNotFoundError):
            service.delete_event("missing")


class TestQueries:
    """Tests for listing, date and search queries."""

    @pytest.fixture
    def seeded(self, service):
        return [
            service.create_event("Gym", at("2024-06-02T07:00"), at("2024-06-02T08:00"), ["Health"]),
            service.create_event("Team Meeting", at("2024-06-01T10:00"), at("2024-06-01T11:00"), ["work"]),
            service.create_event("Lunch", at("2024-06-01T12:00"), at("2024-06-01T13:00"), []),
            service.create_event("Retro", at("2024-06-01T08:00"), at("2024-06-01T09:00"), ["WORK", "team"]),
        ]

    def test_list_orders_by_start_time(self, service, seeded):
        titles = [event.title for event in service.list_events()]
        assert titles == ["Retro", "Team Meeting", "Lunch", "Gym"]

    def test_list_filters_by_tag_ignoring_case(self, service, seeded):
        titles = [event.title for event in service.list_events(tag="Work")]
        assert titles == ["Retro", "Team Meeting"]

    def test_tag_filter_is_exact(self, service, seeded):
        assert service.list_events(tag="wor") == []

    def test_list_filters_by_date(self, service, seeded):
        titles = [event.title for event in service.list_events(on_date=date(2024, 6, 2))]
        assert titles == ["Gym"]

    def test_list_applies_limit_after_ordering(self, service, seeded):
        titles = [event.title for event in service.list_events(limit=2)]
        assert titles == ["Retro", "Team Meeting"]

    def test_filters_combine(self, service, seeded):
        events = service.list_events(on_date=date(2024, 6, 1), tag="work", limit=1)
        assert [event.title for event in events] == ["Retro"]

    def test_events_on(self, service, seeded):
        titles = [event.title for event in service.events_on(date(2024, 6, 1))]
        assert titles == ["Retro", "Team Meeting", "Lunch"]

    def test_search(self, service, seeded):
        assert [event.title for event in service.search_events("meet")] == ["Team Meeting"]

    def test_search_rejects_empty_query(self, service, seeded):
        with pytest.raises(ValidationError) as exc_info:
            service.search_events("")
        assert exc_info.value.field == "query"
