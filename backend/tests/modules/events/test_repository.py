"""Tests for the event repository."""

import pytest
from unittest.mock import MagicMock

from modules.events.models import EventStatus
from modules.events.repository import EventRepository


def create_mock_event_data(event_id: str = "event-1", status: str = "ativo") -> dict:
    return {
        "id": event_id,
        "user_id": "user-1",
        "name": "Casamento Ana e Leo",
        "event_date": "2026-11-21",
        "event_type": "casamento",
        "status": status,
        "notes": None,
        "contract_url": None,
        "created_at": "2026-10-01T12:00:00+00:00",
        "updated_at": "2026-10-01T12:00:00+00:00",
    }


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def repo(db):
    return EventRepository(db)


class TestEventRepository:
    def test_list_events_ordered_by_date(self, repo, db):
        scoped = db.table.return_value.select.return_value.eq.return_value
        scoped.order.return_value.execute.return_value.data = [
            create_mock_event_data("event-1"),
            create_mock_event_data("event-2", status="concluido"),
        ]

        events = repo.list_events("user-1")

        db.table.assert_called_with("events")
        scoped.order.assert_called_with("event_date")
        assert events[1].status == EventStatus.COMPLETED

    def test_get_event_not_found(self, repo, db):
        db.table.return_value.select.return_value.eq.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_event("user-1", "missing") is None

    def test_create_event(self, repo, db):
        db.table.return_value.insert.return_value.execute.return_value.data = [create_mock_event_data()]
        event = repo.create_event({"name": "Casamento Ana e Leo"})
        assert event.id == "event-1"
        assert str(event.event_date) == "2026-11-21"

    def test_update_event_sets_updated_at(self, repo, db):
        chain = db.table.return_value.update.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.data = [create_mock_event_data(status="concluido")]

        event = repo.update_event("user-1", "event-1", {"status": "concluido"})

        data = db.table.return_value.update.call_args.args[0]
        assert data["status"] == "concluido"
        assert "updated_at" in data
        assert event.status == EventStatus.COMPLETED

    def test_delete_event(self, repo, db):
        chain = db.table.return_value.delete.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.data = [create_mock_event_data()]
        assert repo.delete_event("user-1", "event-1") is True

        chain.execute.return_value.data = []
        assert repo.delete_event("user-1", "event-1") is False

    def test_missing_status_defaults_to_active(self, repo):
        row = create_mock_event_data()
        row["status"] = None
        assert repo._map_to_event(row).status == EventStatus.ACTIVE
