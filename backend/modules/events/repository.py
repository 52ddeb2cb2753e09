"""
Event repository for database access.

Encapsulates the Supabase queries for the ``events`` table.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Event, EventStatus


class EventRepository(BaseRepository[Event]):
    """
    Repository for events.

    Every query filters on user_id; a row owned by someone else is
    indistinguishable from a missing one.
    """

    table_name = "events"

    def list_events(self, user_id: str) -> list[Event]:
        """All events of a user, soonest first."""
        result = self._scoped(user_id).order("event_date").execute()
        return [self._map_to_event(row) for row in result.data or []]

    def get_event(self, user_id: str, event_id: str) -> Optional[Event]:
        result = self._scoped(user_id).eq("id", event_id).execute()
        row = self._first(result.data)
        return self._map_to_event(row) if row else None

    def create_event(self, data: dict[str, Any]) -> Event:
        result = self._table().insert(data).execute()
        return self._map_to_event(result.data[0])

    def update_event(
        self,
        user_id: str,
        event_id: str,
        fields: dict[str, Any],
    ) -> Optional[Event]:
        data = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = (
            self._table()
            .update(data)
            .eq("id", event_id)
            .eq("user_id", user_id)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_event(row) if row else None

    def delete_event(self, user_id: str, event_id: str) -> bool:
        """Delete an event; its checklist items go with it (ON DELETE CASCADE)."""
        result = (
            self._table()
            .delete()
            .eq("id", event_id)
            .eq("user_id", user_id)
            .execute()
        )
        return bool(result.data)

    def _map_to_event(self, data: dict[str, Any]) -> Event:
        """Map a database row to an Event."""
        return Event(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            event_date=data["event_date"],
            event_type=data["event_type"],
            status=data.get("status") or EventStatus.ACTIVE,
            notes=data.get("notes"),
            contract_url=data.get("contract_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
