"""
Checklist repository for database access.

Encapsulates all Supabase queries and row mapping for the
``checklist_items`` table. Every query is scoped to the owning user.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository

from .exceptions import InvalidPhaseError
from .models import ChecklistItem, ChecklistPhase


class ChecklistItemRepository(BaseRepository[ChecklistItem]):
    """
    Repository for checklist items.

    Methods raise whatever the Supabase client raises; the store above
    converts failures into Results.
    """

    table_name = "checklist_items"

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_items(
        self,
        user_id: str,
        event_id: str,
        phase: Optional[ChecklistPhase] = None,
    ) -> list[ChecklistItem]:
        """Items of an event (optionally one phase), ordered by position."""
        query = self._scoped(user_id).eq("event_id", event_id)
        if phase is not None:
            query = query.eq("phase", phase.value)
        result = query.order("position").execute()
        return [self._map_to_item(row) for row in result.data or []]

    def get_item(self, user_id: str, item_id: str) -> Optional[ChecklistItem]:
        result = self._scoped(user_id).eq("id", item_id).execute()
        row = self._first(result.data)
        return self._map_to_item(row) if row else None

    def max_position(self, user_id: str, event_id: str, phase: ChecklistPhase) -> Optional[int]:
        """Highest position in the partition, or None when it is empty."""
        result = (
            self._scoped(user_id, "position")
            .eq("event_id", event_id)
            .eq("phase", phase.value)
            .order("position", desc=True)
            .limit(1)
            .execute()
        )
        row = self._first(result.data)
        return row["position"] if row else None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert_items(self, rows: list[dict[str, Any]]) -> list[ChecklistItem]:
        """Insert one or more rows in a single request."""
        result = self._table().insert(rows).execute()
        return [self._map_to_item(row) for row in result.data or []]

    def update_item(
        self,
        user_id: str,
        item_id: str,
        fields: dict[str, Any],
    ) -> Optional[ChecklistItem]:
        """Apply a partial update. Returns None if no row matched."""
        data = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = (
            self._table()
            .update(data)
            .eq("id", item_id)
            .eq("user_id", user_id)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_item(row) if row else None

    def delete_item(self, user_id: str, item_id: str) -> Optional[ChecklistItem]:
        """Delete one item. Returns the deleted row, or None if nothing matched."""
        result = (
            self._table()
            .delete()
            .eq("id", item_id)
            .eq("user_id", user_id)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_item(row) if row else None

    def delete_for_event(self, user_id: str, event_id: str) -> int:
        """Delete every item of an event. Returns the number of rows removed."""
        result = (
            self._table()
            .delete()
            .eq("event_id", event_id)
            .eq("user_id", user_id)
            .execute()
        )
        return len(result.data or [])

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def _map_to_item(self, data: dict[str, Any]) -> ChecklistItem:
        """Map a database row to a ChecklistItem."""
        try:
            phase = ChecklistPhase(data["phase"])
        except ValueError:
            raise InvalidPhaseError(data["phase"], data.get("id"))

        return ChecklistItem(
            id=data["id"],
            event_id=data["event_id"],
            user_id=data["user_id"],
            phase=phase,
            text=data["text"],
            completed=bool(data.get("completed", False)),
            position=data["position"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
