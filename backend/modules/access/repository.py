"""
Usage counts for the access module.

Reads the tables whose sizes the limits apply to:
- events (active only)
- leads
- contents (per calendar month)
- checklist_items (per event)
"""

from datetime import datetime
from typing import Optional

from supabase import Client

from modules.events.models import EventStatus

from .models import UsageSnapshot


ACTIVE_EVENT_STATUS = EventStatus.ACTIVE.value


class AccessUsageRepository:
    """
    Counts rows per tenant using PostgREST exact counts.

    Spans several tables, so there is no single ``table_name``. Only ids
    are selected; the row payload is never used.
    """

    def __init__(self, db: Client) -> None:
        self._db = db

    def _count(self, table: str, user_id: str):
        return self._db.table(table).select("id", count="exact").eq("user_id", user_id)

    @staticmethod
    def _total(result) -> int:
        return result.count or 0

    def count_active_events(self, user_id: str) -> int:
        result = self._count("events", user_id).eq("status", ACTIVE_EVENT_STATUS).execute()
        return self._total(result)

    def count_leads(self, user_id: str) -> int:
        return self._total(self._count("leads", user_id).execute())

    def count_contents_between(
        self,
        user_id: str,
        period_start: datetime,
        period_end: datetime,
    ) -> int:
        """Contents created in [period_start, period_end)."""
        result = (
            self._count("contents", user_id)
            .gte("created_at", period_start.isoformat())
            .lt("created_at", period_end.isoformat())
            .execute()
        )
        return self._total(result)

    def count_checklist_items(self, user_id: str, event_id: str) -> int:
        result = self._count("checklist_items", user_id).eq("event_id", event_id).execute()
        return self._total(result)

    def get_usage(
        self,
        user_id: str,
        period_start: datetime,
        period_end: datetime,
        event_id: Optional[str] = None,
    ) -> UsageSnapshot:
        return UsageSnapshot(
            active_events=self.count_active_events(user_id),
            leads=self.count_leads(user_id),
            contents_this_month=self.count_contents_between(user_id, period_start, period_end),
            tasks_in_event=(
                self.count_checklist_items(user_id, event_id) if event_id else None
            ),
            period_start=period_start,
            period_end=period_end,
        )
