"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the tenant scoping every table query needs.
"""

from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Tenant-scoped query builders via _scoped()
    - Generic type parameter for model type hints

    Subclasses set ``table_name`` and map rows to Pydantic models internally.

    Example:
        class EventRepository(BaseRepository[Event]):
            table_name = "events"

            def get_by_id(self, user_id: str, event_id: str) -> Optional[Event]:
                result = self._scoped(user_id).eq("id", event_id).execute()
                row = self._first(result.data)
                return self._map_to_event(row) if row else None
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        """Query builder for this repository's table."""
        return self._db.table(self.table_name)

    def _scoped(self, user_id: str, columns: str = "*"):
        """SELECT builder restricted to rows owned by ``user_id``."""
        return self._table().select(columns).eq("user_id", user_id)

    @staticmethod
    def _first(rows: Optional[list[dict[str, Any]]]) -> Optional[dict[str, Any]]:
        """First row of a result set, or None when empty."""
        if not rows:
            return None
        return rows[0]
