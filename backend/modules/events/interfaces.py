"""
Events module interface.
"""

from typing import Protocol, runtime_checkable

from .models import CreateEventRequest, Event, UpdateEventRequest


@runtime_checkable
class IEventService(Protocol):
    """Interface for event operations. All methods are tenant-scoped."""

    async def list_events(self, user_id: str) -> list[Event]:
        """List the user's events ordered by event date."""
        ...

    async def get_event(self, user_id: str, event_id: str) -> Event:
        """
        Get one event.

        Raises:
            EventNotFoundError: If the event doesn't exist for this user.
        """
        ...

    async def create_event(self, user_id: str, request: CreateEventRequest) -> Event:
        """Create an event in 'ativo' status."""
        ...

    async def update_event(
        self, user_id: str, event_id: str, request: UpdateEventRequest
    ) -> Event:
        """
        Apply a partial update.

        Raises:
            EventNotFoundError: If the event doesn't exist for this user.
            EmptyEventUpdateError: If the request carries no fields.
        """
        ...

    async def delete_event(self, user_id: str, event_id: str) -> None:
        """
        Delete an event and its checklist.

        Raises:
            EventNotFoundError: If the event doesn't exist for this user.
        """
        ...
