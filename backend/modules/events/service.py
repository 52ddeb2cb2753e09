"""
Event service implementation.
"""

import logging
from typing import Callable, Optional

from .exceptions import EmptyEventUpdateError, EventNotFoundError
from .interfaces import IEventService
from .models import CreateEventRequest, Event, EventStatus, UpdateEventRequest
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventService(IEventService):
    """
    Event CRUD on top of EventRepository.

    ``on_delete(user_id, event_id)`` runs after an event is deleted; the
    container uses it to drop the checklist cache of that event.
    """

    def __init__(
        self,
        repository: EventRepository,
        on_delete: Optional[Callable[[str, str], None]] = None,
    ):
        self._repository = repository
        self._on_delete = on_delete

    async def list_events(self, user_id: str) -> list[Event]:
        return self._repository.list_events(user_id)

    async def get_event(self, user_id: str, event_id: str) -> Event:
        event = self._repository.get_event(user_id, event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def create_event(self, user_id: str, request: CreateEventRequest) -> Event:
        event = self._repository.create_event({
            "user_id": user_id,
            "name": request.name,
            "event_date": request.event_date.isoformat(),
            "event_type": request.event_type,
            "status": EventStatus.ACTIVE.value,
            "notes": request.notes or None,
        })
        logger.info("Created event %s for user %s", event.id, user_id)
        return event

    async def update_event(
        self, user_id: str, event_id: str, request: UpdateEventRequest
    ) -> Event:
        fields = request.model_dump(mode="json", exclude_unset=True)
        if not fields:
            raise EmptyEventUpdateError(event_id)

        event = self._repository.update_event(user_id, event_id, fields)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def delete_event(self, user_id: str, event_id: str) -> None:
        if not self._repository.delete_event(user_id, event_id):
            raise EventNotFoundError(event_id)
        if self._on_delete is not None:
            self._on_delete(user_id, event_id)
        logger.info("Deleted event %s for user %s", event_id, user_id)
