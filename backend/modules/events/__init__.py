"""
Events module.

Booked events, the parents of checklist items.

Public API:
- IEventService: Interface for event operations
- Event, EventStatus: Event records
- EventNotFoundError: Raised for missing or foreign events
"""

from .interfaces import IEventService
from .models import CreateEventRequest, Event, EventStatus, UpdateEventRequest
from .exceptions import EmptyEventUpdateError, EventError, EventNotFoundError

__all__ = [
    "IEventService",
    "CreateEventRequest",
    "Event",
    "EventStatus",
    "UpdateEventRequest",
    "EmptyEventUpdateError",
    "EventError",
    "EventNotFoundError",
]
