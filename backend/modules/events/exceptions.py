"""
Events module exceptions.
"""

from shared.exceptions import BoothdeskError, NotFoundError, ValidationError


class EventError(BoothdeskError):
    """Base exception for event-related errors."""

    pass


class EventNotFoundError(EventError, NotFoundError):
    """Raised when an event does not exist for this user."""

    def __init__(self, event_id: str):
        super().__init__(
            f"Event not found: {event_id}",
            code="EVENT_NOT_FOUND",
            details={"event_id": event_id},
        )


class EmptyEventUpdateError(EventError, ValidationError):
    """Raised when an update request carries no fields."""

    def __init__(self, event_id: str):
        super().__init__(
            "No fields to update",
            code="EVENT_EMPTY_UPDATE",
            details={"event_id": event_id},
        )
