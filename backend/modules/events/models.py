"""
Events module data models.

An event is a booked job (wedding, corporate party, ...). Checklist items
hang off an event and are deleted with it.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class EventStatus(str, Enum):
    """Stored status values of an event."""

    ACTIVE = "ativo"
    COMPLETED = "concluido"


class Event(BaseModel):
    """An event as stored."""

    id: str = Field(..., description="Event ID (UUID)")
    user_id: str = Field(..., description="Owner (tenant)")
    name: str
    event_date: date
    event_type: str
    status: EventStatus = EventStatus.ACTIVE
    notes: Optional[str] = None
    contract_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateEventRequest(BaseModel):
    """Request body for creating an event."""

    name: str = Field(..., min_length=1, max_length=200)
    event_date: date
    event_type: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(None, max_length=5000)


class UpdateEventRequest(BaseModel):
    """Partial update of an event."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    event_date: Optional[date] = None
    event_type: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[EventStatus] = None
    notes: Optional[str] = Field(None, max_length=5000)

    @field_validator("name", "event_date", "event_type", "status")
    @classmethod
    def _not_null(cls, value):
        # Omit a field to leave it unchanged; only notes can be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value
