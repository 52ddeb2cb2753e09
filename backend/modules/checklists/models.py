"""
Checklist module data models.

Items belong to an event and are grouped into three phases. Within one
(event, phase) partition, ``position`` orders the items.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ChecklistPhase(str, Enum):
    """When in the event lifecycle an item applies."""

    PRE = "pre"
    DURING = "during"
    POST = "post"


class MoveDirection(str, Enum):
    """Direction for swapping an item with its neighbour."""

    UP = "up"
    DOWN = "down"


class CopyMode(str, Enum):
    """How copied or templated items combine with an existing checklist."""

    REPLACE = "replace"  # Delete the current items first
    ADD = "add"          # Append after the current items


class ChecklistItem(BaseModel):
    """A single checklist item as stored."""

    id: str = Field(..., description="Item ID (UUID)")
    event_id: str = Field(..., description="Parent event")
    user_id: str = Field(..., description="Owner (tenant)")
    phase: ChecklistPhase
    text: str
    completed: bool = False
    position: int = Field(..., ge=0, description="Order within (event, phase)")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ChecklistItemDraft(BaseModel):
    """Phase and text for an item that has not been stored yet."""

    phase: ChecklistPhase
    text: str = Field(..., min_length=1, max_length=500)


class AddChecklistItemRequest(ChecklistItemDraft):
    """Request body for adding one item."""

    pass


class UpdateChecklistItemRequest(BaseModel):
    """Partial update. Position is changed only through reorder and move."""

    text: Optional[str] = Field(None, min_length=1, max_length=500)
    completed: Optional[bool] = None


class BulkChecklistRequest(BaseModel):
    """Request body for inserting many items at once."""

    items: list[ChecklistItemDraft] = Field(..., min_length=1)


class ReorderChecklistRequest(BaseModel):
    """New order for every item of one phase."""

    phase: ChecklistPhase
    ordered_ids: list[str] = Field(..., description="All item ids of the phase, in order")


class MoveChecklistItemRequest(BaseModel):
    direction: MoveDirection


class ApplyTemplateRequest(BaseModel):
    template_id: str = Field(..., description="Built-in template id, e.g. 'casamento'")
    mode: CopyMode = CopyMode.ADD


class CopyChecklistRequest(BaseModel):
    source_event_id: str = Field(..., description="Event to copy items from")
    mode: CopyMode = CopyMode.ADD


class RemoveAllResponse(BaseModel):
    deleted: int = Field(..., description="Number of items removed")


class ChecklistTemplate(BaseModel):
    """A built-in list of items that can be applied to an event."""

    id: str
    name: str
    description: str
    items: list[ChecklistItemDraft]

    model_config = {"frozen": True}
