"""
Checklists module interface.

Every operation returns a Result: callers check ``result.ok`` and read
``result.value`` or ``result.error`` (always a ChecklistError).
"""

from typing import Optional, Protocol, runtime_checkable

from shared.result import Result

from .exceptions import ChecklistError
from .models import (
    ChecklistItem,
    ChecklistItemDraft,
    ChecklistPhase,
    CopyMode,
    MoveDirection,
)


@runtime_checkable
class IChecklistStore(Protocol):
    """Per-event checklist storage with per-phase ordering."""

    async def list_items(
        self, user_id: str, event_id: str
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """Items of an event ordered by position."""
        ...

    async def add_item(
        self, user_id: str, event_id: str, phase: ChecklistPhase, text: str
    ) -> Result[ChecklistItem, ChecklistError]:
        """Append an item at the end of its phase (max position + 1, or 0)."""
        ...

    async def update_item(
        self,
        user_id: str,
        item_id: str,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Result[ChecklistItem, ChecklistError]:
        """Partial update of text and/or completion. Never moves the item."""
        ...

    async def toggle_item(self, user_id: str, item_id: str) -> Result[ChecklistItem, ChecklistError]:
        """Flip the completion flag of an item."""
        ...

    async def remove_item(self, user_id: str, item_id: str) -> Result[bool, ChecklistError]:
        """Delete one item; sibling positions are left as they are."""
        ...

    async def remove_all(self, user_id: str, event_id: str) -> Result[int, ChecklistError]:
        """Delete every item of an event, returning how many were removed."""
        ...

    async def reorder(
        self,
        user_id: str,
        event_id: str,
        phase: ChecklistPhase,
        ordered_ids: list[str],
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """
        Set each item's position to its index in ``ordered_ids``.

        The ids must be exactly the items of the phase, each listed once.
        """
        ...

    async def move_item(
        self, user_id: str, item_id: str, direction: MoveDirection
    ) -> Result[bool, ChecklistError]:
        """Swap an item's position with its neighbour in the same phase."""
        ...

    async def copy_from(
        self, user_id: str, source_event_id: str
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """Read another event's items for copying. Never writes."""
        ...

    async def apply_bulk(
        self, user_id: str, event_id: str, items: list[ChecklistItemDraft]
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """Insert many items in one request, appending within each phase."""
        ...

    async def apply_template(
        self, user_id: str, event_id: str, template_id: str, mode: CopyMode
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """Apply a built-in template, replacing or appending."""
        ...

    async def copy_checklist(
        self, user_id: str, event_id: str, source_event_id: str, mode: CopyMode
    ) -> Result[list[ChecklistItem], ChecklistError]:
        """Copy another event's items into this event, replacing or appending."""
        ...

    def invalidate(self, user_id: str, event_id: str) -> None:
        """Drop the cached item list of an event."""
        ...
