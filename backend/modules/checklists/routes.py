"""
Checklist API endpoints.

Three routers:
- event_router: /api/events/{event_id}/checklist...
- item_router: /api/checklist-items/{item_id}...
- template_router: /api/checklist-templates

Failed store Results are raised as their ChecklistError and rendered by
the app's error handler.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_checklist_store, get_event_service
from api.middleware.auth import get_current_user
from modules.events.interfaces import IEventService
from modules.events.models import Event
from shared.models import AuthenticatedUser

from .interfaces import IChecklistStore
from .models import (
    AddChecklistItemRequest,
    ApplyTemplateRequest,
    BulkChecklistRequest,
    ChecklistItem,
    ChecklistTemplate,
    CopyChecklistRequest,
    MoveChecklistItemRequest,
    RemoveAllResponse,
    ReorderChecklistRequest,
    UpdateChecklistItemRequest,
)
from .templates import list_templates

event_router = APIRouter()
item_router = APIRouter()
template_router = APIRouter()


async def get_owned_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    events: IEventService = Depends(get_event_service),
) -> Event:
    """Resolve the path's event, raising EventNotFoundError for foreign ids."""
    return await events.get_event(user.id, event_id)


# -----------------------------------------------------------------------------
# Event checklist
# -----------------------------------------------------------------------------


@event_router.get("/{event_id}/checklist", response_model=list[ChecklistItem])
async def list_checklist(
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> list[ChecklistItem]:
    """List an event's checklist ordered by position."""
    result = await store.list_items(user.id, event.id)
    return result.unwrap()


@event_router.post("/{event_id}/checklist", response_model=ChecklistItem, status_code=201)
async def add_checklist_item(
    request: AddChecklistItemRequest,
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> ChecklistItem:
    """Append an item to the end of its phase."""
    result = await store.add_item(user.id, event.id, request.phase, request.text)
    return result.unwrap()


@event_router.post(
    "/{event_id}/checklist/bulk",
    response_model=list[ChecklistItem],
    status_code=201,
)
async def add_checklist_items_bulk(
    request: BulkChecklistRequest,
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> list[ChecklistItem]:
    result = await store.apply_bulk(user.id, event.id, request.items)
    return result.unwrap()


@event_router.delete("/{event_id}/checklist", response_model=RemoveAllResponse)
async def clear_checklist(
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> RemoveAllResponse:
    """Remove every item of the event."""
    result = await store.remove_all(user.id, event.id)
    return RemoveAllResponse(deleted=result.unwrap())


@event_router.put("/{event_id}/checklist/order", response_model=list[ChecklistItem])
async def reorder_checklist(
    request: ReorderChecklistRequest,
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> list[ChecklistItem]:
    """
    Reorder one phase.

    ``ordered_ids`` must list every item of the phase exactly once;
    anything else is rejected with 422 and nothing is written.
    """
    result = await store.reorder(user.id, event.id, request.phase, request.ordered_ids)
    return result.unwrap()


@event_router.post(
    "/{event_id}/checklist/template",
    response_model=list[ChecklistItem],
    status_code=201,
)
async def apply_checklist_template(
    request: ApplyTemplateRequest,
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> list[ChecklistItem]:
    """Apply a built-in template (mode 'replace' clears the checklist first)."""
    result = await store.apply_template(user.id, event.id, request.template_id, request.mode)
    return result.unwrap()


@event_router.post(
    "/{event_id}/checklist/copy",
    response_model=list[ChecklistItem],
    status_code=201,
)
async def copy_checklist(
    request: CopyChecklistRequest,
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
    events: IEventService = Depends(get_event_service),
) -> list[ChecklistItem]:
    """Copy another event's checklist into this one."""
    source = await events.get_event(user.id, request.source_event_id)
    result = await store.copy_checklist(user.id, event.id, source.id, request.mode)
    return result.unwrap()


@event_router.get("/{event_id}/checklist/source", response_model=list[ChecklistItem])
async def preview_checklist_source(
    event: Event = Depends(get_owned_event),
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> list[ChecklistItem]:
    """Items that a copy from this event would bring over."""
    result = await store.copy_from(user.id, event.id)
    return result.unwrap()


# -----------------------------------------------------------------------------
# Single items
# -----------------------------------------------------------------------------


@item_router.patch("/{item_id}", response_model=ChecklistItem)
async def update_checklist_item(
    item_id: str,
    request: UpdateChecklistItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> ChecklistItem:
    result = await store.update_item(user.id, item_id, request.text, request.completed)
    return result.unwrap()


@item_router.delete("/{item_id}", status_code=204)
async def delete_checklist_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> Response:
    result = await store.remove_item(user.id, item_id)
    result.unwrap()
    return Response(status_code=204)


@item_router.post("/{item_id}/toggle", response_model=ChecklistItem)
async def toggle_checklist_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> ChecklistItem:
    """Flip an item between done and not done."""
    result = await store.toggle_item(user.id, item_id)
    return result.unwrap()


@item_router.post("/{item_id}/move", status_code=204)
async def move_checklist_item(
    item_id: str,
    request: MoveChecklistItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    store: IChecklistStore = Depends(get_checklist_store),
) -> Response:
    """Swap an item with its neighbour above or below."""
    result = await store.move_item(user.id, item_id, request.direction)
    result.unwrap()
    return Response(status_code=204)


# -----------------------------------------------------------------------------
# Templates
# -----------------------------------------------------------------------------


@template_router.get("", response_model=list[ChecklistTemplate])
async def get_checklist_templates(
    user: AuthenticatedUser = Depends(get_current_user),
) -> list[ChecklistTemplate]:
    """List the built-in checklist templates."""
    return list_templates()
