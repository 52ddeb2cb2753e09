"""
Event API endpoints.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_event_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IEventService
from .models import CreateEventRequest, Event, UpdateEventRequest

router = APIRouter()


@router.get("", response_model=list[Event])
async def list_events(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> list[Event]:
    """List the current user's events, soonest first."""
    return await service.list_events(user.id)


@router.post("", response_model=Event, status_code=201)
async def create_event(
    request: CreateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.create_event(user.id, request)


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    return await service.get_event(user.id, event_id)


@router.patch("/{event_id}", response_model=Event)
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    """Update some fields of an event."""
    return await service.update_event(user.id, event_id, request)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Response:
    """Delete an event together with its checklist."""
    await service.delete_event(user.id, event_id)
    return Response(status_code=204)
