"""
Access API endpoints.

Read-only views of the caller's entitlement phase and limits.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_access_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAccessService
from .models import AccessPhaseInfo, CapabilitiesResponse

router = APIRouter()


@router.get("/phase", response_model=AccessPhaseInfo)
async def get_access_phase(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
) -> AccessPhaseInfo:
    """
    Get the current user's access phase.

    Recomputed on every call from the account age and tier.
    """
    return await service.get_access_phase(user)


@router.get("/capabilities", response_model=CapabilitiesResponse)
async def get_capabilities(
    event_id: Optional[str] = Query(
        default=None,
        description="Also report whether a checklist item can be added to this event",
    ),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
) -> CapabilitiesResponse:
    """Get phase, usage counts and the advisory limit checks."""
    return await service.get_capabilities(user, event_id)
