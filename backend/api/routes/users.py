"""
User-related endpoints.

Provides endpoints for user profile and account management.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.models import AuthenticatedUser, SubscriptionTier
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    email: Optional[str] = None
    email_verified: bool
    tier: SubscriptionTier
    is_premium: bool
    role: str


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> UserProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return UserProfileResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        tier=user.tier,
        is_premium=user.is_premium,
        role=user.role,
    )
