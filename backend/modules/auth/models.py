"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser, SubscriptionTier


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict[str, Any] = Field(default_factory=dict)
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def tier(self) -> SubscriptionTier:
        return SubscriptionTier.from_metadata(self.app_metadata)


class UserProfile(BaseModel):
    """
    Account record from Supabase Auth.

    This includes information beyond what's in the JWT,
    fetched through the admin API when needed.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: Optional[str] = Field(None, description="Email address")
    full_name: Optional[str] = Field(None, description="Display name from user_metadata")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")
    tier: SubscriptionTier = Field(default=SubscriptionTier.FREE, description="Subscription tier")

    @property
    def is_premium(self) -> bool:
        return self.tier != SubscriptionTier.FREE


__all__ = ["AuthenticatedUser", "JWTPayload", "UserProfile"]
