"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class SubscriptionTier(str, Enum):
    """User subscription tiers."""

    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"

    @classmethod
    def from_metadata(cls, app_metadata: Optional[dict]) -> "SubscriptionTier":
        """Tier stored in Supabase app_metadata; unknown values fall back to free."""
        raw = (app_metadata or {}).get("tier", cls.FREE.value)
        try:
            return cls(raw)
        except ValueError:
            return cls.FREE


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.

    This is the minimal user info needed for most operations.
    It's extracted from the JWT and used throughout the request lifecycle.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[EmailStr] = Field(None, description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    # Timestamps (JWTs don't carry created_at; filled from the admin API when needed)
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    last_sign_in: Optional[datetime] = Field(None, description="Last sign-in time")

    role: str = Field(default="user", description="User role")
    tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE,
        description="Subscription tier from app_metadata",
    )

    # Raw bearer token, forwarded to edge functions that run as the user
    access_token: Optional[str] = Field(None, exclude=True, repr=False)

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from JWT
    }

    @property
    def is_premium(self) -> bool:
        """Whether the user is on a paid tier."""
        return self.tier != SubscriptionTier.FREE
