"""
Authentication service implementation.

Validates Supabase JWT tokens and looks up account records through the
Supabase Auth admin API.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import jwt
from supabase import AuthApiError, Client

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser, SubscriptionTier

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload
from .exceptions import (
    AccountLookupError,
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the service-role
    client for account lookups. The client is created on first use so
    token validation works without database configuration.
    """

    def __init__(self, db: Optional[Client] = None):
        self._settings = get_settings()
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = get_supabase_client()
        return self._db

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        jwt_payload = JWTPayload(**payload)

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
            tier=jwt_payload.tier,
            access_token=token,
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's account record by their ID.

        Queries Supabase Auth through the admin API (service role).
        """
        try:
            response = self.db.auth.admin.get_user_by_id(user_id)
        except AuthApiError as e:
            if e.status == 404:
                return None
            logger.error("Account lookup failed for %s: %s", user_id, e.message)
            raise AccountLookupError(user_id, e.message)

        user = response.user if response else None
        if user is None:
            return None

        return UserProfile(
            id=str(user.id),
            email=user.email,
            full_name=(user.user_metadata or {}).get("full_name"),
            created_at=user.created_at,
            updated_at=user.updated_at,
            tier=SubscriptionTier.from_metadata(user.app_metadata),
        )

    async def get_account_created_at(self, user_id: str) -> Optional[datetime]:
        """Creation time of the account, or None if it doesn't exist."""
        profile = await self.get_user_by_id(user_id)
        if profile is None:
            return None
        return profile.created_at


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
