"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from shared.models import AuthenticatedUser, SubscriptionTier


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    tier: Optional[str] = None,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        tier: Subscription tier stored in app_metadata

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "app_metadata": {"tier": tier} if tier else {},
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_user(
    user_id: str = "test-user-123",
    tier: SubscriptionTier = SubscriptionTier.FREE,
    created_at: Optional[datetime] = None,
) -> AuthenticatedUser:
    """AuthenticatedUser as the auth middleware would produce it."""
    return AuthenticatedUser(
        id=user_id,
        email="test@example.com",
        email_verified=True,
        tier=tier,
        created_at=created_at,
        access_token="user-access-token",
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the auth service and service container before and after each test."""
    reset_auth_service()
    reset_container()
    yield
    reset_auth_service()
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user(test_user_id: str) -> AuthenticatedUser:
    """A free-tier user without a known creation time."""
    return make_user(user_id=test_user_id)


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
