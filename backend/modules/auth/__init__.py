"""
Authentication module.

Handles JWT validation and account lookups.

Public API:
- IAuthService: Interface for auth operations
- AuthenticatedUser: Minimal user info from JWT
- UserProfile: Account record from Supabase Auth
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthenticatedUser, UserProfile, JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    AccountLookupError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthenticatedUser",
    "UserProfile",
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "AccountLookupError",
]
