"""
Shared infrastructure for Boothdesk backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- result: Value-or-error container used by stores
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, missing_supabase_settings, reset_client_cache
from .exceptions import (
    BoothdeskError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, SubscriptionTier
from .result import Result

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "missing_supabase_settings",
    "reset_client_cache",
    "BoothdeskError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "SubscriptionTier",
    "Result",
]
