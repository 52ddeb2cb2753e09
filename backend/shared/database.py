"""
Supabase client factory.

All repositories share one service-role client. RLS is bypassed, so every
repository query filters on user_id itself.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def missing_supabase_settings(settings: Optional[Settings] = None) -> list[str]:
    """Environment variables the service client still needs."""
    settings = settings or get_settings()
    missing = []
    if not settings.supabase_url:
        missing.append("SUPABASE_URL")
    if not settings.supabase_service_role_key:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")
    return missing


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset.
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        missing = missing_supabase_settings(settings)
        if missing:
            raise RuntimeError(
                f"Supabase configuration missing: set {', '.join(missing)}"
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client (tests, configuration changes)."""
    global _service_client
    _service_client = None
