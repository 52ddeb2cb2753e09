"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.access.interfaces import IAccessService
    from modules.auth.interfaces import IAuthService
    from modules.checklists.interfaces import IChecklistStore
    from modules.content.interfaces import IContentService
    from modules.events.interfaces import IEventService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container, which
    also keeps the checklist store's per-event cache alive across requests.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._access_service: "IAccessService | None" = None
        self._event_service: "IEventService | None" = None
        self._checklist_store: "IChecklistStore | None" = None
        self._content_service: "IContentService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import get_auth_service
            self._auth_service = get_auth_service()
        return self._auth_service

    @property
    def access(self) -> "IAccessService":
        """Get the access service instance."""
        if self._access_service is None:
            from modules.access.repository import AccessUsageRepository
            from modules.access.service import AccessService
            from shared.database import get_supabase_client
            self._access_service = AccessService(
                auth=self.auth,
                repository=AccessUsageRepository(get_supabase_client()),
            )
        return self._access_service

    @property
    def events(self) -> "IEventService":
        """Get the event service instance."""
        if self._event_service is None:
            from modules.events.repository import EventRepository
            from modules.events.service import EventService
            from shared.database import get_supabase_client
            self._event_service = EventService(
                EventRepository(get_supabase_client()),
                on_delete=self.checklists.invalidate,
            )
        return self._event_service

    @property
    def checklists(self) -> "IChecklistStore":
        """Get the checklist store instance."""
        if self._checklist_store is None:
            from modules.checklists.repository import ChecklistItemRepository
            from modules.checklists.service import ChecklistItemStore
            from shared.config import get_settings
            from shared.database import get_supabase_client
            settings = get_settings()
            self._checklist_store = ChecklistItemStore(
                ChecklistItemRepository(get_supabase_client()),
                cache_size=settings.checklist_cache_size,
                cache_ttl=settings.checklist_cache_ttl_seconds,
            )
        return self._checklist_store

    @property
    def content(self) -> "IContentService":
        """Get the content generation service instance."""
        if self._content_service is None:
            from modules.content.service import ContentService
            self._content_service = ContentService()
        return self._content_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._access_service = None
        self._event_service = None
        self._checklist_store = None
        self._content_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_access_service() -> "IAccessService":
    """FastAPI dependency for access service."""
    return get_container().access


def get_event_service() -> "IEventService":
    """FastAPI dependency for event service."""
    return get_container().events


def get_checklist_store() -> "IChecklistStore":
    """FastAPI dependency for the checklist store."""
    return get_container().checklists


def get_content_service() -> "IContentService":
    """FastAPI dependency for content generation."""
    return get_container().content
