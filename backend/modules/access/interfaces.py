"""
Access module interface.

Other modules and the API layer depend on IAccessService to learn which
phase an account is in and what it may do.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AccessPhaseInfo, CapabilitiesResponse, UsageSnapshot


@runtime_checkable
class IAccessService(Protocol):
    """Interface for entitlement lookups."""

    async def get_access_phase(self, user: AuthenticatedUser) -> AccessPhaseInfo:
        """
        Evaluate the user's access phase at the current time.

        Premium users always get full access. When the token does not
        carry the account creation time it is looked up through auth.
        """
        ...

    async def get_usage_snapshot(
        self,
        user: AuthenticatedUser,
        event_id: Optional[str] = None,
    ) -> UsageSnapshot:
        """Current counts the limits are compared against."""
        ...

    async def get_capabilities(
        self,
        user: AuthenticatedUser,
        event_id: Optional[str] = None,
    ) -> CapabilitiesResponse:
        """Phase, usage and the advisory can_* answers in one call."""
        ...
