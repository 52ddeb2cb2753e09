"""
Access service implementation.

Combines the pure phase evaluator with the account lookup from auth and
the usage counts from the repository. Limits are advisory: nothing here
blocks a write.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from dateutil.relativedelta import relativedelta

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from .evaluator import evaluate
from .models import AccessPhaseInfo, Capabilities, CapabilitiesResponse, UsageSnapshot
from .repository import AccessUsageRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AccessService:
    """
    Entitlement lookups for authenticated users.

    ``clock`` is injectable so callers (and tests) can evaluate at a
    fixed instant.
    """

    def __init__(
        self,
        auth: IAuthService,
        repository: AccessUsageRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._auth = auth
        self._repository = repository
        self._clock = clock

    def get_current_period(self) -> tuple[datetime, datetime]:
        """Current calendar month in UTC as [start, end)."""
        now = self._clock()
        period_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        period_end = period_start + relativedelta(months=1)
        return period_start, period_end

    async def _resolve_created_at(self, user: AuthenticatedUser) -> Optional[datetime]:
        if user.created_at is not None:
            return user.created_at
        created_at = await self._auth.get_account_created_at(user.id)
        if created_at is None:
            logger.warning("No account record for user %s; treating as limited", user.id)
        return created_at

    async def get_access_phase(self, user: AuthenticatedUser) -> AccessPhaseInfo:
        if user.is_premium:
            return evaluate(None, True, self._clock())

        created_at = await self._resolve_created_at(user)
        return evaluate(created_at, False, self._clock())

    async def get_usage_snapshot(
        self,
        user: AuthenticatedUser,
        event_id: Optional[str] = None,
    ) -> UsageSnapshot:
        period_start, period_end = self.get_current_period()
        return self._repository.get_usage(user.id, period_start, period_end, event_id)

    async def get_capabilities(
        self,
        user: AuthenticatedUser,
        event_id: Optional[str] = None,
    ) -> CapabilitiesResponse:
        info = await self.get_access_phase(user)
        usage = await self.get_usage_snapshot(user, event_id)
        capabilities = Capabilities(info)

        can_add_task = None
        if usage.tasks_in_event is not None:
            can_add_task = capabilities.can_add_task(usage.tasks_in_event)

        return CapabilitiesResponse(
            access=info,
            usage=usage,
            can_add_event=capabilities.can_add_event(usage.active_events),
            can_add_lead=capabilities.can_add_lead(usage.leads),
            can_add_content=capabilities.can_add_content(usage.contents_this_month),
            can_add_task=can_add_task,
            can_upload_contract=capabilities.can_upload_contract(),
            can_export=capabilities.can_export(),
        )
