"""
Access phase evaluation.

``evaluate`` is a pure function of (account creation time, premium flag,
current time). It is recomputed on every request; there is no stored
"current phase" that could drift from the clock.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import (
    AccessPhase,
    AccessPhaseInfo,
    FREE_LIMITS,
    FULL_ACCESS_DAYS,
    PRO_LIMITS,
    TOTAL_GRACE_PERIOD,
)


FULL_ACCESS_MESSAGE = (
    "Você está utilizando recursos do Plano Pro durante o período de acesso completo. "
    "{days} dias restantes."
)
WARNING_MESSAGE = (
    "Em breve o plano gratuito terá limites. Faça upgrade para manter acesso completo. "
    "{days} dias restantes."
)

ONE_DAY = timedelta(days=1)


def _as_utc(value: datetime) -> datetime:
    # Supabase timestamps are UTC; naive values are treated the same way
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, floored."""
    return (_as_utc(end) - _as_utc(start)) // ONE_DAY


def evaluate(
    account_created_at: Optional[datetime],
    is_premium_user: bool,
    now: datetime,
) -> AccessPhaseInfo:
    """
    Map an account's age and premium flag to its access phase.

    Args:
        account_created_at: When the account was created, or None if there
            is no account.
        is_premium_user: Whether the account is on a paid tier.
        now: Evaluation time.

    Returns:
        AccessPhaseInfo for the account at ``now``.
    """
    if is_premium_user:
        return AccessPhaseInfo(
            phase=AccessPhase.FULL_ACCESS,
            days_remaining=None,
            days_since_creation=0,
            limits=PRO_LIMITS,
            message=None,
            is_pro=True,
        )

    # No account: deny extended access
    if account_created_at is None:
        return AccessPhaseInfo(
            phase=AccessPhase.LIMITED,
            days_remaining=0,
            days_since_creation=0,
            limits=FREE_LIMITS,
            message=None,
            is_pro=False,
        )

    days_since_creation = days_between(account_created_at, now)

    if days_since_creation <= FULL_ACCESS_DAYS:
        days_remaining = FULL_ACCESS_DAYS - days_since_creation
        return AccessPhaseInfo(
            phase=AccessPhase.FULL_ACCESS,
            days_remaining=days_remaining,
            days_since_creation=days_since_creation,
            limits=PRO_LIMITS,
            message=FULL_ACCESS_MESSAGE.format(days=days_remaining),
            is_pro=False,
        )

    if days_since_creation <= TOTAL_GRACE_PERIOD:
        days_remaining = TOTAL_GRACE_PERIOD - days_since_creation
        return AccessPhaseInfo(
            phase=AccessPhase.WARNING,
            days_remaining=days_remaining,
            days_since_creation=days_since_creation,
            limits=PRO_LIMITS,
            message=WARNING_MESSAGE.format(days=days_remaining),
            is_pro=False,
        )

    return AccessPhaseInfo(
        phase=AccessPhase.LIMITED,
        days_remaining=0,
        days_since_creation=days_since_creation,
        limits=FREE_LIMITS,
        message=None,
        is_pro=False,
    )
