"""
Access module.

Derives an account's entitlement phase from its age and tier.

Public API:
- IAccessService: Interface for entitlement lookups
- evaluate: Pure phase evaluation
- AccessPhase, AccessPhaseInfo, AccessLimits: Phase results
- Capabilities: Advisory limit checks
- PRO_LIMITS, FREE_LIMITS: The two limit sets
"""

from .interfaces import IAccessService
from .evaluator import evaluate, days_between
from .models import (
    AccessLimits,
    AccessPhase,
    AccessPhaseInfo,
    Capabilities,
    CapabilitiesResponse,
    UsageSnapshot,
    FREE_LIMITS,
    PRO_LIMITS,
    FULL_ACCESS_DAYS,
    WARNING_DAYS,
    TOTAL_GRACE_PERIOD,
)

__all__ = [
    "IAccessService",
    "evaluate",
    "days_between",
    "AccessLimits",
    "AccessPhase",
    "AccessPhaseInfo",
    "Capabilities",
    "CapabilitiesResponse",
    "UsageSnapshot",
    "FREE_LIMITS",
    "PRO_LIMITS",
    "FULL_ACCESS_DAYS",
    "WARNING_DAYS",
    "TOTAL_GRACE_PERIOD",
]
