"""
Access module data models.

An account moves through three phases purely as a function of its age:
full access (trial), warning, then limited. Nothing here is persisted.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


FULL_ACCESS_DAYS = 30
WARNING_DAYS = 15
TOTAL_GRACE_PERIOD = FULL_ACCESS_DAYS + WARNING_DAYS  # 45 days


class AccessPhase(str, Enum):
    """Entitlement phase of an account."""

    FULL_ACCESS = "full_access"  # Trial: Pro limits
    WARNING = "warning"          # Still Pro limits, upgrade nudges
    LIMITED = "limited"          # Free limits


class AccessLimits(BaseModel):
    """
    Feature caps for an account.

    ``None`` on a ``max_*`` field means unlimited.
    """

    max_active_events: Optional[int] = Field(None, description="Active events allowed")
    max_tasks_per_event: Optional[int] = Field(None, description="Checklist items per event")
    max_leads: Optional[int] = Field(None, description="Leads allowed")
    max_contents_per_month: Optional[int] = Field(None, description="Contents per calendar month")
    can_upload_contracts: bool = Field(..., description="Whether contracts can be uploaded")
    can_export: bool = Field(..., description="Whether data export is available")

    model_config = {"frozen": True}


PRO_LIMITS = AccessLimits(
    max_active_events=None,
    max_tasks_per_event=None,
    max_leads=None,
    max_contents_per_month=None,
    can_upload_contracts=True,
    can_export=True,
)

FREE_LIMITS = AccessLimits(
    max_active_events=3,
    max_tasks_per_event=5,
    max_leads=10,
    max_contents_per_month=5,
    can_upload_contracts=False,
    can_export=False,
)


class AccessPhaseInfo(BaseModel):
    """Result of evaluating an account's entitlement phase."""

    phase: AccessPhase = Field(..., description="Current phase")
    days_remaining: Optional[int] = Field(
        ...,
        description="Days left in the current phase (None = unlimited)",
    )
    days_since_creation: int = Field(..., description="Whole days since account creation")
    limits: AccessLimits = Field(..., description="Limits that apply in this phase")
    message: Optional[str] = Field(None, description="Banner text for non-terminal phases")
    is_pro: bool = Field(default=False, description="Whether the account is on a paid tier")

    model_config = {"frozen": True}


def _within(limit: Optional[int], current: int) -> bool:
    return limit is None or current < limit


class Capabilities:
    """
    Advisory checks derived from an AccessPhaseInfo.

    Paid accounts pass every count check; everyone else is compared
    against the limits of their current phase.
    """

    def __init__(self, info: AccessPhaseInfo):
        self.info = info

    @property
    def limits(self) -> AccessLimits:
        return self.info.limits

    @property
    def is_pro(self) -> bool:
        return self.info.is_pro

    def can_add_event(self, current_active_events: int) -> bool:
        return self.is_pro or _within(self.limits.max_active_events, current_active_events)

    def can_add_task(self, current_tasks_in_event: int) -> bool:
        return self.is_pro or _within(self.limits.max_tasks_per_event, current_tasks_in_event)

    def can_add_lead(self, current_leads: int) -> bool:
        return self.is_pro or _within(self.limits.max_leads, current_leads)

    def can_add_content(self, current_month_contents: int) -> bool:
        return self.is_pro or _within(self.limits.max_contents_per_month, current_month_contents)

    def can_upload_contract(self) -> bool:
        return self.limits.can_upload_contracts

    def can_export(self) -> bool:
        return self.limits.can_export


class UsageSnapshot(BaseModel):
    """Current counts that the limits are compared against."""

    active_events: int = Field(default=0, description="Events with status 'ativo'")
    leads: int = Field(default=0, description="Total leads")
    contents_this_month: int = Field(default=0, description="Contents created this month")
    tasks_in_event: Optional[int] = Field(
        None,
        description="Checklist items in the requested event, if one was given",
    )
    period_start: datetime = Field(..., description="Start of the monthly window")
    period_end: datetime = Field(..., description="End of the monthly window")


class CapabilitiesResponse(BaseModel):
    """API response combining phase, usage and the advisory checks."""

    access: AccessPhaseInfo
    usage: UsageSnapshot
    can_add_event: bool
    can_add_lead: bool
    can_add_content: bool
    can_add_task: Optional[bool] = Field(
        None,
        description="Only present when an event_id was given",
    )
    can_upload_contract: bool
    can_export: bool
