"""
Bulk operation schemas.

A :class:`TargetSpec` names who an operation applies to; a
:class:`BulkResult` reports what happened to each of them.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.booster.errors import PartialBatchFailure


class TargetSpec(BaseModel):
    """Who a bulk operation targets.

    Exactly one of ``trainee_email``, ``group_name`` or ``all_active``.
    ``member_emails`` narrows a group to a subset of its members; empty
    means the whole group.
    """

    trainee_email: Optional[str] = None
    group_name: Optional[str] = None
    member_emails: list[str] = Field(default_factory=list)
    all_active: bool = False


class BulkOperation(str, Enum):
    GENERATE = "generate"
    ENABLE = "enable"
    DISABLE = "disable"
    RESET = "reset"
    FREEZE = "freeze"
    UNFREEZE = "unfreeze"
    ASSIGN_WEEKS = "assign_weeks"


# ----------------------------------------------------------------------
# Requests
# ----------------------------------------------------------------------


class TargetRequest(BaseModel):
    target: TargetSpec


class ScheduleRequest(TargetRequest):
    start_date: datetime.date


class ActivationRequest(TargetRequest):
    enabled: bool


class UnfreezeRequest(TargetRequest):
    resume_date: datetime.date


class AssignWeeksRequest(TargetRequest):
    weeks: list[int] = Field(..., description="Program weeks to create (1..12)")
    week_offset: int = Field(0, ge=-12, le=52, description="Shift every window by this many weeks")


# ----------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------


class TraineeOutcome(BaseModel):
    """What an operation did for one trainee."""

    email: str
    tasks_changed: int = 0
    skipped_weeks: list[int] = Field(default_factory=list)
    notified: Optional[bool] = None


class BulkFailure(BaseModel):
    email: str
    error: str
    error_type: str


class BulkResult(BaseModel):
    """Per-trainee breakdown of a bulk operation."""

    operation: BulkOperation
    succeeded: list[TraineeOutcome] = Field(default_factory=list)
    failed: list[BulkFailure] = Field(default_factory=list)
    notifications_sent: int = 0
    notifications_failed: int = 0

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def tasks_changed(self) -> int:
        return sum(o.tasks_changed for o in self.succeeded)

    def raise_for_failures(self) -> "BulkResult":
        """Raise :class:`PartialBatchFailure` if any trainee failed."""
        if self.failed:
            raise PartialBatchFailure(self)
        return self
