"""
Booster scheduling errors.

Services raise these; the API layer maps them to HTTP responses
(see ``app.main``).  Bulk operations record per-trainee errors in
their result instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.schemas.bulk import BulkResult


class BoosterError(Exception):
    """Base class for all booster scheduling errors."""


class ValidationError(BoosterError):
    """Missing target, missing date, bad week number and the like."""


class InvalidTransitionError(ValidationError):
    """Status change not allowed by the transition table."""


class FrozenTaskError(BoosterError):
    """Status change attempted on a frozen task."""

    def __init__(self, task_id: int | None, week: int | None = None):
        self.task_id = task_id
        self.week = week
        super().__init__(f"Task {task_id} (week {week}) is frozen; unfreeze it before changing its status")


class NotFoundError(BoosterError):
    """Trainee, group or task does not exist."""


class PersistenceError(BoosterError):
    """Store read/write failure."""


class NotificationError(BoosterError):
    """Notification dispatch failed.  Never fatal to a scheduling operation."""


class PartialBatchFailure(BoosterError):
    """Bulk operation where at least one trainee failed.

    Carries the complete result so callers can report both sides.
    """

    def __init__(self, result: BulkResult):
        self.result = result
        super().__init__(f"{result.operation}: {len(result.succeeded)} succeeded, {len(result.failed)} failed")
