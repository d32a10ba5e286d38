"""
Freeze / unfreeze service.

Freezing pauses every open task of a trainee; unfreezing resumes the
paused tasks with windows re-anchored on the week of the resume date.
Both only touch records matching their precondition, so repeating
either is harmless.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.booster.calendar import week_start_weekday
from app.booster.errors import ValidationError
from app.booster.transitions import freeze_tasks, unfreeze_tasks
from app.core.clock import Clock, SystemClock, utc_timestamp
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.trainee import Trainee

logger = logging.getLogger(__name__)


class FreezeService:
    """Service for pausing and resuming a trainee's program."""

    def __init__(self, session: Session, week_starts_on: Optional[int] = None, clock: Optional[Clock] = None):
        self.task_repo = WeeklyTaskRepository(session)
        self.clock = clock or SystemClock()
        self.week_starts_on = week_start_weekday() if week_starts_on is None else week_starts_on

    def freeze(self, trainee: Trainee) -> int:
        """Freeze open tasks.  Returns how many were newly frozen (0 = no-op)."""
        changed = freeze_tasks(self.task_repo.list_by_trainee(trainee.id))
        if not changed:
            logger.info("Nothing to freeze for %s", trainee.email)
            return 0
        self.task_repo.update_many(self._touch(changed))
        logger.info("Froze %d tasks for %s", len(changed), trainee.email)
        return len(changed)

    def unfreeze(self, trainee: Trainee, resume_date: Optional[datetime.date]) -> int:
        """Unfreeze frozen tasks from the week of *resume_date*.  Returns the count."""
        if resume_date is None:
            raise ValidationError("A resume date is required to unfreeze tasks")
        changed = unfreeze_tasks(self.task_repo.list_by_trainee(trainee.id), resume_date, self.week_starts_on)
        if not changed:
            logger.info("Nothing to unfreeze for %s", trainee.email)
            return 0
        self.task_repo.update_many(self._touch(changed))
        logger.info("Unfroze %d tasks for %s from %s", len(changed), trainee.email, resume_date.isoformat())
        return len(changed)

    def _touch(self, tasks):
        now = utc_timestamp(self.clock)
        for task in tasks:
            task.updated_at = now
        return tasks
