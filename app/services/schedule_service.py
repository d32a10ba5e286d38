"""
Schedule service.

Generates a trainee's 12-week schedule (full replace) and assigns
individual weeks on top of an existing schedule.

Generation is destructive by intent: it is the "set / reset start date"
action, so progress and notes on the previous set are discarded.
Replaying it with the same start date reproduces the same tasks.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.booster.catalog import TemplateCatalog, get_catalog, variant_for_gender
from app.booster.errors import NotFoundError, ValidationError
from app.booster.schedule import build_schedule, build_week_subset, normalize_weeks
from app.core.clock import Clock, SystemClock, utc_timestamp
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.trainee import BoosterStatus, Trainee
from app.models.weekly_task import WeeklyTask

logger = logging.getLogger(__name__)


class ScheduleService:
    """Service for building and assigning weekly tasks."""

    def __init__(self, session: Session, clock: Optional[Clock] = None,
                 catalog: Optional[TemplateCatalog] = None):
        self.task_repo = WeeklyTaskRepository(session)
        self.trainee_repo = TraineeRepository(session)
        self.clock = clock or SystemClock()
        self.catalog = catalog or get_catalog()

    def generate(self, trainee: Trainee, start_date: Optional[datetime.date]) -> list[WeeklyTask]:
        """Replace the trainee's tasks with a fresh 12-week schedule.

        Also sets ``booster_start_date`` and moves the trainee to
        ``in_progress``, in the same commit as the tasks.
        """
        if start_date is None:
            raise ValidationError("A start date is required to generate a schedule")

        tasks = build_schedule(trainee.id, variant_for_gender(trainee.gender), start_date, self.catalog)
        trainee.booster_start_date = start_date
        trainee.booster_status = BoosterStatus.IN_PROGRESS.value
        trainee.updated_at = utc_timestamp(self.clock)
        tasks = self.task_repo.replace_for_trainee(trainee.id, tasks, trainee)

        logger.info("Generated %d tasks for %s starting %s", len(tasks), trainee.email, start_date.isoformat())
        return tasks

    def assign_weeks(self, trainee: Trainee, weeks: list[int],
                     week_offset: int = 0) -> tuple[list[WeeklyTask], list[int]]:
        """Create tasks for selected weeks only, without touching existing ones.

        Windows are anchored on ``booster_start_date`` (today if unset).
        Weeks the trainee already has are skipped.

        Returns:
            ``(created_tasks, skipped_weeks)``
        """
        selected = normalize_weeks(weeks)
        existing = self.task_repo.existing_weeks(trainee.id)
        skipped = [w for w in selected if w in existing]
        to_create = [w for w in selected if w not in existing]

        anchor = trainee.booster_start_date or self.clock.today()
        tasks = build_week_subset(trainee.id, variant_for_gender(trainee.gender), to_create, anchor, week_offset,
                                  self.catalog)
        if tasks:
            tasks = self.task_repo.create_many(tasks)
        if skipped:
            logger.info("Skipped already assigned weeks %s for %s", skipped, trainee.email)
        return tasks, skipped

    def get_trainee(self, email: str) -> Trainee:
        trainee = self.trainee_repo.get_by_email(email)
        if not trainee:
            raise NotFoundError(f"Trainee '{email}' not found")
        return trainee

    def list_tasks(self, email: str) -> list[WeeklyTask]:
        """All tasks of a trainee ordered by week, frozen ones included."""
        return self.task_repo.list_by_trainee(self.get_trainee(email).id)
