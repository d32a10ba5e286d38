"""
Booster enrolment service.

Enabling unlocks the program for a trainee and, only when the trainee
has no tasks at all, generates a fresh schedule starting today.  The
enrolment flags and the new schedule land in the same commit.
Disabling clears the enrolment flags and leaves tasks alone.
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.core.clock import Clock, SystemClock, utc_timestamp
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.trainee import BoosterStatus, Trainee
from app.services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service for enabling and disabling the booster program."""

    def __init__(self, session: Session, clock: Optional[Clock] = None,
                 schedule_service: Optional[ScheduleService] = None):
        self.trainee_repo = TraineeRepository(session)
        self.task_repo = WeeklyTaskRepository(session)
        self.clock = clock or SystemClock()
        self.schedule_service = schedule_service or ScheduleService(session, self.clock)

    def enable(self, trainee: Trainee) -> int:
        """Enable the program.  Returns the number of tasks generated (0 or 12)."""
        has_tasks = self.task_repo.count_by_trainee(trainee.id) > 0

        trainee.booster_enabled = True
        trainee.booster_unlocked = True
        if has_tasks:
            trainee.booster_status = BoosterStatus.IN_PROGRESS.value
            if not trainee.booster_start_date:
                trainee.booster_start_date = self.clock.today()
            trainee.updated_at = utc_timestamp(self.clock)
            self.trainee_repo.update(trainee)
            return 0

        # generate() sets the start date and status and commits them with the tasks
        tasks = self.schedule_service.generate(trainee, self.clock.today())
        logger.info("Created a new schedule for %s on enable", trainee.email)
        return len(tasks)

    def disable(self, trainee: Trainee) -> None:
        trainee.booster_enabled = False
        trainee.booster_status = BoosterStatus.NOT_STARTED.value
        trainee.booster_start_date = None
        trainee.updated_at = utc_timestamp(self.clock)
        self.trainee_repo.update(trainee)
        logger.info("Disabled booster for %s", trainee.email)
