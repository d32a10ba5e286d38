"""
Task status service.

Every status change goes through the transition gate
(:mod:`app.booster.transitions`): frozen tasks are refused with
:class:`~app.booster.errors.FrozenTaskError`.  Also hosts the full
reset and the trainee note thread.
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.booster.errors import NotFoundError
from app.booster.transitions import StatusActor, apply_status, reset_task
from app.core.clock import Clock, SystemClock, utc_timestamp
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.trainee import Trainee
from app.models.weekly_task import TaskStatus, WeeklyTask

logger = logging.getLogger(__name__)


class TaskStatusService:
    """Service for status changes, resets and notes on weekly tasks."""

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        self.task_repo = WeeklyTaskRepository(session)
        self.clock = clock or SystemClock()

    def change_status(self, task_id: int, new_status: TaskStatus,
                      actor: StatusActor = StatusActor.STAFF) -> WeeklyTask:
        """Apply a gated status change.

        Raises:
            NotFoundError: unknown task.
            FrozenTaskError: the task is frozen.
            InvalidTransitionError: the change is not allowed for *actor*.
        """
        task = self._get_task(task_id)
        if apply_status(task, new_status, actor, self.clock.today()):
            task.updated_at = utc_timestamp(self.clock)
            task = self.task_repo.update(task)
            logger.info("Task %s (week %s) -> %s by %s", task.id, task.week, task.status, actor.value)
        return task

    def reset(self, trainee: Trainee) -> int:
        """Reset every task of the trainee in place.  Returns the count."""
        tasks = self.task_repo.list_by_trainee(trainee.id)
        now = utc_timestamp(self.clock)
        for task in tasks:
            reset_task(task)
            task.updated_at = now
        if tasks:
            self.task_repo.update_many(tasks)
        logger.info("Reset %d tasks for %s", len(tasks), trainee.email)
        return len(tasks)

    def add_note(self, task_id: int, text: str) -> WeeklyTask:
        """Append a trainee note to the task's thread."""
        task = self._get_task(task_id)
        entry = {"text": text, "timestamp": self.clock.now().isoformat()}
        # reassign so the JSON column is flagged dirty
        task.notes_thread = [*(task.notes_thread or []), entry]
        task.updated_at = utc_timestamp(self.clock)
        return self.task_repo.update(task)

    def _get_task(self, task_id: int) -> WeeklyTask:
        task = self.task_repo.get_by_id(task_id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        return task
