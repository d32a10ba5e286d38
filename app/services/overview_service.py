"""
Progress overview service.

Read-only view of booster trainees: which tasks are active right now
and how far along each trainee is.  Frozen tasks are never active.
"""

from typing import Optional

from sqlmodel import Session

from app.core.clock import Clock, SystemClock
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.trainee import Trainee
from app.models.weekly_task import TaskStatus, WeeklyTask
from app.schemas.overview import ActiveTaskStats, TaskSummary, TraineeOverview
from app.schemas.weekly_task import WeeklyTaskResponse


def _percentage(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


def summarize_tasks(tasks: list[WeeklyTask]) -> TaskSummary:
    completed = sum(1 for t in tasks if t.is_completed)
    return TaskSummary(total=len(tasks), completed=completed, frozen=sum(1 for t in tasks if t.is_frozen),
                       percentage=_percentage(completed, len(tasks)))


def active_task_stats(tasks: list[WeeklyTask], today) -> ActiveTaskStats:
    active = [t for t in tasks if t.is_active_on(today)]
    by_status = {status: sum(1 for t in active if t.status == status.value) for status in TaskStatus}
    return ActiveTaskStats(total=len(active), completed=by_status[TaskStatus.COMPLETED],
                           in_progress=by_status[TaskStatus.IN_PROGRESS],
                           not_started=by_status[TaskStatus.NOT_STARTED],
                           frozen=sum(1 for t in tasks if t.is_frozen),
                           completion_percentage=_percentage(by_status[TaskStatus.COMPLETED], len(active)),
                           active_tasks=[WeeklyTaskResponse.model_validate(t) for t in active], )


class OverviewService:
    """Service for booster progress overviews."""

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        self.trainee_repo = TraineeRepository(session)
        self.task_repo = WeeklyTaskRepository(session)
        self.clock = clock or SystemClock()

    def overview(self) -> list[TraineeOverview]:
        """One entry per unlocked and enabled trainee, ordered by email."""
        trainees = self.trainee_repo.list_booster_active()
        tasks = self.task_repo.list_by_trainees([t.id for t in trainees])
        grouped: dict[int, list[WeeklyTask]] = {t.id: [] for t in trainees}
        for task in tasks:
            grouped[task.trainee_id].append(task)
        today = self.clock.today()
        return [self._trainee_overview(t, grouped[t.id], today) for t in trainees]

    @staticmethod
    def _trainee_overview(trainee: Trainee, tasks: list[WeeklyTask], today) -> TraineeOverview:
        return TraineeOverview(email=trainee.email, full_name=trainee.full_name, summary=summarize_tasks(tasks),
                               current=active_task_stats(tasks, today), )
