"""
Progress overview schemas.
"""

from pydantic import BaseModel

from app.schemas.weekly_task import WeeklyTaskResponse


class TaskSummary(BaseModel):
    """All-task tally for one trainee (frozen tasks included)."""

    total: int
    completed: int
    frozen: int
    percentage: int


class ActiveTaskStats(BaseModel):
    """Tasks whose window contains today, frozen ones excluded."""

    total: int
    completed: int
    in_progress: int
    not_started: int
    frozen: int
    completion_percentage: int
    active_tasks: list[WeeklyTaskResponse]


class TraineeOverview(BaseModel):
    email: str
    full_name: str | None
    summary: TaskSummary
    current: ActiveTaskStats
