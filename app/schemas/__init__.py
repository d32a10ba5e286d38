"""Pydantic schemas for request/response validation."""

from app.schemas.trainee import TraineeResponse
from app.schemas.weekly_task import NoteCreate, NoteEntry, TaskStatusUpdate, WeeklyTaskResponse
from app.schemas.bulk import (
    ActivationRequest,
    AssignWeeksRequest,
    BulkFailure,
    BulkOperation,
    BulkResult,
    ScheduleRequest,
    TargetRequest,
    TargetSpec,
    TraineeOutcome,
    UnfreezeRequest,
)
from app.schemas.overview import ActiveTaskStats, TaskSummary, TraineeOverview

__all__ = [
    "TraineeResponse",
    "NoteCreate",
    "NoteEntry",
    "TaskStatusUpdate",
    "WeeklyTaskResponse",
    "ActivationRequest",
    "AssignWeeksRequest",
    "BulkFailure",
    "BulkOperation",
    "BulkResult",
    "ScheduleRequest",
    "TargetRequest",
    "TargetSpec",
    "TraineeOutcome",
    "UnfreezeRequest",
    "ActiveTaskStats",
    "TaskSummary",
    "TraineeOverview",
]
