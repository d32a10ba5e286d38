"""
Weekly task API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.booster.transitions import StatusActor
from app.models.weekly_task import TaskStatus


class NoteEntry(BaseModel):
    """One trainee note in a task's thread."""

    text: str
    timestamp: datetime.datetime


class NoteCreate(BaseModel):
    """Schema for appending a note to a task."""

    text: str = Field(..., min_length=1, max_length=2000)


class TaskStatusUpdate(BaseModel):
    """Schema for a gated status change."""

    status: TaskStatus
    actor: StatusActor = Field(StatusActor.STAFF, description="Who requests the change")


class WeeklyTaskResponse(BaseModel):
    """Schema for a weekly task in API responses."""

    id: int
    trainee_id: int
    week: int
    title: str
    mission_text: str
    tip_text: str
    booster_text: str
    week_start_date: datetime.date
    week_end_date: datetime.date
    status: TaskStatus
    completion_date: Optional[datetime.date]
    notes_thread: list[NoteEntry]
    is_frozen: bool
    is_displayed_in_report: bool

    class Config:
        from_attributes = True
