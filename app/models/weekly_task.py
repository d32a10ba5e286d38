"""
Weekly task database model.

One row per (trainee, program week).  Mission text is copied from the
template catalog when the row is created and never re-derived.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class TaskStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class WeeklyTask(SQLModel, table=True):
    """A single week of a trainee's booster program.

    ``week_end_date`` is always ``week_start_date + 6 days``.  While
    ``is_frozen`` is set the window is stale and the task must not be
    treated as active.
    """

    __tablename__ = "weekly_tasks"
    __table_args__ = (UniqueConstraint("trainee_id", "week", name="uq_weekly_task_trainee_week"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)
    week: int = Field(nullable=False, ge=1, le=12)

    # Content snapshot from the catalog
    title: str = Field(nullable=False, max_length=255)
    mission_text: str = Field(nullable=False)
    tip_text: str = Field(default="")
    booster_text: str = Field(default="")

    # Active window
    week_start_date: datetime.date = Field(nullable=False, index=True)
    week_end_date: datetime.date = Field(nullable=False)

    status: str = Field(default=TaskStatus.NOT_STARTED.value, max_length=20)
    completion_date: Optional[datetime.date] = Field(default=None)

    # Trainee-authored notes: [{"text": ..., "timestamp": ...}]
    notes_thread: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    is_frozen: bool = Field(default=False)
    is_displayed_in_report: bool = Field(default=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED.value

    def is_active_on(self, day: datetime.date) -> bool:
        """Window contains *day* and the task is not paused."""
        return not self.is_frozen and self.week_start_date <= day <= self.week_end_date
