"""
Coach notification model.

In-app inbox entry written for every notification dispatched to a
trainee (e.g. booster access granted).
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class CoachNotification(SQLModel, table=True):
    __tablename__ = "coach_notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)
    notification_type: str = Field(nullable=False, max_length=50)
    title: str = Field(nullable=False, max_length=255)
    message: str = Field(nullable=False)
    sent_by: str = Field(default="system", max_length=255)
    sent_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    read: bool = Field(default=False)
