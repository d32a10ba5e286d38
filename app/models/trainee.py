"""
Trainee database model.

The identity store for the booster program.  Trainees are addressed
externally by e-mail; ``booster_*`` columns hold program enrolment.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class BoosterStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


class TraineeRole(str, Enum):
    TRAINEE = "trainee"
    STAFF = "staff"


class Trainee(SQLModel, table=True):
    """
    A coached trainee.

    ``gender`` selects the mission template variant.
    """
    __tablename__ = "trainees"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    full_name: Optional[str] = Field(default=None, max_length=255)
    gender: Optional[str] = Field(default=None, max_length=20)
    role: str = Field(default=TraineeRole.TRAINEE.value, max_length=20)

    # Booster enrolment
    booster_enabled: bool = Field(default=False)
    booster_unlocked: bool = Field(default=False)
    booster_status: str = Field(default=BoosterStatus.NOT_STARTED.value, max_length=20)
    booster_start_date: Optional[datetime.date] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def is_staff(self) -> bool:
        return self.role == TraineeRole.STAFF.value

    @property
    def is_booster_active(self) -> bool:
        """Unlocked and enabled: shown in overviews and "all active" targets."""
        return self.booster_unlocked and self.booster_enabled
