"""
Trainee API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel


class TraineeResponse(BaseModel):
    """Schema for trainee enrolment data in API responses."""

    id: int
    email: str
    full_name: Optional[str]
    gender: Optional[str]
    booster_enabled: bool
    booster_unlocked: bool
    booster_status: str
    booster_start_date: Optional[datetime.date]

    class Config:
        from_attributes = True
