"""SQLModel database models."""

from app.models.trainee import Trainee, BoosterStatus, TraineeRole
from app.models.group import TraineeGroup, GroupMembership
from app.models.weekly_task import WeeklyTask, TaskStatus
from app.models.coach_notification import CoachNotification

__all__ = [
    "Trainee",
    "BoosterStatus",
    "TraineeRole",
    "TraineeGroup",
    "GroupMembership",
    "WeeklyTask",
    "TaskStatus",
    "CoachNotification",
]
