"""Database repositories."""

from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.group import GroupRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.db.repositories.coach_notification import CoachNotificationRepository

__all__ = [
    "TraineeRepository",
    "GroupRepository",
    "WeeklyTaskRepository",
    "CoachNotificationRepository",
]
