"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.trainee import Trainee  # noqa: F401
from app.models.group import TraineeGroup, GroupMembership  # noqa: F401
from app.models.weekly_task import WeeklyTask  # noqa: F401
from app.models.coach_notification import CoachNotification  # noqa: F401
