"""
Trainee repository.

Handles database operations for the Trainee model, including the
group-membership lookup used by bulk targeting.
"""

from typing import Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.group import GroupMembership, TraineeGroup
from app.models.trainee import Trainee


class TraineeRepository(BaseRepository):
    """Repository for Trainee database operations."""

    def create(self, trainee: Trainee) -> Trainee:
        """
        Create a new trainee in the database.

        Args:
            trainee: Trainee instance to create

        Returns:
            Created trainee with generated id
        """
        trainee.email = trainee.email.strip().lower()
        self.session.add(trainee)
        self._commit(trainee)
        return trainee

    def get_by_email(self, email: str) -> Optional[Trainee]:
        """
        Get trainee by email address (case-insensitive).

        Args:
            email: Trainee email

        Returns:
            Trainee instance if found, None otherwise
        """
        statement = select(Trainee).where(Trainee.email == email.strip().lower())
        return self._first(statement)

    def list_by_group(self, group_name: str) -> list[Trainee]:
        """Current members of *group_name*, ordered by email."""
        statement = (select(Trainee).join(GroupMembership, GroupMembership.trainee_id == Trainee.id)
                     .join(TraineeGroup, TraineeGroup.id == GroupMembership.group_id)
                     .where(TraineeGroup.name == group_name).order_by(Trainee.email))
        return self._exec(statement)

    def list_booster_active(self) -> list[Trainee]:
        """Unlocked and enabled booster trainees, staff excluded."""
        statement = (select(Trainee).where(Trainee.booster_unlocked == True,  # noqa: E712
                                           Trainee.booster_enabled == True,  # noqa: E712
                                           Trainee.role != "staff").order_by(Trainee.email))
        return self._exec(statement)

    def update(self, trainee: Trainee) -> Trainee:
        """
        Update an existing trainee.

        Args:
            trainee: Trainee instance with updated data

        Returns:
            Updated trainee
        """
        self.session.add(trainee)
        self._commit(trainee)
        return trainee
