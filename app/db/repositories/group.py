"""Group directory repository."""

from typing import Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.group import GroupMembership, TraineeGroup


class GroupRepository(BaseRepository):
    """Repository for TraineeGroup and GroupMembership operations."""

    def get_by_name(self, name: str) -> Optional[TraineeGroup]:
        statement = select(TraineeGroup).where(TraineeGroup.name == name)
        return self._first(statement)

    def create(self, group: TraineeGroup) -> TraineeGroup:
        self.session.add(group)
        self._commit(group)
        return group

    def add_member(self, group_id: int, trainee_id: int) -> GroupMembership:
        membership = GroupMembership(group_id=group_id, trainee_id=trainee_id)
        self.session.add(membership)
        self._commit(membership)
        return membership

    def remove_member(self, group_id: int, trainee_id: int) -> bool:
        statement = select(GroupMembership).where(GroupMembership.group_id == group_id,
                                                  GroupMembership.trainee_id == trainee_id)
        membership = self._first(statement)
        if membership:
            self.session.delete(membership)
            self._commit()
            return True
        return False
