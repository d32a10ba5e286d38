"""
Group directory models.

A group is a named set of trainees (e.g. a coaching cohort).  Membership
is a plain link table so a trainee can belong to several groups.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class TraineeGroup(SQLModel, table=True):
    __tablename__ = "trainee_groups"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100, nullable=False)
    assigned_coach: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class GroupMembership(SQLModel, table=True):
    __tablename__ = "group_memberships"
    __table_args__ = (UniqueConstraint("group_id", "trainee_id", name="uq_group_trainee"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    group_id: int = Field(foreign_key="trainee_groups.id", nullable=False, index=True)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)
