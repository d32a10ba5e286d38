"""
Shared fixtures.

Service and API tests run on a fresh in-memory SQLite database per
test; domain tests under ``tests/unit/booster`` need none of this.
"""

import datetime
import os

# Must be set before app.core.config is imported anywhere
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.clock import FixedClock
from app.db.repositories.group import GroupRepository
from app.db.repositories.trainee import TraineeRepository
from app.models.group import TraineeGroup
from app.models.trainee import Trainee
from app.models.weekly_task import WeeklyTask

TODAY = datetime.date(2024, 5, 1)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def make_trainee(session):
    """Factory: ``make_trainee("a@x.com", gender="female", booster_start_date=...)``."""

    def _make(email: str, **fields) -> Trainee:
        return TraineeRepository(session).create(Trainee(email=email, **fields))

    return _make


@pytest.fixture
def make_group(session):
    """Factory: ``make_group("Cohort A", [trainee, ...])``."""

    def _make(name: str, members: list[Trainee]) -> TraineeGroup:
        repository = GroupRepository(session)
        group = repository.create(TraineeGroup(name=name))
        for member in members:
            repository.add_member(group.id, member.id)
        return group

    return _make


def store_error(statement: str = "SELECT") -> OperationalError:
    return OperationalError(statement, {}, Exception("connection lost"))


@pytest.fixture
def failing_reads(session, monkeypatch):
    """Make every select bound to one trainee id fail: ``failing_reads(trainee.id)``."""

    def _arm(trainee_id: int) -> None:
        original = session.exec

        def exec_(statement, *args, **kwargs):
            params = statement.compile().params
            if any(key.startswith("trainee_id") and value == trainee_id for key, value in params.items()):
                raise store_error()
            return original(statement, *args, **kwargs)

        monkeypatch.setattr(session, "exec", exec_)

    return _arm


@pytest.fixture
def failing_commits(session, monkeypatch):
    """Make any commit carrying tasks of one trainee fail: ``failing_commits(trainee.id)``."""

    def _arm(trainee_id: int) -> None:
        original = session.commit

        def commit():
            pending = [*session.new, *session.dirty]
            if any(isinstance(o, WeeklyTask) and o.trainee_id == trainee_id for o in pending):
                raise store_error("COMMIT")
            return original()

        monkeypatch.setattr(session, "commit", commit)

    return _arm
