"""Tests for repository store-failure handling."""

import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.booster.catalog import TemplateVariant, get_catalog
from app.booster.errors import PersistenceError
from app.booster.schedule import build_schedule
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository

START = datetime.date(2024, 1, 7)


@pytest.fixture
def task_repo(session):
    return WeeklyTaskRepository(session)


@pytest.fixture
def trainee(make_trainee):
    return make_trainee("dana@example.com")


def schedule_for(trainee, start=START):
    return build_schedule(trainee.id, TemplateVariant.MALE, start, get_catalog())


# ==========================================================================
# Reads
# ==========================================================================


class TestReadFailures:
    def test_select_failure_is_persistence_error(self, task_repo, trainee, failing_reads):
        failing_reads(trainee.id)
        with pytest.raises(PersistenceError, match="connection lost"):
            task_repo.list_by_trainee(trainee.id)
        with pytest.raises(PersistenceError):
            task_repo.count_by_trainee(trainee.id)
        with pytest.raises(PersistenceError):
            task_repo.existing_weeks(trainee.id)

    def test_get_failure_is_persistence_error(self, session, task_repo, monkeypatch):
        def broken_get(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(session, "get", broken_get)
        with pytest.raises(PersistenceError):
            task_repo.get_by_id(1)

    def test_session_usable_after_failure(self, session, task_repo, trainee, failing_reads, monkeypatch):
        failing_reads(trainee.id)
        with pytest.raises(PersistenceError):
            task_repo.list_by_trainee(trainee.id)
        monkeypatch.undo()
        assert TraineeRepository(session).get_by_email("dana@example.com").id == trainee.id


# ==========================================================================
# Writes
# ==========================================================================


class TestReplaceForTrainee:
    def test_staged_trainee_written_in_same_commit(self, session, task_repo, trainee):
        trainee.booster_start_date = START
        task_repo.replace_for_trainee(trainee.id, schedule_for(trainee), trainee)
        session.expire_all()
        assert trainee.booster_start_date == START
        assert task_repo.count_by_trainee(trainee.id) == 12

    def test_commit_failure_rolls_back_everything(self, task_repo, trainee, failing_commits):
        task_repo.replace_for_trainee(trainee.id, schedule_for(trainee), trainee)
        failing_commits(trainee.id)

        trainee.booster_start_date = datetime.date(2024, 3, 3)
        with pytest.raises(PersistenceError):
            task_repo.replace_for_trainee(trainee.id, schedule_for(trainee, datetime.date(2024, 3, 3)), trainee)

        assert trainee.booster_start_date is None
        kept = task_repo.list_by_trainee(trainee.id)
        assert len(kept) == 12
        assert kept[0].week_start_date == START
