"""Tests for FreezeService."""

import datetime

import pytest

from app.booster.calendar import WEEKDAYS
from app.booster.errors import FrozenTaskError, ValidationError
from app.booster.transitions import StatusActor
from app.models.weekly_task import TaskStatus
from app.services.freeze_service import FreezeService
from app.services.schedule_service import ScheduleService
from app.services.task_status_service import TaskStatusService

START = datetime.date(2024, 1, 7)
RESUME = datetime.date(2024, 6, 10)  # a Monday


@pytest.fixture
def service(session, clock):
    return FreezeService(session, week_starts_on=WEEKDAYS["sunday"], clock=clock)


@pytest.fixture
def trainee_with_progress(session, clock, make_trainee):
    """Weeks 1..7 assigned, weeks 1 and 2 completed."""
    trainee = make_trainee("dana@example.com", booster_start_date=START)
    created, _ = ScheduleService(session, clock).assign_weeks(trainee, list(range(1, 8)))
    status_service = TaskStatusService(session, clock)
    for task in created[:2]:
        status_service.change_status(task.id, TaskStatus.COMPLETED, StatusActor.STAFF)
    return trainee


class TestFreeze:
    def test_freezes_open_tasks_only(self, service, trainee_with_progress):
        assert service.freeze(trainee_with_progress) == 5
        tasks = service.task_repo.list_by_trainee(trainee_with_progress.id)
        assert [t.week for t in tasks if t.is_frozen] == [3, 4, 5, 6, 7]

    def test_touches_updated_at_from_clock(self, service, trainee_with_progress, clock):
        service.freeze(trainee_with_progress)
        frozen = [t for t in service.task_repo.list_by_trainee(trainee_with_progress.id) if t.is_frozen]
        assert all(t.updated_at == datetime.datetime(2024, 5, 1) for t in frozen)

    def test_second_freeze_is_noop(self, service, trainee_with_progress):
        service.freeze(trainee_with_progress)
        assert service.freeze(trainee_with_progress) == 0

    def test_frozen_tasks_refuse_status_change(self, session, clock, service, trainee_with_progress):
        service.freeze(trainee_with_progress)
        frozen = service.task_repo.list_by_trainee(trainee_with_progress.id)[2]
        with pytest.raises(FrozenTaskError):
            TaskStatusService(session, clock).change_status(frozen.id, TaskStatus.COMPLETED)

    def test_trainee_without_tasks(self, service, make_trainee):
        assert service.freeze(make_trainee("empty@example.com")) == 0


class TestUnfreeze:
    def test_realigns_to_resume_week(self, service, trainee_with_progress):
        service.freeze(trainee_with_progress)
        assert service.unfreeze(trainee_with_progress, RESUME) == 5

        tasks = {t.week: t for t in service.task_repo.list_by_trainee(trainee_with_progress.id)}
        assert tasks[3].week_start_date == datetime.date(2024, 6, 23)
        assert tasks[3].week_end_date == datetime.date(2024, 6, 29)
        assert not any(t.is_frozen for t in tasks.values())

    def test_completed_tasks_keep_their_windows(self, service, trainee_with_progress):
        service.freeze(trainee_with_progress)
        service.unfreeze(trainee_with_progress, RESUME)
        week1 = service.task_repo.list_by_trainee(trainee_with_progress.id)[0]
        assert week1.week_start_date == START
        assert week1.status == TaskStatus.COMPLETED.value

    def test_round_trip_keeps_identity_status_and_notes(self, session, clock, service, trainee_with_progress):
        status_service = TaskStatusService(session, clock)
        open_task = service.task_repo.list_by_trainee(trainee_with_progress.id)[3]
        status_service.add_note(open_task.id, "halfway there")
        status_service.change_status(open_task.id, TaskStatus.IN_PROGRESS, StatusActor.TRAINEE)
        before = {t.id: (t.status, list(t.notes_thread)) for t in service.task_repo.list_by_trainee(
            trainee_with_progress.id)}

        service.freeze(trainee_with_progress)
        service.unfreeze(trainee_with_progress, RESUME)

        after = {t.id: (t.status, list(t.notes_thread)) for t in service.task_repo.list_by_trainee(
            trainee_with_progress.id)}
        assert after == before

    def test_nothing_frozen_is_noop(self, service, trainee_with_progress):
        assert service.unfreeze(trainee_with_progress, RESUME) == 0

    def test_missing_resume_date_raises(self, service, trainee_with_progress):
        with pytest.raises(ValidationError):
            service.unfreeze(trainee_with_progress, None)
