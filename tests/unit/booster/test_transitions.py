"""Tests for the status gate and pause/resume rules."""

import datetime

import pytest

from app.booster.calendar import WEEKDAYS
from app.booster.errors import FrozenTaskError, InvalidTransitionError, ValidationError
from app.booster.transitions import (
    StatusActor,
    apply_status,
    check_transition,
    freeze_tasks,
    reset_task,
    unfreeze_tasks,
)
from app.models.weekly_task import TaskStatus, WeeklyTask

TODAY = datetime.date(2024, 5, 1)
SUNDAY = WEEKDAYS["sunday"]


def make_task(week=1, status=TaskStatus.NOT_STARTED, frozen=False, start=datetime.date(2024, 1, 7), **fields):
    return WeeklyTask(id=week, trainee_id=1, week=week, title=f"Week {week}", mission_text="m",
                      week_start_date=start, week_end_date=start + datetime.timedelta(days=6),
                      status=status.value, is_frozen=frozen, notes_thread=[], **fields)


# ==========================================================================
# Status gate
# ==========================================================================


class TestCheckTransition:
    @pytest.mark.parametrize("new_status", list(TaskStatus))
    @pytest.mark.parametrize("actor", list(StatusActor))
    def test_frozen_task_always_refused(self, new_status, actor):
        task = make_task(frozen=True)
        with pytest.raises(FrozenTaskError) as exc:
            check_transition(task, new_status, actor)
        assert exc.value.week == 1

    def test_same_status_is_noop(self):
        assert check_transition(make_task(), TaskStatus.NOT_STARTED, StatusActor.STAFF) is False

    @pytest.mark.parametrize(
        "current, new",
        [
            (TaskStatus.NOT_STARTED, TaskStatus.COMPLETED),
            (TaskStatus.COMPLETED, TaskStatus.NOT_STARTED),
            (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED),
            (TaskStatus.IN_PROGRESS, TaskStatus.NOT_STARTED),
        ],
    )
    def test_staff_allowed(self, current, new):
        assert check_transition(make_task(status=current), new, StatusActor.STAFF) is True

    def test_staff_cannot_reopen_as_in_progress(self):
        with pytest.raises(InvalidTransitionError):
            check_transition(make_task(status=TaskStatus.COMPLETED), TaskStatus.IN_PROGRESS, StatusActor.STAFF)

    def test_trainee_cannot_undo_completion(self):
        with pytest.raises(InvalidTransitionError):
            check_transition(make_task(status=TaskStatus.COMPLETED), TaskStatus.NOT_STARTED, StatusActor.TRAINEE)

    def test_invalid_transition_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            check_transition(make_task(status=TaskStatus.COMPLETED), TaskStatus.IN_PROGRESS, StatusActor.TRAINEE)


class TestApplyStatus:
    def test_completion_stamps_today(self):
        task = make_task()
        assert apply_status(task, TaskStatus.COMPLETED, StatusActor.STAFF, TODAY) is True
        assert task.status == TaskStatus.COMPLETED.value
        assert task.completion_date == TODAY

    def test_reopening_clears_completion_date(self):
        task = make_task(status=TaskStatus.COMPLETED, completion_date=TODAY)
        apply_status(task, TaskStatus.NOT_STARTED, StatusActor.STAFF, TODAY)
        assert task.completion_date is None

    def test_noop_leaves_task_untouched(self):
        task = make_task(status=TaskStatus.COMPLETED, completion_date=datetime.date(2024, 1, 9))
        assert apply_status(task, TaskStatus.COMPLETED, StatusActor.STAFF, TODAY) is False
        assert task.completion_date == datetime.date(2024, 1, 9)


# ==========================================================================
# Freeze / unfreeze / reset
# ==========================================================================


class TestFreezeTasks:
    def test_only_open_tasks_frozen(self):
        tasks = [make_task(week=w) for w in range(1, 6)]
        tasks += [make_task(week=6, status=TaskStatus.COMPLETED), make_task(week=7, status=TaskStatus.COMPLETED)]
        changed = freeze_tasks(tasks)
        assert len(changed) == 5
        assert all(t.is_frozen for t in tasks[:5])
        assert not any(t.is_frozen for t in tasks[5:])

    def test_second_freeze_changes_nothing(self):
        tasks = [make_task(week=w) for w in range(1, 4)]
        freeze_tasks(tasks)
        assert freeze_tasks(tasks) == []


class TestUnfreezeTasks:
    def test_windows_realigned_to_resume_week(self):
        tasks = [make_task(week=2, frozen=True), make_task(week=3, frozen=True)]
        unfreeze_tasks(tasks, datetime.date(2024, 6, 10), SUNDAY)
        assert tasks[0].week_start_date == datetime.date(2024, 6, 16)
        assert tasks[0].week_end_date == datetime.date(2024, 6, 22)
        assert tasks[1].week_start_date == datetime.date(2024, 6, 23)
        assert tasks[1].week_end_date == datetime.date(2024, 6, 29)
        assert not any(t.is_frozen for t in tasks)

    def test_status_and_notes_preserved(self):
        notes = [{"text": "hi", "timestamp": "2024-01-08T10:00:00+00:00"}]
        task = make_task(status=TaskStatus.IN_PROGRESS, frozen=True)
        task.notes_thread = notes
        unfreeze_tasks([task], datetime.date(2024, 6, 10), SUNDAY)
        assert task.status == TaskStatus.IN_PROGRESS.value
        assert task.notes_thread == notes

    def test_unfrozen_tasks_untouched(self):
        task = make_task(status=TaskStatus.COMPLETED)
        assert unfreeze_tasks([task], datetime.date(2024, 6, 10), SUNDAY) == []
        assert task.week_start_date == datetime.date(2024, 1, 7)

    def test_monday_convention(self):
        task = make_task(frozen=True)
        unfreeze_tasks([task], datetime.date(2024, 6, 9), WEEKDAYS["monday"])
        assert task.week_start_date == datetime.date(2024, 6, 3)


class TestResetTask:
    def test_progress_cleared_window_kept(self):
        task = make_task(status=TaskStatus.COMPLETED, frozen=True, completion_date=TODAY,
                         is_displayed_in_report=True)
        task.notes_thread = [{"text": "x", "timestamp": "2024-01-08T10:00:00+00:00"}]
        reset_task(task)
        assert task.status == TaskStatus.NOT_STARTED.value
        assert task.completion_date is None
        assert task.notes_thread == []
        assert task.is_frozen is False
        assert task.is_displayed_in_report is False
        assert task.week_start_date == datetime.date(2024, 1, 7)
