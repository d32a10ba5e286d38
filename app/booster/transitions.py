"""
Task status transitions and pause/resume rules.

The status gate, freeze selection, unfreeze re-dating and full reset
are pure mutations of in-memory :class:`WeeklyTask` objects; services
load and persist them.

Transition table::

    staff:    not_started <-> completed, in_progress -> not_started | completed
    trainee:  not_started -> in_progress | completed, in_progress -> completed

Every transition is refused on a frozen task.
"""

from __future__ import annotations

import datetime
from enum import Enum

from app.booster.calendar import aligned_week_window
from app.booster.errors import FrozenTaskError, InvalidTransitionError
from app.models.weekly_task import TaskStatus, WeeklyTask


class StatusActor(str, Enum):
    STAFF = "staff"
    TRAINEE = "trainee"


NS = TaskStatus.NOT_STARTED
IP = TaskStatus.IN_PROGRESS
DONE = TaskStatus.COMPLETED

LEGAL_TRANSITIONS: dict[StatusActor, set[tuple[TaskStatus, TaskStatus]]] = {
    StatusActor.STAFF: {(NS, DONE), (DONE, NS), (IP, NS), (IP, DONE)},
    StatusActor.TRAINEE: {(NS, IP), (IP, DONE), (NS, DONE)},
}


def check_transition(task: WeeklyTask, new_status: TaskStatus, actor: StatusActor) -> bool:
    """Validate a status change.

    Returns ``False`` when *new_status* equals the current status (no-op),
    ``True`` when the change is legal.

    Raises:
        FrozenTaskError: the task is frozen (checked first, always).
        InvalidTransitionError: the pair is not in the table for *actor*.
    """
    if task.is_frozen:
        raise FrozenTaskError(task.id, task.week)
    current = TaskStatus(task.status)
    if current == new_status:
        return False
    if (current, new_status) not in LEGAL_TRANSITIONS[actor]:
        raise InvalidTransitionError(
            f"{actor.value} cannot move task {task.id} from '{current.value}' to '{new_status.value}'")
    return True


def apply_status(task: WeeklyTask, new_status: TaskStatus, actor: StatusActor, today: datetime.date) -> bool:
    """Apply a gated status change in place.  Returns whether anything changed."""
    if not check_transition(task, new_status, actor):
        return False
    task.status = new_status.value
    task.completion_date = today if new_status == TaskStatus.COMPLETED else None
    return True


def freezable(tasks: list[WeeklyTask]) -> list[WeeklyTask]:
    """Open tasks that are not frozen yet."""
    return [t for t in tasks if not t.is_completed and not t.is_frozen]


def freeze_tasks(tasks: list[WeeklyTask]) -> list[WeeklyTask]:
    """Set ``is_frozen`` on every freezable task.  Returns the tasks changed."""
    changed = freezable(tasks)
    for task in changed:
        task.is_frozen = True
    return changed


def unfreeze_tasks(tasks: list[WeeklyTask], resume_date: datetime.date,
                   week_starts_on: int | None = None) -> list[WeeklyTask]:
    """Resume every frozen task in the week of *resume_date*.

    Only the window and the pause flag change; status, completion date
    and notes are kept.
    """
    changed = [t for t in tasks if t.is_frozen]
    for task in changed:
        task.week_start_date, task.week_end_date = aligned_week_window(resume_date, task.week, week_starts_on)
        task.is_frozen = False
    return changed


def reset_task(task: WeeklyTask) -> None:
    """Start the week's content over, keeping its calendar window."""
    task.status = TaskStatus.NOT_STARTED.value
    task.completion_date = None
    task.notes_thread = []
    task.is_displayed_in_report = False
    task.is_frozen = False
