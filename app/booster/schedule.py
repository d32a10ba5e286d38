"""
Schedule construction.

Pure functions that turn catalog templates into unsaved
:class:`~app.models.weekly_task.WeeklyTask` rows.  Persistence and
trainee updates are the job of
:class:`~app.services.schedule_service.ScheduleService`.

**Window rule**::

    week_start_date = base_start + (week - 1 + offset) * 7 days
    week_end_date   = week_start_date + 6 days
"""

from __future__ import annotations

import datetime
from typing import Iterable

from app.booster.calendar import program_week_start, week_window
from app.booster.catalog import PROGRAM_WEEKS, MissionTemplate, TemplateCatalog, TemplateVariant
from app.booster.errors import ValidationError
from app.models.weekly_task import TaskStatus, WeeklyTask


def new_task(trainee_id: int, template: MissionTemplate, week_start: datetime.date) -> WeeklyTask:
    """A fresh, unfrozen, not-started task for *template*'s week."""
    start, end = week_window(week_start)
    return WeeklyTask(trainee_id=trainee_id, week=template.week, title=template.title,
                      mission_text=template.mission_text, tip_text=template.tip_text,
                      booster_text=template.booster_text, week_start_date=start, week_end_date=end,
                      status=TaskStatus.NOT_STARTED.value, completion_date=None, notes_thread=[],
                      is_frozen=False, is_displayed_in_report=False, )


def build_schedule(trainee_id: int, variant: TemplateVariant, start_date: datetime.date,
                   catalog: TemplateCatalog, ) -> list[WeeklyTask]:
    """All 12 weeks for a trainee, starting on *start_date*."""
    if start_date is None:
        raise ValidationError("A start date is required to generate a schedule")
    return [new_task(trainee_id, template, program_week_start(start_date, template.week))
            for template in catalog.weeks(variant)]


def normalize_weeks(weeks: Iterable[int]) -> list[int]:
    """Deduplicate and sort a week selection.

    Raises :class:`ValidationError` if the selection is empty or contains
    a week outside 1..12.
    """
    selected = sorted(set(weeks))
    if not selected:
        raise ValidationError("Select at least one week to assign")
    invalid = [w for w in selected if not 1 <= w <= PROGRAM_WEEKS]
    if invalid:
        raise ValidationError(f"Weeks {invalid} are outside 1..{PROGRAM_WEEKS}")
    return selected


def build_week_subset(trainee_id: int, variant: TemplateVariant, weeks: list[int], anchor: datetime.date,
                      week_offset: int, catalog: TemplateCatalog, ) -> list[WeeklyTask]:
    """Tasks for selected *weeks* only, shifted by *week_offset* weeks."""
    return [new_task(trainee_id, catalog.template(variant, week), program_week_start(anchor, week, week_offset))
            for week in weeks]
