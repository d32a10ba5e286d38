"""
Week-window arithmetic for booster schedules.

One convention everywhere: a week starts on ``BOOSTER_WEEK_STARTS_ON``
(default Sunday) and a window is always ``[start, start + 6 days]``.
``end_of_week`` is derived from ``start_of_week`` so the two can never
disagree on window length.

Generation keeps the caller's start date as-is (staff choose it
explicitly); unfreeze aligns to the week containing the resume date.
"""

from __future__ import annotations

import datetime

from app.core.config import settings

WEEK = datetime.timedelta(days=7)
WINDOW_SPAN = datetime.timedelta(days=6)

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


def week_start_weekday(name: str | None = None) -> int:
    """Python weekday number (Monday=0) of the configured week start."""
    key = (name or settings.BOOSTER_WEEK_STARTS_ON).strip().lower()
    if key not in WEEKDAYS:
        raise ValueError(f"Unknown weekday '{key}'. Expected one of {list(WEEKDAYS)}")
    return WEEKDAYS[key]


def start_of_week(day: datetime.date, week_starts_on: int | None = None) -> datetime.date:
    """First day of the week containing *day*."""
    first = week_start_weekday() if week_starts_on is None else week_starts_on
    return day - datetime.timedelta(days=(day.weekday() - first) % 7)


def end_of_week(day: datetime.date, week_starts_on: int | None = None) -> datetime.date:
    """Last day of the week containing *day*."""
    return start_of_week(day, week_starts_on) + WINDOW_SPAN


def week_window(start: datetime.date) -> tuple[datetime.date, datetime.date]:
    """``(start, start + 6 days)``."""
    return start, start + WINDOW_SPAN


def program_week_start(base_start: datetime.date, week: int, offset: int = 0) -> datetime.date:
    """Start of program *week* (1-based) counted from *base_start*."""
    return base_start + (week - 1 + offset) * WEEK


def aligned_week_window(resume_date: datetime.date, week: int,
                        week_starts_on: int | None = None) -> tuple[datetime.date, datetime.date]:
    """Window of program *week* when the program (re)starts in the week of *resume_date*."""
    anchor = start_of_week(resume_date, week_starts_on)
    new_start = program_week_start(anchor, week)
    return new_start, end_of_week(new_start, week_starts_on)

