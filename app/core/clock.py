"""
Clock abstraction.

Every booster service receives a clock instead of reading the system time,
so "today" can be pinned in tests and in replayed bulk operations.
"""

import datetime
from typing import Protocol


class Clock(Protocol):
    def today(self) -> datetime.date:
        ...

    def now(self) -> datetime.datetime:
        ...


class SystemClock:
    """Wall-clock time (UTC)."""

    def today(self) -> datetime.date:
        return self.now().date()

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)


class FixedClock:
    """Clock frozen at a given date (midnight UTC)."""

    def __init__(self, today: datetime.date):
        self._today = today

    def today(self) -> datetime.date:
        return self._today

    def now(self) -> datetime.datetime:
        return datetime.datetime.combine(self._today, datetime.time.min, tzinfo=datetime.timezone.utc)


def utc_timestamp(clock: Clock) -> datetime.datetime:
    """Naive UTC ``now`` for ``created_at``/``updated_at``-style columns."""
    return clock.now().astimezone(datetime.timezone.utc).replace(tzinfo=None)
