"""Injected time source and calendar-day helpers."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""


@dataclass
class SystemClock(Clock):
    """Wall clock in the configured server timezone."""

    timezone_name: str = "UTC"

    def now(self) -> datetime:
        """Return the current time in the server timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return the half-open [start, end) range covering a calendar day."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def local_day(moment: datetime, tz: ZoneInfo) -> date:
    """Return the calendar day of a datetime in the given timezone."""
    return moment.astimezone(tz).date()
