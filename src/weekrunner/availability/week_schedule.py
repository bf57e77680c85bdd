# src/weekrunner/availability/week_schedule.py

from __future__ import annotations

from datetime import date, datetime, time
from enum import IntEnum

from .day_schedule import DaySchedule, TimeStatus
from .intervals import DEFAULT_INTERVAL_MINUTES


class Weekday(IntEnum):
    """Weekdays numbered like date.weekday() (Monday == 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_date(cls, d: date) -> Weekday:
        return cls(d.weekday())

    @classmethod
    def coerce(cls, day: Weekday | int | str) -> Weekday:
        if isinstance(day, cls):
            return day
        if isinstance(day, str) and day.strip().isdigit():
            day = int(day)
        if isinstance(day, str):
            key = day.strip().upper()
            for member in cls:
                # "tue", "Tuesday", "TUESDAY"
                if member.name == key or member.name[:3] == key:
                    return member
            raise ValueError(f"Unknown weekday: {day!r}")
        if isinstance(day, int) and not isinstance(day, bool):
            try:
                return cls(day)
            except ValueError:
                raise ValueError(f"Unknown weekday: {day!r}") from None
        raise ValueError(f"Unknown weekday: {day!r}")


class WeekSchedule:
    """
    Seven independent DaySchedules, one per weekday.

    No locking: a caller sharing one WeekSchedule across threads has to
    synchronize reads and writes itself.
    """

    def __init__(
        self,
        interval_size: int = DEFAULT_INTERVAL_MINUTES,
        default_status: TimeStatus = TimeStatus.FREE,
    ) -> None:
        self._days: dict[Weekday, DaySchedule] = {
            day: DaySchedule(interval_size, default_status) for day in Weekday
        }

    @classmethod
    def from_settings(cls, settings) -> WeekSchedule:
        """
        Build a calendar from Settings (interval_minutes, default_status).

        Raises ConfigurationError for a bad WEEKRUNNER_INTERVAL_MINUTES.
        """
        return cls(settings.interval_minutes, settings.default_status)

    @property
    def interval_size(self) -> int:
        return self._days[Weekday.MONDAY].interval_size

    def day(self, day: Weekday | int | str) -> DaySchedule:
        return self._days[Weekday.coerce(day)]

    def get_time_status(self, day: Weekday | int | str, at: time) -> TimeStatus:
        return self.day(day).get_time_status(at)

    def set_time_status(
        self,
        day: Weekday | int | str,
        start_time: time,
        end_time: time | None,
        status: TimeStatus,
    ) -> None:
        self.day(day).set_time_status(start_time, end_time, status)

    def status_at(self, moment: datetime) -> TimeStatus:
        return self.get_time_status(Weekday.from_date(moment), moment.time())
