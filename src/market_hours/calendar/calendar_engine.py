"""Proleptic Gregorian calendar arithmetic relative to the Unix epoch.

All functions are pure integer arithmetic: no ``datetime`` objects, no time zones and no
platform limits, so years before 1 or after 9999 still resolve (they are simply not
meaningful for an exchange calendar).

Weekdays follow the convention ``0 = Sunday … 6 = Saturday``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Tuple


class Weekday(IntEnum):
    """Day of week, Sunday first."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class CalendarDate(NamedTuple):
    """A calendar date plus its weekday."""

    year: int
    month: int
    day: int
    weekday: int


class CalendarEngine:
    """Static helpers for date ↔ day-count conversion and month lookups."""

    _DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    _DAYS_PER_400_YEARS = 146097
    _DAYS_PER_100_YEARS = 36524
    _DAYS_PER_4_YEARS = 1461
    # 1970-01-01 was a Thursday.
    _EPOCH_WEEKDAY = Weekday.THURSDAY

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return ``True`` for Gregorian leap years."""
        return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in *month* of *year*."""
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")
        if month == 2 and CalendarEngine.is_leap_year(year):
            return 29
        return CalendarEngine._DAYS_IN_MONTH[month - 1]

    @staticmethod
    def _days_before_year(year: int) -> int:
        """Days from 0001-01-01 to January 1st of *year*; floor division keeps it valid below 1."""
        previous = year - 1
        return previous * 365 + previous // 4 - previous // 100 + previous // 400

    @staticmethod
    def _days_before_month(year: int, month: int) -> int:
        days = sum(CalendarEngine._DAYS_IN_MONTH[: month - 1])
        if month > 2 and CalendarEngine.is_leap_year(year):
            days += 1
        return days

    @staticmethod
    def days_since_epoch(year: int, month: int, day: int) -> int:
        """Return the signed day count from 1970-01-01 to ``year-month-day``.

        Whole years contribute 365 or 366 days, then whole months of the target year, then
        ``day - 1``.  The year sum is evaluated in closed form, so distant years cost the same
        as recent ones.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")
        return (
            CalendarEngine._days_before_year(year)
            - CalendarEngine._days_before_year(1970)
            + CalendarEngine._days_before_month(year, month)
            + day
            - 1
        )

    @staticmethod
    def weekday_from_days(days: int) -> int:
        """Return the weekday of the day *days* after the epoch."""
        return ((days + CalendarEngine._EPOCH_WEEKDAY) % 7 + 7) % 7

    @staticmethod
    def weekday(year: int, month: int, day: int) -> int:
        """Return the weekday of ``year-month-day``."""
        return CalendarEngine.weekday_from_days(
            CalendarEngine.days_since_epoch(year, month, day)
        )

    @staticmethod
    def date_from_days_since_epoch(days: int) -> CalendarDate:
        """Return the date *days* after (or before, when negative) 1970-01-01."""
        remaining = days + CalendarEngine._days_before_year(1970)
        cycles_400, remaining = divmod(remaining, CalendarEngine._DAYS_PER_400_YEARS)
        cycles_100, remaining = divmod(remaining, CalendarEngine._DAYS_PER_100_YEARS)
        cycles_4, remaining = divmod(remaining, CalendarEngine._DAYS_PER_4_YEARS)
        years, remaining = divmod(remaining, 365)
        year = cycles_400 * 400 + cycles_100 * 100 + cycles_4 * 4 + years + 1
        weekday = CalendarEngine.weekday_from_days(days)
        if years == 4 or cycles_100 == 4:
            # Last day of a leap year closing a 4- or 400-year cycle.
            return CalendarDate(year - 1, 12, 31, weekday)
        month = 1
        while True:
            length = CalendarEngine.days_in_month(year, month)
            if remaining < length:
                break
            remaining -= length
            month += 1
        return CalendarDate(year, month, remaining + 1, weekday)

    @staticmethod
    def weekday_count_through(year: int, month: int, day: int, weekday: int) -> int:
        """Return how many times *weekday* occurs on days ``1..day`` of the month, without a scan."""
        latest = day - (CalendarEngine.weekday(year, month, day) - weekday) % 7
        return 0 if latest < 1 else (latest - 1) // 7 + 1

    @staticmethod
    def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
        """Return the day of the *n*-th *weekday* in the month, or 1 if there is none."""
        first = CalendarEngine.weekday(year, month, 1)
        count = 0
        for day in range(1, CalendarEngine.days_in_month(year, month) + 1):
            if (first + day - 1) % 7 == weekday:
                count += 1
                if count == n:
                    return day
        return 1

    @staticmethod
    def last_weekday_of_month(year: int, month: int, weekday: int) -> int:
        """Return the day of the last *weekday* in the month, or 1 if there is none."""
        first = CalendarEngine.weekday(year, month, 1)
        for day in range(CalendarEngine.days_in_month(year, month), 0, -1):
            if (first + day - 1) % 7 == weekday:
                return day
        return 1

    @staticmethod
    def easter_sunday(year: int) -> Tuple[int, int]:
        """Return ``(month, day)`` of Gregorian Easter Sunday (anonymous algorithm)."""
        a = year % 19
        b, c = divmod(year, 100)
        d, e = divmod(b, 4)
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        h = (19 * a + b - d - g + 15) % 30
        i, k = divmod(c, 4)
        l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
        m = (a + 11 * h + 22 * l) // 451
        month, day = divmod(h + l - 7 * m + 114, 31)
        return month, day + 1
