"""Holiday rule variants.

A rule knows how to place its holiday in a given year.  The set of variants is closed:

* :class:`FixedDate` – same month/day every year, weekend dates observed on the following Monday.
* :class:`NthWeekdayOfMonth` – e.g. third Monday of January.
* :class:`LastWeekdayOfMonth` – e.g. last Monday of May.
* :class:`EasterRelative` – a fixed number of days from Gregorian Easter Sunday.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from src.market_hours.calendar.calendar_engine import (CalendarDate,
                                                       CalendarEngine, Weekday)

OBSERVED_SUFFIX = " (Observed)"

# Gregorian Easter Sunday always falls between March 22 and April 25.
EARLIEST_EASTER = (3, 22)
LATEST_EASTER = (4, 25)
# A leap and a common year, so offsets reaching back into February land in every possible month.
_EASTER_REFERENCE_YEARS = (2000, 2001)


@dataclass(frozen=True)
class HolidayRule(ABC):
    """Base class for every holiday rule."""

    name: str

    @abstractmethod
    def observed_date(self, year: int) -> Optional[Tuple[CalendarDate, str]]:
        """Return the date the holiday is observed in *year* and the name it is observed under."""

    @abstractmethod
    def can_fall_in(self, month: int) -> bool:
        """Return ``True`` if the holiday is ever observed in *month*."""

    def matches(self, year: int, month: int, day: int, weekday: int) -> Optional[str]:
        """Return the observed name if ``year-month-day`` is this holiday, else ``None``.

        Rules that never land in *month* answer without placing the holiday, so a lookup does at
        most one month scan.
        """
        if not self.can_fall_in(month):
            return None
        observed = self.observed_date(year)
        if observed is None:
            return None
        observed_on, name = observed
        if observed_on == (year, month, day, weekday):
            return name
        return None


@dataclass(frozen=True)
class FixedDate(HolidayRule):
    """Holiday on a fixed month/day.

    Saturday and Sunday dates are both observed on the following Monday; there is no
    Friday-before shift.
    """

    month: int
    day: int

    def can_fall_in(self, month: int) -> bool:
        # A weekend shift moves the date at most two days, into the next month only from the 27th.
        return month == self.month or (self.day >= 27 and month == self.month % 12 + 1)

    def observed_date(self, year: int) -> Optional[Tuple[CalendarDate, str]]:
        days = CalendarEngine.days_since_epoch(year, self.month, self.day)
        weekday = CalendarEngine.weekday_from_days(days)
        if weekday == Weekday.SATURDAY:
            return CalendarEngine.date_from_days_since_epoch(days + 2), (
                self.name + OBSERVED_SUFFIX
            )
        if weekday == Weekday.SUNDAY:
            return CalendarEngine.date_from_days_since_epoch(days + 1), (
                self.name + OBSERVED_SUFFIX
            )
        return CalendarDate(year, self.month, self.day, weekday), self.name


@dataclass(frozen=True)
class NthWeekdayOfMonth(HolidayRule):
    """Holiday on the *n*-th occurrence of a weekday in a month."""

    month: int
    weekday: int
    n: int

    def can_fall_in(self, month: int) -> bool:
        return month == self.month

    def observed_date(self, year: int) -> Optional[Tuple[CalendarDate, str]]:
        day = CalendarEngine.nth_weekday_of_month(year, self.month, self.weekday, self.n)
        return CalendarDate(year, self.month, day, self.weekday), self.name


@dataclass(frozen=True)
class LastWeekdayOfMonth(HolidayRule):
    """Holiday on the last occurrence of a weekday in a month."""

    month: int
    weekday: int

    def can_fall_in(self, month: int) -> bool:
        return month == self.month

    def observed_date(self, year: int) -> Optional[Tuple[CalendarDate, str]]:
        day = CalendarEngine.last_weekday_of_month(year, self.month, self.weekday)
        return CalendarDate(year, self.month, day, self.weekday), self.name


@dataclass(frozen=True)
class EasterRelative(HolidayRule):
    """Holiday *offset_days* from Easter Sunday, optionally required to land on *weekday*."""

    offset_days: int
    weekday: Optional[int] = None

    def can_fall_in(self, month: int) -> bool:
        for year in _EASTER_REFERENCE_YEARS:
            first = CalendarEngine.date_from_days_since_epoch(
                CalendarEngine.days_since_epoch(year, *EARLIEST_EASTER) + self.offset_days
            )
            last = CalendarEngine.date_from_days_since_epoch(
                CalendarEngine.days_since_epoch(year, *LATEST_EASTER) + self.offset_days
            )
            span = range(first.year * 12 + first.month - 1, last.year * 12 + last.month)
            if any(index % 12 + 1 == month for index in span):
                return True
        return False

    def observed_date(self, year: int) -> Optional[Tuple[CalendarDate, str]]:
        month, day = CalendarEngine.easter_sunday(year)
        days = CalendarEngine.days_since_epoch(year, month, day) + self.offset_days
        observed_on = CalendarEngine.date_from_days_since_epoch(days)
        if self.weekday is not None and observed_on.weekday != self.weekday:
            return None
        return observed_on, self.name
