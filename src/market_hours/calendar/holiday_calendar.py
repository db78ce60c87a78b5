"""NYSE full-day holiday calendar.

The rule table below is the complete set of exchange holidays the engine recognises.  Weekend
fixed-date holidays are observed on the following Monday only.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from src.market_hours.calendar.calendar_engine import CalendarDate, Weekday
from src.market_hours.calendar.holiday_rules import (EasterRelative, FixedDate,
                                                     HolidayRule,
                                                     LastWeekdayOfMonth,
                                                     NthWeekdayOfMonth)

NYSE_HOLIDAY_RULES: Tuple[HolidayRule, ...] = (
    FixedDate("New Year's Day", month=1, day=1),
    NthWeekdayOfMonth("Martin Luther King Jr. Day", month=1, weekday=Weekday.MONDAY, n=3),
    NthWeekdayOfMonth("Presidents Day", month=2, weekday=Weekday.MONDAY, n=3),
    EasterRelative("Good Friday", offset_days=-2, weekday=Weekday.FRIDAY),
    LastWeekdayOfMonth("Memorial Day", month=5, weekday=Weekday.MONDAY),
    FixedDate("Juneteenth", month=6, day=19),
    FixedDate("Independence Day", month=7, day=4),
    NthWeekdayOfMonth("Labor Day", month=9, weekday=Weekday.MONDAY, n=1),
    NthWeekdayOfMonth("Thanksgiving Day", month=11, weekday=Weekday.THURSDAY, n=4),
    FixedDate("Christmas Day", month=12, day=25),
)


class HolidayCalendar:
    """Evaluates the NYSE holiday rules for a given Eastern calendar date."""

    _RULES: Tuple[HolidayRule, ...] = NYSE_HOLIDAY_RULES

    @staticmethod
    def find_holiday(year: int, month: int, day: int, weekday: int) -> Optional[str]:
        """Return the observed holiday name for the date, or ``None`` on a regular day.

        Rules are checked in table order and the first match wins; the table never produces
        two holidays on the same date.
        """
        for rule in HolidayCalendar._RULES:
            name = rule.matches(year, month, day, weekday)
            if name is not None:
                return name
        return None

    @staticmethod
    def is_holiday(year: int, month: int, day: int, weekday: int) -> bool:
        """Return ``True`` if the exchange observes a holiday on the date."""
        return HolidayCalendar.find_holiday(year, month, day, weekday) is not None

    @staticmethod
    def observed_holidays(year: int) -> List[Tuple[CalendarDate, str]]:
        """Return every observed holiday of *year* sorted by date."""
        observed: List[Tuple[CalendarDate, str]] = []
        for rule in HolidayCalendar._RULES:
            entry = rule.observed_date(year)
            if entry is not None and entry[0].year == year:
                observed.append(entry)
        return sorted(observed, key=lambda item: (item[0].month, item[0].day))
