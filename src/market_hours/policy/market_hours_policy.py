"""NYSE open/closed decision.

Given a UTC timestamp the policy answers, in this order of precedence:

1. Saturday or Sunday in New York → ``WEEKEND`` (even if a holiday falls on that date).
2. An observed exchange holiday → ``HOLIDAY`` with the holiday name as reason.
3. Inside the regular session ``[09:30, 16:00)`` → ``OPEN``; otherwise ``AFTER_HOURS``,
   distinguishing pre-market from after-market.

The decision depends on nothing but the timestamp argument and static configuration.
"""

from __future__ import annotations

from typing import Any, FrozenSet

from src.market_hours.calendar.holiday_calendar import HolidayCalendar
from src.market_hours.clock.eastern_time import EasternCivilTime
from src.market_hours.clock.time_converter import TimeConverter
from src.market_hours.policy.market_state import MarketState, MarketStatus
from src.utils.config.parameters import ParameterLoader
from src.utils.exchange.hours import Hours
from src.utils.io.logger import Logger


# pylint: disable=too-few-public-methods
class MarketHoursPolicy:
    """Combines time conversion, the holiday calendar and the session window."""

    _PARAMS = ParameterLoader()
    _REGULAR_SESSION: Hours = _PARAMS.regular_session()
    _WEEKEND_DAYS: FrozenSet[int] = frozenset(_PARAMS.get("weekend_days"))
    _TIMEZONE_LABEL: Any = _PARAMS.get("timezone_label")

    @staticmethod
    def classify(eastern: EasternCivilTime) -> MarketState:
        """Classify an already converted Eastern civil time."""
        if eastern.weekday in MarketHoursPolicy._WEEKEND_DAYS:
            return MarketState(False, MarketStatus.WEEKEND, "Weekend")
        holiday = HolidayCalendar.find_holiday(
            eastern.year, eastern.month, eastern.day, eastern.weekday
        )
        if holiday is not None:
            return MarketState(False, MarketStatus.HOLIDAY, holiday)
        session = MarketHoursPolicy._REGULAR_SESSION
        minutes = eastern.minutes_of_day
        if session.contains(minutes):
            return MarketState(True, MarketStatus.OPEN, "Regular Trading Hours")
        phase = "Pre-Market" if minutes < session.open_minutes else "After-Market"
        return MarketState(
            False,
            MarketStatus.AFTER_HOURS,
            f"{phase} (outside {session.to_label()} {MarketHoursPolicy._TIMEZONE_LABEL})",
        )

    @staticmethod
    def compute(timestamp: int) -> MarketState:
        """Return the NYSE market state at UTC epoch second *timestamp*."""
        eastern = TimeConverter.to_eastern(timestamp)
        Logger.debug(f"Eastern Time: {eastern}")
        return MarketHoursPolicy.classify(eastern)


def compute_market_state(timestamp: int) -> MarketState:
    """Return the NYSE market state at UTC epoch second *timestamp*."""
    return MarketHoursPolicy.compute(timestamp)
