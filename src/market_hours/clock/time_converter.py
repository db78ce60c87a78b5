"""Conversion of UTC Unix timestamps to US Eastern civil time.

Daylight Saving Time follows the US rule in effect since 2007 (second Sunday of March through
the first Sunday of November) and is resolved per *day*: the candidate Eastern date is taken
at standard time and the whole day is then treated as either EDT or EST.  Between 00:00 local
and the real 02:00 switch on a transition day the offset is therefore off by one hour, which
does not affect any classification inside the regular session.
"""

from __future__ import annotations

from typing import Any, Tuple

from src.market_hours.calendar.calendar_engine import CalendarEngine
from src.market_hours.clock.eastern_time import EasternCivilTime
from src.market_hours.gate.errors import InvalidTimestampError
from src.utils.config.parameters import ParameterLoader

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TimeConverter:
    """Static helpers turning epoch seconds into :class:`EasternCivilTime`."""

    _PARAMS = ParameterLoader()
    _STANDARD_OFFSET_SECONDS: int = (
        _PARAMS.get("standard_utc_offset_hours") * SECONDS_PER_HOUR
    )
    _DST_OFFSET_SECONDS: int = _PARAMS.get("dst_utc_offset_hours") * SECONDS_PER_HOUR
    _DST_START: Any = _PARAMS.get("dst_start")
    _DST_END: Any = _PARAMS.get("dst_end")

    @staticmethod
    def validate_timestamp(timestamp: Any) -> int:
        """Return *timestamp* if it is a signed 64-bit integer, else raise."""
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise InvalidTimestampError(
                f"Timestamp must be an integer, got {type(timestamp).__name__}"
            )
        if not INT64_MIN <= timestamp <= INT64_MAX:
            raise InvalidTimestampError(f"Timestamp out of 64-bit range: {timestamp}")
        return timestamp

    @staticmethod
    def is_dst_in_effect(year: int, month: int, day: int) -> bool:
        """Return ``True`` if the Eastern calendar date falls inside the DST window."""
        start_month: int = TimeConverter._DST_START["month"]
        end_month: int = TimeConverter._DST_END["month"]
        if month < start_month or month > end_month:
            return False
        if start_month < month < end_month:
            return True
        # On a switch month, the date is past the switch Sunday once enough Sundays have occurred.
        if month == start_month:
            started = CalendarEngine.weekday_count_through(
                year, month, day, TimeConverter._DST_START["weekday"]
            )
            return started >= TimeConverter._DST_START["occurrence"]
        ended = CalendarEngine.weekday_count_through(
            year, month, day, TimeConverter._DST_END["weekday"]
        )
        return ended < TimeConverter._DST_END["occurrence"]

    @staticmethod
    def _split_seconds(seconds_of_day: int) -> Tuple[int, int, int]:
        hour, remainder = divmod(seconds_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(remainder, 60)
        return hour, minute, second

    @staticmethod
    def to_eastern(timestamp: int) -> EasternCivilTime:
        """Convert UTC epoch seconds to New York civil time."""
        timestamp = TimeConverter.validate_timestamp(timestamp)
        standard_days = (timestamp + TimeConverter._STANDARD_OFFSET_SECONDS) // SECONDS_PER_DAY
        candidate = CalendarEngine.date_from_days_since_epoch(standard_days)
        is_dst = TimeConverter.is_dst_in_effect(
            candidate.year, candidate.month, candidate.day
        )
        offset = (
            TimeConverter._DST_OFFSET_SECONDS
            if is_dst
            else TimeConverter._STANDARD_OFFSET_SECONDS
        )
        # Floor division borrows a day when the local instant precedes midnight.
        days, seconds_of_day = divmod(timestamp + offset, SECONDS_PER_DAY)
        date = CalendarEngine.date_from_days_since_epoch(days)
        hour, minute, second = TimeConverter._split_seconds(seconds_of_day)
        return EasternCivilTime(
            year=date.year,
            month=date.month,
            day=date.day,
            hour=hour,
            minute=minute,
            second=second,
            weekday=date.weekday,
            is_dst=is_dst,
        )

    @staticmethod
    def format_utc(timestamp: int) -> str:
        """Render epoch seconds as ``YYYY-MM-DD HH:MM:SS`` in UTC."""
        timestamp = TimeConverter.validate_timestamp(timestamp)
        days, seconds_of_day = divmod(timestamp, SECONDS_PER_DAY)
        date = CalendarEngine.date_from_days_since_epoch(days)
        hour, minute, second = TimeConverter._split_seconds(seconds_of_day)
        return (
            f"{date.year}-{date.month:02d}-{date.day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d}"
        )
