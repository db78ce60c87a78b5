"""Tabular views over the market-hours engine.

Where the gate evaluates one timestamp at a time, these helpers evaluate many and return
:class:`pandas.DataFrame` objects that are convenient for reports and for checking a trading
calendar at a glance:

* :meth:`MarketSchedule.classify` – one row per epoch-second timestamp.
* :meth:`MarketSchedule.classify_range` – same, over a regular UTC ``date_range``.
* :meth:`MarketSchedule.holiday_table` – the observed holidays of a year.
"""

from __future__ import annotations

import math
from typing import Final, Iterable, List

import pandas as pd  # type: ignore

from src.market_hours.calendar.calendar_engine import Weekday
from src.market_hours.calendar.holiday_calendar import HolidayCalendar
from src.market_hours.clock.time_converter import TimeConverter
from src.market_hours.policy.market_hours_policy import MarketHoursPolicy
from src.utils.config.parameters import ParameterLoader

__all__: Final[list[str]] = [
    "MarketSchedule",
]

STATE_COLUMNS: Final[list[str]] = [
    "timestamp",
    "utc",
    "eastern",
    "is_dst",
    "is_open",
    "status",
    "reason",
]
HOLIDAY_COLUMNS: Final[list[str]] = ["date", "weekday", "name"]


class MarketSchedule:
    """Batch classification of timestamps and holiday listings."""

    _PARAMS = ParameterLoader()
    _WEEKDAYS: List[str] = _PARAMS.get("weekdays")

    @staticmethod
    def classify(timestamps: Iterable[int]) -> pd.DataFrame:
        """Return one row per timestamp with its Eastern time and market state."""
        rows = []
        for timestamp in timestamps:
            timestamp = TimeConverter.validate_timestamp(timestamp)
            eastern = TimeConverter.to_eastern(timestamp)
            state = MarketHoursPolicy.classify(eastern)
            rows.append(
                {
                    "timestamp": timestamp,
                    "utc": TimeConverter.format_utc(timestamp),
                    "eastern": str(eastern),
                    "is_dst": eastern.is_dst,
                    "is_open": state.is_open,
                    "status": state.status.value,
                    "reason": state.reason,
                }
            )
        return pd.DataFrame(rows, columns=STATE_COLUMNS)

    @staticmethod
    def to_epoch_seconds(index: pd.DatetimeIndex) -> List[int]:
        """Convert a (naive = UTC, or tz-aware) ``DatetimeIndex`` to whole epoch seconds."""
        if index.tz is None:
            index = index.tz_localize("UTC")
        else:
            index = index.tz_convert("UTC")
        return [math.floor(ts.timestamp()) for ts in index]

    @staticmethod
    def classify_range(start: str, end: str, freq: str = "1h") -> pd.DataFrame:
        """Classify every instant of ``pd.date_range(start, end, freq)`` interpreted in UTC."""
        index = pd.date_range(start=start, end=end, freq=freq, tz="UTC")
        return MarketSchedule.classify(MarketSchedule.to_epoch_seconds(index))

    @staticmethod
    def holiday_table(year: int) -> pd.DataFrame:
        """Return the observed NYSE holidays of *year* as ``date``/``weekday``/``name`` rows."""
        rows = [
            {
                "date": f"{observed.year:04d}-{observed.month:02d}-{observed.day:02d}",
                "weekday": MarketSchedule._WEEKDAYS[Weekday(observed.weekday)],
                "name": name,
            }
            for observed, name in HolidayCalendar.observed_holidays(year)
        ]
        return pd.DataFrame(rows, columns=HOLIDAY_COLUMNS)
