"""Typed, validated, and fully-encapsulated representation of a trading session.

This class ensures the open and close times are properly formatted and logically
consistent, and exposes them as minutes-of-day for integer comparisons.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional


# pylint: disable=too-few-public-methods
@dataclass
class Hours:
    """Container for a single session's open and close time.

    * open: Opening time in "HH:MM" format (defaults to "00:00").
    * close: Closing time in "HH:MM" format (defaults to "00:00", meaning midnight).
    """

    __slots__ = ("_open", "_close")

    def __init__(self, open_time: Optional[str], close_time: Optional[str]) -> None:
        """Initialize a trading session with optional open/close times."""
        validated_open = self._validate_time(open_time, "open")
        validated_close = self._validate_time(close_time, "close")
        if validated_close != "00:00" and validated_open > validated_close:
            raise ValueError("`open` must be <= `close`, unless `close` == '00:00'")
        self._open = validated_open
        self._close = validated_close

    @property
    def open(self) -> str:
        """Return the session opening time."""
        return self._open

    @property
    def close(self) -> str:
        """Return the session closing time."""
        return self._close

    @property
    def open_minutes(self) -> int:
        """Return the opening time as minutes after midnight."""
        return self._to_minutes(self._open)

    @property
    def close_minutes(self) -> int:
        """Return the closing time as minutes after midnight; "00:00" closes at 1440."""
        minutes = self._to_minutes(self._close)
        return 1440 if minutes == 0 else minutes

    def contains(self, minutes_of_day: int) -> bool:
        """Return ``True`` if *minutes_of_day* is in the half-open ``[open, close)`` window."""
        return self.open_minutes <= minutes_of_day < self.close_minutes

    def to_label(self) -> str:
        """Render the window the way exchanges publish it, e.g. ``9:30 AM - 4:00 PM``."""
        return f"{self._to_12h(self.open_minutes)} - {self._to_12h(self.close_minutes)}"

    @staticmethod
    def _to_minutes(value: str) -> int:
        hours, minutes = map(int, value.split(":"))
        return hours * 60 + minutes

    @staticmethod
    def _to_12h(minutes_of_day: int) -> str:
        hour, minute = divmod(minutes_of_day % 1440, 60)
        suffix = "AM" if hour < 12 else "PM"
        return f"{(hour % 12) or 12}:{minute:02d} {suffix}"

    def _validate_time(self, value: Optional[str], field: str) -> str:
        """Validate the time string or fall back to midnight."""
        if value is None:
            return "00:00"
        if not isinstance(value, str):
            raise TypeError(f"`{field}` must be a string or None")
        if len(value.strip()) == 0:
            return "00:00"
        if not re.fullmatch(r"\d{2}:\d{2}", value):
            raise ValueError(f"`{field}` must be in 'HH:MM' format")
        hours, minutes = map(int, value.split(":"))
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError(f"`{field}` must be a valid time between 00:00 and 23:59")
        return value

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"open": self.open, "close": self.close}
