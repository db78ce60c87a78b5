"""Immutable US Eastern civil time record produced by :class:`TimeConverter`."""

from __future__ import annotations

from dataclasses import dataclass


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class EasternCivilTime:
    """Wall-clock time in New York.

    * weekday: 0 = Sunday … 6 = Saturday.
    * is_dst: ``True`` while Eastern Daylight Time (UTC-4) is in effect.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int
    is_dst: bool

    @property
    def zone_abbreviation(self) -> str:
        """Return ``EDT`` or ``EST``."""
        return "EDT" if self.is_dst else "EST"

    @property
    def minutes_of_day(self) -> int:
        """Return minutes elapsed since local midnight."""
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} {self.zone_abbreviation}"
        )
