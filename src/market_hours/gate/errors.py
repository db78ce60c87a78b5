"""Exceptions raised by the market-hours engine and the transfer gate.

``MarketClosedError`` subclasses are the three rejection categories a gated operation can
receive.  ``MarketStateUnresolvedError`` means no decision could be made and the operation
must be rejected as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.market_hours.policy.market_state import MarketState


class MarketHoursError(Exception):
    """Base class for all market-hours errors."""


class MarketStateUnresolvedError(MarketHoursError):
    """The timestamp could not be resolved into a market state."""


class InvalidTimestampError(MarketStateUnresolvedError, ValueError):
    """The timestamp is not a signed 64-bit integer number of seconds."""


class MarketClosedError(MarketHoursError):
    """The exchange is closed; carries the :class:`MarketState` that caused the rejection."""

    _MESSAGE = "NYSE CLOSED: Market is closed"

    def __init__(self, state: "MarketState") -> None:
        super().__init__(f"{self._MESSAGE} ({state.reason})")
        self.state = state


class MarketClosedWeekendError(MarketClosedError):
    """Rejected because it is a weekend in New York."""

    _MESSAGE = "NYSE CLOSED: Market is closed for weekend"


class MarketClosedHolidayError(MarketClosedError):
    """Rejected because of an exchange holiday."""

    _MESSAGE = "NYSE CLOSED: Market is closed for holiday"


class MarketClosedAfterHoursError(MarketClosedError):
    """Rejected because the time is outside the regular session."""

    _MESSAGE = "NYSE CLOSED: Market is closed after hours"
