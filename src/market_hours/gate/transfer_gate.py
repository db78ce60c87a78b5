"""Authorization gate that only lets transfers through while the NYSE is open.

The gate evaluates the market state exactly once per transfer, using the trusted timestamp
supplied by its caller.  A closed market raises one of three rejection errors; a timestamp
that cannot be resolved is rejected too, never approved by default.
"""

from __future__ import annotations

from typing import Dict, Type

from src.market_hours.clock.time_converter import TimeConverter
from src.market_hours.gate.errors import (MarketClosedAfterHoursError,
                                          MarketClosedError,
                                          MarketClosedHolidayError,
                                          MarketClosedWeekendError,
                                          MarketStateUnresolvedError)
from src.market_hours.policy.market_hours_policy import MarketHoursPolicy
from src.market_hours.policy.market_state import MarketState, MarketStatus
from src.utils.io.logger import Logger

_REJECTIONS: Dict[MarketStatus, Type[MarketClosedError]] = {
    MarketStatus.WEEKEND: MarketClosedWeekendError,
    MarketStatus.HOLIDAY: MarketClosedHolidayError,
    MarketStatus.AFTER_HOURS: MarketClosedAfterHoursError,
}


# pylint: disable=too-few-public-methods
class TransferGate:
    """Allow or reject a transfer based on NYSE market hours."""

    @staticmethod
    def resolve_state(timestamp: int) -> MarketState:
        """Return the market state, converting any resolution failure into a rejection."""
        try:
            return MarketHoursPolicy.compute(timestamp)
        except MarketStateUnresolvedError as exc:
            Logger.error(f"Invalid timestamp: {exc}")
            raise
        except (ArithmeticError, LookupError, TypeError, ValueError) as exc:
            Logger.error(f"Unable to resolve market state for {timestamp}: {exc}")
            raise MarketStateUnresolvedError(
                f"Unable to resolve market state for timestamp {timestamp}"
            ) from exc

    @staticmethod
    def rejection_for(state: MarketState) -> Type[MarketClosedError]:
        """Return the rejection error class for a closed *state*."""
        try:
            return _REJECTIONS[state.status]
        except KeyError as exc:
            raise MarketStateUnresolvedError(
                f"No rejection category for status {state.status.value}"
            ) from exc

    @staticmethod
    def check_transfer(amount: int, timestamp: int) -> MarketState:
        """Validate a transfer of *amount* tokens at *timestamp*.

        Returns the open :class:`MarketState` when the transfer may proceed; raises a
        :class:`MarketClosedError` subclass otherwise.
        """
        Logger.debug(f"Validating transfer of {amount} tokens")
        state = TransferGate.resolve_state(timestamp)
        Logger.debug(
            f"Current time: {TimeConverter.format_utc(timestamp)} UTC "
            f"(timestamp: {timestamp}), market state: {state.status.value}"
        )
        if state.is_open:
            Logger.success("NYSE OPEN: transfer allowed during market hours")
            return state
        Logger.warning(f"NYSE CLOSED: {state.reason} - transfer blocked")
        raise TransferGate.rejection_for(state)(state)
