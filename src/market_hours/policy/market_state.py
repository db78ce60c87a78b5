"""Result types of the market-hours decision."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MarketStatus(str, Enum):
    """Closed set of market classifications."""

    OPEN = "OPEN"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
    AFTER_HOURS = "AFTER_HOURS"


@dataclass(frozen=True)
class MarketState:
    """Outcome of one market-hours evaluation.

    * is_open: ``True`` only for :attr:`MarketStatus.OPEN`.
    * status: the classification.
    * reason: human-readable detail (holiday name, pre/after-market, ...).
    """

    is_open: bool
    status: MarketStatus
    reason: str

    def __post_init__(self) -> None:
        if not isinstance(self.status, MarketStatus):
            raise TypeError("`status` must be a MarketStatus")
        if self.is_open != (self.status is MarketStatus.OPEN):
            raise ValueError("`is_open` must be True exactly when `status` is OPEN")

    def to_json(self) -> Any:
        """Object to JSON."""
        return {"is_open": self.is_open, "status": self.status.value, "reason": self.reason}
