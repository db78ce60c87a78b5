"""Command-line report of the NYSE market state.

Usage::

    python -m src.market_hours.market_status                 # now
    python -m src.market_hours.market_status --timestamp 1720454400
    python -m src.market_hours.market_status --holidays 2025

The process exit code mirrors the gate decision: ``0`` open, ``1`` closed and ``2`` when the
state cannot be resolved.  The current time is read here, at the edge; the engine only ever
sees the integer it is given.
"""

import argparse
import sys
from datetime import datetime, timezone
from typing import List, Optional

from src.market_hours.gate.errors import (MarketClosedError,
                                          MarketStateUnresolvedError)
from src.market_hours.gate.transfer_gate import TransferGate
from src.market_hours.schedule.market_schedule import MarketSchedule
from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger

EXIT_OPEN = 0
EXIT_CLOSED = 1
EXIT_UNRESOLVED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="market_status", description="Report whether the NYSE is open."
    )
    parser.add_argument(
        "--timestamp",
        type=int,
        default=None,
        help="UTC Unix timestamp in seconds (defaults to the current time).",
    )
    parser.add_argument(
        "--holidays",
        type=int,
        default=None,
        metavar="YEAR",
        help="List the observed NYSE holidays of YEAR.",
    )
    return parser


def _print_holidays(year: int) -> None:
    Logger.info(f"NYSE holidays {year}")
    Logger.separator()
    for row in MarketSchedule.holiday_table(year).itertuples(index=False):
        Logger.info(f"  {row.date} {row.weekday:<9} {row.name}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the report and return the process exit code."""
    args = _build_parser().parse_args(argv)
    Logger.set_level(ParameterLoader().get("log_level"))
    if args.holidays is not None:
        _print_holidays(args.holidays)
        return EXIT_OPEN
    timestamp = (
        args.timestamp
        if args.timestamp is not None
        else int(datetime.now(timezone.utc).timestamp())
    )
    try:
        state = TransferGate.check_transfer(0, timestamp)
    except MarketClosedError as error:
        Logger.warning(f"{error.state.status.value}: {error.state.reason}")
        return EXIT_CLOSED
    except MarketStateUnresolvedError as error:
        Logger.error(f"Market state unavailable: {error}")
        return EXIT_UNRESOLVED
    Logger.success(f"{state.status.value}: {state.reason}")
    return EXIT_OPEN


if __name__ == "__main__":
    sys.exit(main())
