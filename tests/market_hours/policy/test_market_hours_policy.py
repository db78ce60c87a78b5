"""Unit tests for the NYSE market-hours decision (compute_market_state)."""

from datetime import datetime
from unittest.mock import patch

import pytest  # type: ignore
import pytz  # type: ignore

from src.market_hours.calendar.calendar_engine import CalendarEngine
from src.market_hours.clock.eastern_time import EasternCivilTime
from src.market_hours.policy.market_hours_policy import (MarketHoursPolicy,
                                                         compute_market_state)
from src.market_hours.policy.market_state import MarketState, MarketStatus

_NEW_YORK = pytz.timezone("America/New_York")


def _et(year, month, day, hour=12, minute=0, second=0) -> int:
    """Epoch seconds of a New York wall-clock time."""
    local = _NEW_YORK.localize(datetime(year, month, day, hour, minute, second))
    return int(local.timestamp())


@pytest.mark.parametrize(
    "hms, status",
    [
        ((9, 29, 59), MarketStatus.AFTER_HOURS),
        ((9, 30, 0), MarketStatus.OPEN),
        ((15, 59, 59), MarketStatus.OPEN),
        ((16, 0, 0), MarketStatus.AFTER_HOURS),
    ],
)
def test_session_window_edges(hms, status):
    """09:30:00 opens, 16:00:00 closes (Monday 2024-06-10)."""
    state = compute_market_state(_et(2024, 6, 10, *hms))
    if state.status is not status:
        raise AssertionError(f"{hms}: expected {status}, got {state.status}")
    if state.is_open != (status is MarketStatus.OPEN):
        raise AssertionError(f"{hms}: is_open inconsistent with status")


def test_pre_market_and_after_market_reasons():
    """AFTER_HOURS reason tells which side of the session the instant is on."""
    early = compute_market_state(_et(2024, 6, 10, 9, 29, 59))
    late = compute_market_state(_et(2024, 6, 10, 16, 0, 0))
    if early.reason != "Pre-Market (outside 9:30 AM - 4:00 PM ET)":
        raise AssertionError(f"Unexpected pre-market reason: {early.reason}")
    if late.reason != "After-Market (outside 9:30 AM - 4:00 PM ET)":
        raise AssertionError(f"Unexpected after-market reason: {late.reason}")


def test_open_state():
    """Monday 2024-07-08 at noon is a regular trading session."""
    state = compute_market_state(_et(2024, 7, 8))
    expected = MarketState(True, MarketStatus.OPEN, "Regular Trading Hours")
    if state != expected:
        raise AssertionError(f"Expected {expected}, got {state}")


def test_independence_day_2024():
    """Thursday 2024-07-04 at noon is a holiday."""
    state = compute_market_state(_et(2024, 7, 4))
    if state.is_open or state.status is not MarketStatus.HOLIDAY:
        raise AssertionError(f"Expected HOLIDAY, got {state}")
    if state.reason != "Independence Day":
        raise AssertionError(f"Unexpected reason: {state.reason}")


def test_weekday_evening_is_after_market():
    """Monday 2024-01-22 20:00 ET is after the close."""
    state = compute_market_state(_et(2024, 1, 22, 20))
    if state.is_open or state.status is not MarketStatus.AFTER_HOURS:
        raise AssertionError(f"Expected AFTER_HOURS, got {state}")
    if "After-Market" not in state.reason:
        raise AssertionError(f"Unexpected reason: {state.reason}")


def test_holiday_evening_is_holiday():
    """Monday 2024-01-15 20:00 ET falls on Martin Luther King Jr. Day in New York."""
    state = compute_market_state(_et(2024, 1, 15, 20))
    if state.status is not MarketStatus.HOLIDAY:
        raise AssertionError(f"Expected HOLIDAY, got {state}")
    if state.reason != "Martin Luther King Jr. Day":
        raise AssertionError(f"Unexpected reason: {state.reason}")


def test_sunday_holiday_reports_weekend_then_observed_monday():
    """2021-07-04 (Sunday) is WEEKEND; 2021-07-05 is the observed holiday."""
    sunday = compute_market_state(_et(2021, 7, 4))
    monday = compute_market_state(_et(2021, 7, 5))
    if sunday.status is not MarketStatus.WEEKEND:
        raise AssertionError(f"Expected WEEKEND, got {sunday}")
    if monday.status is not MarketStatus.HOLIDAY:
        raise AssertionError(f"Expected HOLIDAY, got {monday}")
    if monday.reason != "Independence Day (Observed)":
        raise AssertionError(f"Unexpected reason: {monday.reason}")


def test_saturday_holiday_is_not_shifted_to_friday():
    """2022-01-01 (Saturday) is WEEKEND and Friday 2021-12-31 trades normally."""
    saturday = compute_market_state(_et(2022, 1, 1))
    friday = compute_market_state(_et(2021, 12, 31))
    if saturday.status is not MarketStatus.WEEKEND:
        raise AssertionError(f"Expected WEEKEND, got {saturday}")
    if friday.status is not MarketStatus.OPEN:
        raise AssertionError(f"Expected OPEN, got {friday}")


def test_floating_holidays():
    """Thanksgiving and Good Friday 2024."""
    thanksgiving = compute_market_state(_et(2024, 11, 28))
    good_friday = compute_market_state(_et(2024, 3, 29))
    if (thanksgiving.status, thanksgiving.reason) != (
        MarketStatus.HOLIDAY,
        "Thanksgiving Day",
    ):
        raise AssertionError(f"Unexpected Thanksgiving state: {thanksgiving}")
    if (good_friday.status, good_friday.reason) != (MarketStatus.HOLIDAY, "Good Friday"):
        raise AssertionError(f"Unexpected Good Friday state: {good_friday}")


def test_weekend_overrides_holiday():
    """A holiday date on a weekend is classified WEEKEND, never HOLIDAY."""
    saturday = EasternCivilTime(2020, 7, 4, 12, 0, 0, 6, True)
    with patch(
        "src.market_hours.calendar.holiday_calendar.HolidayCalendar.find_holiday",
        return_value="Independence Day",
    ) as mock_find:
        state = MarketHoursPolicy.classify(saturday)
    if state.status is not MarketStatus.WEEKEND or state.reason != "Weekend":
        raise AssertionError(f"Expected WEEKEND, got {state}")
    mock_find.assert_not_called()


def test_holiday_overrides_session_hours():
    """A holiday during session hours is still closed."""
    state = compute_market_state(_et(2024, 12, 25, 10, 0, 0))
    if state.is_open or state.status is not MarketStatus.HOLIDAY:
        raise AssertionError(f"Expected HOLIDAY, got {state}")


def test_deterministic():
    """The same timestamp always yields an equal state."""
    timestamp = _et(2024, 6, 10, 10)
    states = {compute_market_state(timestamp) for _ in range(5)}
    if len(states) != 1:
        raise AssertionError(f"Non-deterministic states: {states}")


def test_far_timestamps_classify_without_error():
    """Distant past and future still produce one of the four states."""
    for timestamp in (-(2**63), -(10**11), 4 * 10**9, 2**63 - 1):
        state = compute_market_state(timestamp)
        if state.status not in set(MarketStatus):
            raise AssertionError(f"Unexpected status for {timestamp}: {state}")


def test_compute_logs_eastern_time():
    """The Eastern time is logged at debug level."""
    with patch("src.utils.io.logger.Logger.debug") as mock_debug:
        compute_market_state(_et(2024, 6, 10, 10))
    mock_debug.assert_called_once_with("Eastern Time: 2024-06-10 10:00:00 EDT")


@pytest.mark.parametrize(
    "local, scans",
    [
        ((2024, 6, 10), 0),
        ((2024, 3, 10), 0),
        ((2024, 1, 15), 1),
        ((2024, 5, 27), 1),
        ((2024, 11, 28), 1),
        ((2024, 12, 25), 0),
    ],
)
def test_one_call_does_at_most_one_month_scan(local, scans):
    """Only a rule placed in the date's own month scans that month; DST needs no scan."""
    with patch.object(
        CalendarEngine,
        "nth_weekday_of_month",
        wraps=CalendarEngine.nth_weekday_of_month,
    ) as mock_nth, patch.object(
        CalendarEngine,
        "last_weekday_of_month",
        wraps=CalendarEngine.last_weekday_of_month,
    ) as mock_last:
        compute_market_state(_et(*local))
    received = mock_nth.call_count + mock_last.call_count
    if received != scans:
        raise AssertionError(f"{local}: expected {scans} month scans, got {received}")


def test_easter_only_computed_in_march_and_april():
    """Good Friday is only placed for dates that can be Good Friday."""
    with patch.object(
        CalendarEngine, "easter_sunday", wraps=CalendarEngine.easter_sunday
    ) as mock_easter:
        compute_market_state(1718035200)
        if mock_easter.called:
            raise AssertionError("Easter must not be computed for a June date")
        compute_market_state(_et(2024, 3, 29))
    if mock_easter.call_count != 1:
        raise AssertionError("Easter must be computed once for a March date")
