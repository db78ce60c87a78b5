"""Unit tests for the ParameterLoader configuration manager."""

from unittest.mock import patch

import pytest  # type: ignore

from src.utils.config.parameters import ParameterLoader
from src.utils.exchange.hours import Hours


def test_parameter_loader_get_method():
    """Test the get method of ParameterLoader."""
    loader = ParameterLoader()
    result = loader.get("non_existent_key")
    if result is not None:
        raise AssertionError("Expected None for missing key")
    result_with_default = loader.get("non_existent_key", default="default_value")
    if result_with_default != "default_value":
        raise AssertionError("Expected default_value for missing key with default")


def test_parameter_loader_getitem_method():
    """Test dictionary-style access of ParameterLoader."""
    loader = ParameterLoader()
    if loader["standard_utc_offset_hours"] != -5:
        raise AssertionError("standard_utc_offset_hours should be -5")
    if loader["dst_utc_offset_hours"] != -4:
        raise AssertionError("dst_utc_offset_hours should be -4")
    with pytest.raises(KeyError):
        _ = loader["non_existent_key"]


def test_dst_rule_parameters():
    """Second Sunday of March through first Sunday of November."""
    loader = ParameterLoader()
    if loader["dst_start"] != {"month": 3, "weekday": 0, "occurrence": 2}:
        raise AssertionError(f"Unexpected dst_start: {loader['dst_start']}")
    if loader["dst_end"] != {"month": 11, "weekday": 0, "occurrence": 1}:
        raise AssertionError(f"Unexpected dst_end: {loader['dst_end']}")


def test_regular_session():
    """The regular session is a validated Hours instance."""
    session = ParameterLoader().regular_session()
    if not isinstance(session, Hours):
        raise AssertionError("regular_session should return Hours")
    if (session.open, session.close) != ("09:30", "16:00"):
        raise AssertionError(f"Unexpected session: {session.to_json()}")


def test_log_level_from_environment(monkeypatch):
    """LOG_LEVEL feeds the log_level parameter."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    if ParameterLoader().get("log_level") != "DEBUG":
        raise AssertionError("log_level should come from LOG_LEVEL")
    monkeypatch.delenv("LOG_LEVEL")
    if ParameterLoader().get("log_level") != "INFO":
        raise AssertionError("log_level should default to INFO")


def test_engine_constants_ignore_environment(monkeypatch):
    """Offsets are not overridable from the environment."""
    monkeypatch.setenv("STANDARD_UTC_OFFSET_HOURS", "0")
    if ParameterLoader().get("standard_utc_offset_hours") != -5:
        raise AssertionError("Engine constants must not depend on the environment")


def test_get_all_contains_every_key():
    """get_all exposes exactly the parameters the engine reads."""
    params = ParameterLoader().get_all()
    expected = {
        "dst_end",
        "dst_start",
        "dst_utc_offset_hours",
        "log_level",
        "regular_session",
        "standard_utc_offset_hours",
        "timezone_label",
        "weekdays",
        "weekend_days",
    }
    if set(params) != expected:
        raise AssertionError(f"Unexpected parameters: {sorted(set(params) ^ expected)}")


def test_invalid_regular_session_raises():
    """A malformed session definition is rejected at construction."""
    with patch.object(
        ParameterLoader,
        "_initialize_parameters",
        return_value={"regular_session": "09:30-16:00"},
    ):
        with pytest.raises(ValueError, match="Parameter 'regular_session' is invalid"):
            ParameterLoader()
