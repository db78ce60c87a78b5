"""Central configuration manager.

This module holds the constants the market-hours engine is built on (Eastern Time
offsets, the Daylight Saving Time rule, weekend days and the regular session window) together
with the few runtime settings that may come from the environment.

Engine constants are deliberately *not* read from the environment: every process that
evaluates the same timestamp must reach the same decision.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from src.utils.exchange.hours import Hours


class ParameterLoader:
    """Centralized configuration manager for all engine parameters."""

    _ENV_FILEPATH = ".env"

    def __init__(self) -> None:
        self.env_filepath = Path(ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        session: Any = self.get("regular_session")
        if not isinstance(session, dict):
            raise ValueError(f"Parameter 'regular_session' is invalid: {session}")
        self._regular_session: Hours = Hours(session.get("open"), session.get("close"))

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constant and environment values."""
        constant_params = {
            "dst_end": {"month": 11, "weekday": 0, "occurrence": 1},
            "dst_start": {"month": 3, "weekday": 0, "occurrence": 2},
            "dst_utc_offset_hours": -4,
            "regular_session": {"open": "09:30", "close": "16:00"},
            "standard_utc_offset_hours": -5,
            "timezone_label": "ET",
            "weekdays": [
                "sunday",
                "monday",
                "tuesday",
                "wednesday",
                "thursday",
                "friday",
                "saturday",
            ],
            "weekend_days": [0, 6],
        }
        env_params = {
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        return {**env_params, **constant_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def regular_session(self) -> Hours:
        """Return the regular trading session window."""
        return self._regular_session
