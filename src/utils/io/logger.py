"""Centralized console logger.

Every module logs through the static :class:`Logger` facade instead of creating its own
``logging.Logger``.  Records are written to whatever ``sys.stdout`` is at emission time, so
``contextlib.redirect_stdout`` and pytest's capture both see the output.  Only the console
handler colors its lines; records themselves carry the plain message.
"""

import logging
import sys
from typing import Any, Dict, Optional, Union

SUCCESS = 25
_RESET = "\033[0m"
_COLORS: Dict[int, str] = {
    logging.DEBUG: "\033[37m",
    logging.INFO: "\033[36m",
    SUCCESS: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
}


class _CurrentStdoutHandler(logging.StreamHandler):
    """Stream handler bound to the *current* ``sys.stdout`` rather than the one at import.

    The stream is resolved on every emit, so it cannot be replaced: assignments made by
    ``StreamHandler.__init__`` are discarded and :meth:`setStream` raises.
    """

    @property
    def stream(self) -> Any:  # type: ignore[override]
        return sys.stdout

    @stream.setter
    def stream(self, _value: Any) -> None:
        pass

    def setStream(self, stream: Any) -> Optional[Any]:
        raise TypeError("The console handler always writes to the current sys.stdout")


class _ColorFormatter(logging.Formatter):
    """Formatter wrapping each line in the ANSI color of its level."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = _COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{_RESET}"


class Logger:
    """Leveled, colorized logging helpers shared by the whole code base."""

    SUCCESS = SUCCESS
    _NAME = "market_hours"
    _FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
    _SEPARATOR = "-" * 60

    logging.addLevelName(SUCCESS, "SUCCESS")
    _logger = logging.getLogger(_NAME)
    _logger.propagate = False
    _logger.setLevel(logging.INFO)
    if not _logger.handlers:
        _handler = _CurrentStdoutHandler()
        _handler.setFormatter(_ColorFormatter(_FORMAT))
        _logger.addHandler(_handler)

    @staticmethod
    def set_level(level: Union[int, str, None]) -> None:
        """Set the minimum level; accepts a ``logging`` constant or its name."""
        if level is None:
            return
        if isinstance(level, str):
            name = level.strip().upper()
            resolved = logging.getLevelName(name)
            if not isinstance(resolved, int):
                raise ValueError(f"Invalid log level: '{level}'")
            level = resolved
        Logger._logger.setLevel(level)

    @staticmethod
    def get_level() -> int:
        """Return the current minimum level."""
        return Logger._logger.level

    @staticmethod
    def _log(level: int, message: str) -> None:
        Logger._logger.log(level, message)

    @staticmethod
    def debug(message: str) -> None:
        """Log a diagnostic message."""
        Logger._log(logging.DEBUG, message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._log(logging.INFO, message)

    @staticmethod
    def success(message: str) -> None:
        """Log a positive outcome."""
        Logger._log(Logger.SUCCESS, message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a recoverable problem."""
        Logger._log(logging.WARNING, message)

    @staticmethod
    def error(message: str) -> None:
        """Log a failure."""
        Logger._log(logging.ERROR, message)

    @staticmethod
    def separator() -> None:
        """Log a horizontal rule between output blocks."""
        Logger._log(logging.INFO, Logger._SEPARATOR)
