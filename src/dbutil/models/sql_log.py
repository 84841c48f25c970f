"""Models describing how executed SQL is logged."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from dbutil.models.base import DbBaseModel

TRACE = 5


class LogLevel(str, Enum):
    """Log levels accepted by the show-SQL configuration."""

    ALL = "ALL"
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    OFF = "OFF"

    @property
    def numeric(self) -> Optional[int]:
        """Return the stdlib logging level, or ``None`` for ``OFF``."""

        return _NUMERIC_LEVELS[self]

    @classmethod
    def parse(cls, value: Union["LogLevel", str, None], default: Optional["LogLevel"] = None) -> "LogLevel":
        """Convert a level name to a ``LogLevel`` ignoring case.

        Absent or unknown names fall back to ``default`` (``DEBUG`` when omitted).
        """

        fallback = default if default is not None else cls.DEBUG
        if isinstance(value, cls):
            return value
        if value is None:
            return fallback
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return fallback


_NUMERIC_LEVELS = {
    LogLevel.ALL: 1,
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.OFF: None,
}


class SqlLogSettings(DbBaseModel):
    """The show-SQL tuple: whether, how and at which level SQL is logged."""

    show_sql: bool = False
    format_sql: bool = False
    show_params: bool = False
    level: LogLevel = LogLevel.DEBUG


__all__ = ["LogLevel", "SqlLogSettings", "TRACE"]
