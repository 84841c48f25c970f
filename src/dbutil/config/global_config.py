"""Process-wide database configuration record.

The record holds an immutable :class:`DbConfig`. Setters never mutate a
snapshot in place; they swap in a new one under a lock, so readers always see a
complete configuration and the show-SQL tuple changes as a whole.
"""

from __future__ import annotations

import threading
from typing import Optional, Union

from dbutil.models.base import DbBaseModel
from dbutil.models.sql_log import LogLevel, SqlLogSettings


class DbConfig(DbBaseModel):
    """Snapshot of the switches that govern database behaviour."""

    sql_log: SqlLogSettings = SqlLogSettings()
    case_insensitive: bool = True
    return_generated_key: bool = True
    setting_path: Optional[str] = None


class GlobalDbConfig:
    """Holder of the current :class:`DbConfig` with last-writer-wins setters."""

    def __init__(self, initial: Optional[DbConfig] = None) -> None:
        self._lock = threading.Lock()
        self._current = initial or DbConfig()

    @property
    def current(self) -> DbConfig:
        """Return the configuration snapshot in effect."""

        return self._current

    def set_show_sql(
        self,
        show_sql: bool,
        format_sql: bool,
        show_params: bool,
        level: Union[LogLevel, str],
    ) -> DbConfig:
        sql_log = SqlLogSettings(
            show_sql=show_sql,
            format_sql=format_sql,
            show_params=show_params,
            level=LogLevel.parse(level),
        )
        return self._replace(sql_log=sql_log)

    def set_case_insensitive(self, case_insensitive: bool) -> DbConfig:
        return self._replace(case_insensitive=case_insensitive)

    def set_return_generated_key(self, return_generated_key: bool) -> DbConfig:
        return self._replace(return_generated_key=return_generated_key)

    def set_setting_path(self, setting_path: Optional[str]) -> DbConfig:
        return self._replace(setting_path=setting_path)

    def reset(self) -> DbConfig:
        """Restore the default configuration."""

        with self._lock:
            self._current = DbConfig()
            return self._current

    def _replace(self, **changes: object) -> DbConfig:
        with self._lock:
            self._current = DbConfig.model_validate({**self._current.model_dump(), **changes})
            return self._current


global_db_config = GlobalDbConfig()


__all__ = ["DbConfig", "GlobalDbConfig", "global_db_config"]
