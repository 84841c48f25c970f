"""Show-SQL settings handling and the logger that honours them."""

from __future__ import annotations

import logging
import re
from typing import MutableMapping, Optional, Sequence, Union

from dbutil.config.global_config import GlobalDbConfig, global_db_config
from dbutil.models.sql_log import LogLevel, SqlLogSettings
from dbutil.utils.convert import to_bool

logger = logging.getLogger(__name__)
sql_logger = logging.getLogger("dbutil.sql")

KEY_SHOW_SQL = "show-sql"
KEY_FORMAT_SQL = "format-sql"
KEY_SHOW_PARAMS = "show-params"
KEY_SQL_LEVEL = "sql-level"

SHOW_SQL_KEYS = (KEY_SHOW_SQL, KEY_FORMAT_SQL, KEY_SHOW_PARAMS, KEY_SQL_LEVEL)

ConfigSource = MutableMapping[str, Optional[str]]
Params = Union[Sequence[object], MutableMapping[str, object], None]

_CLAUSE_PATTERN = re.compile(
    r"\s+(?=(?:SELECT|FROM|WHERE|GROUP\s+BY|ORDER\s+BY|HAVING|LIMIT|OFFSET|VALUES|SET|RETURNING"
    r"|(?:LEFT|RIGHT|INNER|FULL|CROSS)\s+(?:OUTER\s+)?JOIN|JOIN|UNION(?:\s+ALL)?|AND|OR)\b)",
    re.IGNORECASE,
)


def read_sql_log_settings(config_source: ConfigSource) -> SqlLogSettings:
    """Pop the show-SQL keys from ``config_source`` and return the resolved tuple."""

    show_sql = to_bool(config_source.pop(KEY_SHOW_SQL, None), False)
    format_sql = to_bool(config_source.pop(KEY_FORMAT_SQL, None), False)
    show_params = to_bool(config_source.pop(KEY_SHOW_PARAMS, None), False)
    level = LogLevel.parse(config_source.pop(KEY_SQL_LEVEL, None), LogLevel.DEBUG)

    logger.debug(
        "Show sql: [%s], format sql: [%s], show params: [%s], level: [%s]",
        show_sql,
        format_sql,
        show_params,
        level.value,
    )
    return SqlLogSettings(show_sql=show_sql, format_sql=format_sql, show_params=show_params, level=level)


def remove_sql_log_keys(config_source: ConfigSource) -> None:
    """Drop the show-SQL keys from ``config_source`` without reading them."""

    for key in SHOW_SQL_KEYS:
        config_source.pop(key, None)


def format_sql(sql: str) -> str:
    """Put the major clauses of a statement on their own lines."""

    return _CLAUSE_PATTERN.sub("\n", sql.strip())


class SqlLog:
    """Emit executed SQL according to the show-SQL tuple.

    Without explicit ``settings`` the tuple is read from the configuration
    record at every call, so global switches take effect immediately.
    """

    def __init__(
        self,
        settings: Optional[SqlLogSettings] = None,
        *,
        config: Optional[GlobalDbConfig] = None,
        target: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings
        self._config = config or global_db_config
        self._target = target or sql_logger

    @property
    def settings(self) -> SqlLogSettings:
        return self._settings or self._config.current.sql_log

    def log(self, sql: str, params: Params = None) -> bool:
        """Log ``sql`` if enabled; return whether a record was emitted."""

        settings = self.settings
        numeric_level = settings.level.numeric
        if not settings.show_sql or numeric_level is None:
            return False
        if not self._target.isEnabledFor(numeric_level):
            return False

        statement = format_sql(sql) if settings.format_sql else sql
        if settings.show_params and params:
            self._target.log(numeric_level, "\n[SQL] : %s\n[Params] : %s", statement, params)
        else:
            self._target.log(numeric_level, "\n[SQL] : %s", statement)
        return True


__all__ = [
    "KEY_FORMAT_SQL",
    "KEY_SHOW_PARAMS",
    "KEY_SHOW_SQL",
    "KEY_SQL_LEVEL",
    "SHOW_SQL_KEYS",
    "ConfigSource",
    "SqlLog",
    "format_sql",
    "read_sql_log_settings",
    "remove_sql_log_keys",
]
