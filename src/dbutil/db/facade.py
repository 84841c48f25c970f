"""Static helpers for closing resources, fetching data sources and setting global switches."""

from __future__ import annotations

import logging
from typing import Optional, Union

from dbutil.config.global_config import GlobalDbConfig, global_db_config
from dbutil.db import DataSource, SupportsClose
from dbutil.db.ds_factory import DataSourceRegistry, get_registry
from dbutil.db.errors import DataSourceResolutionError, TypeMismatchError
from dbutil.db.naming import NamingContext, initial_context
from dbutil.db.sql_log import ConfigSource, read_sql_log_settings, remove_sql_log_keys
from dbutil.models.sql_log import LogLevel, SqlLogSettings

logger = logging.getLogger(__name__)


def close(*resources: object) -> None:
    """Close each resource in the given order.

    ``None`` entries are skipped, failures while closing are logged and
    suppressed, and objects without a ``close`` method only produce a warning.
    Pass dependents first (cursor, then connection).
    """

    for resource in resources:
        if resource is None:
            continue
        if _is_closeable(resource):
            try:
                resource.close()
            except Exception:
                logger.debug("Failed to close %s", type(resource).__name__, exc_info=True)
        else:
            logger.warning("Object %s is not a closeable resource", type(resource).__qualname__)


def _is_closeable(resource: object) -> bool:
    # runtime protocol checks call hasattr, which lets a broken __getattr__ raise
    try:
        return isinstance(resource, SupportsClose) and callable(resource.close)
    except Exception:
        return False


def _is_data_source(resource: object) -> bool:
    try:
        return isinstance(resource, DataSource)
    except Exception:
        return False


def get_default_data_source(*, registry: Optional[DataSourceRegistry] = None) -> DataSource:
    """Return the data source of the default group."""

    return (registry or get_registry()).get()


def get_data_source(group: Optional[str], *, registry: Optional[DataSourceRegistry] = None) -> DataSource:
    """Return the data source registered under ``group``."""

    return (registry or get_registry()).get(group)


def lookup_data_source(name: str, *, context: Optional[NamingContext] = None) -> DataSource:
    """Resolve a data source bound in the naming context.

    Raises:
        DataSourceResolutionError: the lookup failed, whatever the naming context raised.
        TypeMismatchError: the bound object is not a data source.
    """

    try:
        resolved = (context or initial_context).lookup(name)
    except Exception as exc:
        raise DataSourceResolutionError(f"Unable to resolve data source [{name}]: {exc!r}") from exc

    if not _is_data_source(resolved):
        raise TypeMismatchError(f"Name [{name}] is bound to {type(resolved).__qualname__}, not a data source")
    return resolved


def lookup_data_source_or_none(name: str, *, context: Optional[NamingContext] = None) -> Optional[DataSource]:
    """Like :func:`lookup_data_source` but log the failure and return ``None``."""

    try:
        return lookup_data_source(name, context=context)
    except DataSourceResolutionError as exc:
        logger.error("Find data source [%s] error: %s", name, exc.__cause__ or exc)
    return None


def apply_show_sql_from_config(
    config_source: ConfigSource,
    *,
    config: Optional[GlobalDbConfig] = None,
) -> SqlLogSettings:
    """Read the show-SQL options from ``config_source`` and apply them globally.

    The four show-SQL keys are removed from ``config_source`` as they are read.
    """

    settings = read_sql_log_settings(config_source)
    apply_show_sql(settings.show_sql, settings.format_sql, settings.show_params, settings.level, config=config)
    return settings


def apply_show_sql(
    show_sql: bool,
    format_sql: bool,
    show_params: bool,
    level: Union[LogLevel, str],
    *,
    config: Optional[GlobalDbConfig] = None,
) -> None:
    (config or global_db_config).set_show_sql(show_sql, format_sql, show_params, level)


def remove_show_sql_keys(config_source: ConfigSource) -> None:
    """Strip the show-SQL keys from a group setting before it reaches a pool provider."""

    remove_sql_log_keys(config_source)


def set_case_insensitive(case_insensitive: bool, *, config: Optional[GlobalDbConfig] = None) -> None:
    """Choose whether row field lookups by name ignore case (they do by default)."""

    (config or global_db_config).set_case_insensitive(case_insensitive)


def set_return_generated_key(return_generated_key: bool, *, config: Optional[GlobalDbConfig] = None) -> None:
    """Choose whether INSERT returns generated keys (default) or the affected row count."""

    (config or global_db_config).set_return_generated_key(return_generated_key)


def set_config_path(path: Optional[str], *, config: Optional[GlobalDbConfig] = None) -> None:
    """Override where registries created from now on read the db setting file."""

    (config or global_db_config).set_setting_path(path)


__all__ = [
    "apply_show_sql",
    "apply_show_sql_from_config",
    "close",
    "get_data_source",
    "get_default_data_source",
    "lookup_data_source",
    "lookup_data_source_or_none",
    "remove_show_sql_keys",
    "set_case_insensitive",
    "set_config_path",
    "set_return_generated_key",
]
