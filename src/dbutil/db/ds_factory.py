"""Registry of data sources keyed by group name."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Mapping, Optional

from dbutil.config.global_config import GlobalDbConfig, global_db_config
from dbutil.config.settings import GroupSetting, get_settings, load_db_setting, parse_db_setting, resolve_setting_path
from dbutil.db import DataSource
from dbutil.db.connection import PooledDataSource
from dbutil.db.errors import DataSourceNotFoundError
from dbutil.db.sql_log import read_sql_log_settings, remove_sql_log_keys

logger = logging.getLogger(__name__)

DEFAULT_GROUP = ""

DataSourceFactory = Callable[..., DataSource]


def _default_factory(setting: GroupSetting, *, name: str) -> DataSource:
    return PooledDataSource.from_setting(setting, name=name)


class DataSourceRegistry:
    """Create data sources on demand from the db setting file and cache them per group.

    Loading the setting applies its top-level show-SQL keys to the global
    configuration; the same keys found inside a group are discarded before the
    group reaches the data-source factory.
    """

    def __init__(
        self,
        config: Optional[GlobalDbConfig] = None,
        *,
        setting: Optional[Mapping[str, object]] = None,
        factory: DataSourceFactory = _default_factory,
    ) -> None:
        self._config = config or global_db_config
        self._factory = factory
        self._lock = threading.Lock()
        self._data_sources: Dict[str, DataSource] = {}
        self._groups = self._load(setting)

    def _load(self, setting: Optional[Mapping[str, object]]) -> Dict[str, GroupSetting]:
        if setting is not None:
            groups = parse_db_setting(dict(setting))
        else:
            path = resolve_setting_path(self._config.current.setting_path or get_settings().db_setting_path)
            logger.debug("Loading db setting from %s", path)
            groups = load_db_setting(path)

        default_group = groups[DEFAULT_GROUP]
        sql_log = read_sql_log_settings(default_group)
        self._config.set_show_sql(sql_log.show_sql, sql_log.format_sql, sql_log.show_params, sql_log.level)
        if not default_group:
            del groups[DEFAULT_GROUP]
        return groups

    def groups(self) -> List[str]:
        """Return the configured group names, the default group first."""

        return sorted(self._groups)

    def get(self, group: Optional[str] = None) -> DataSource:
        """Return the data source of ``group`` (the default group when ``None``)."""

        name = (group or DEFAULT_GROUP).strip()
        with self._lock:
            data_source = self._data_sources.get(name)
            if data_source is None:
                data_source = self._create(name)
                self._data_sources[name] = data_source
            return data_source

    def setting(self, group: Optional[str] = None) -> GroupSetting:
        """Return a copy of the group setting as handed to the data-source factory."""

        name = (group or DEFAULT_GROUP).strip()
        group_setting = self._groups.get(name)
        if group_setting is None:
            raise DataSourceNotFoundError(f"No config for group: [{name}]")

        setting = group_setting.copy()
        remove_sql_log_keys(setting)
        return setting

    def _create(self, name: str) -> DataSource:
        setting = self.setting(name)
        logger.debug("Creating data source for group [%s]", name)
        return self._factory(setting, name=name)

    def close(self, group: Optional[str] = None) -> None:
        """Close and forget the cached data source of ``group``, if any."""

        name = (group or DEFAULT_GROUP).strip()
        with self._lock:
            data_source = self._data_sources.pop(name, None)
        if data_source is not None:
            data_source.close()

    def destroy(self) -> None:
        """Close every cached data source."""

        with self._lock:
            data_sources = list(self._data_sources.items())
            self._data_sources.clear()
        for name, data_source in data_sources:
            logger.debug("Closing data source for group [%s]", name)
            try:
                data_source.close()
            except Exception:
                logger.warning("Failed to close data source for group [%s]", name, exc_info=True)


_registry: Optional[DataSourceRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> DataSourceRegistry:
    """Return the process-wide registry, creating it on first use."""

    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = DataSourceRegistry()
        return _registry


def set_registry(registry: Optional[DataSourceRegistry]) -> Optional[DataSourceRegistry]:
    """Install ``registry`` as the process-wide registry and return the previous one."""

    global _registry
    with _registry_lock:
        previous, _registry = _registry, registry
        return previous


__all__ = ["DEFAULT_GROUP", "DataSourceRegistry", "get_registry", "set_registry"]
