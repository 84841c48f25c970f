"""Application settings loaded from environment variables and the db setting file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dbutil.config import CONFIG_ROOT, DEFAULT_DB_SETTING_PATHS
from dbutil.db.errors import DbRuntimeError


class GroupSetting(dict):
    """Flat string-keyed settings of a single data-source group."""

    def __init__(self, name: str = "", values: Optional[Dict[str, object]] = None) -> None:
        super().__init__()
        self.name = name
        for key, value in (values or {}).items():
            self[str(key)] = _stringify(value)

    def copy(self) -> "GroupSetting":
        return GroupSetting(self.name, dict(self))


def _stringify(value: object) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Settings(BaseSettings):
    """Process settings for dbutil."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    db_setting_path: Optional[str] = Field(default=None, alias="DB_SETTING_PATH")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


def resolve_setting_path(path: Optional[str] = None, *, candidates: Iterable[str] = DEFAULT_DB_SETTING_PATHS) -> Path:
    """Locate the db setting file.

    An explicit ``path`` may be absolute or relative to the working directory or
    the package configuration directory. Without one, the default candidates are
    searched in the same two places.
    """

    names = [path] if path else list(candidates)
    for name in names:
        candidate = Path(name).expanduser()
        if candidate.is_absolute():
            if candidate.is_file():
                return candidate
            continue
        for root in (Path.cwd(), CONFIG_ROOT):
            resolved = root / candidate
            if resolved.is_file():
                return resolved

    searched = ", ".join(str(name) for name in names)
    raise DbRuntimeError(f"No db setting file found, searched: {searched}")


def load_db_setting(path: Union[str, Path]) -> Dict[str, GroupSetting]:
    """Read a YAML db setting file into group settings.

    Scalar top-level keys belong to the default group ``""``; mapping values
    declare named groups.
    """

    setting_path = Path(path)
    try:
        raw_data = yaml.safe_load(setting_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise DbRuntimeError(f"Unable to read db setting file {setting_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DbRuntimeError(f"Invalid YAML in db setting file {setting_path}: {exc}") from exc

    return parse_db_setting(raw_data, source=str(setting_path))


def parse_db_setting(raw_data: object, *, source: str = "<mapping>") -> Dict[str, GroupSetting]:
    """Split a raw settings mapping into the default group and named groups."""

    if not isinstance(raw_data, dict):
        raise DbRuntimeError(f"Db setting {source} must be a mapping, got {type(raw_data).__name__}")

    default_values: Dict[str, object] = {}
    groups: Dict[str, GroupSetting] = {}
    for key, value in raw_data.items():
        if isinstance(value, dict):
            groups[str(key)] = GroupSetting(str(key), value)
        else:
            default_values[str(key)] = value

    groups[""] = GroupSetting("", default_values)
    return groups


__all__ = [
    "GroupSetting",
    "Settings",
    "get_settings",
    "load_db_setting",
    "parse_db_setting",
    "resolve_setting_path",
]
