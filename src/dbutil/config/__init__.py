"""Configuration package for dbutil."""

from pathlib import Path

CONFIG_ROOT = Path(__file__).resolve().parent

DEFAULT_DB_SETTING_PATHS = ("config/db.yaml", "db.yaml")

__all__ = ["CONFIG_ROOT", "DEFAULT_DB_SETTING_PATHS"]
