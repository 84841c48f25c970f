"""Database plumbing helpers: resource closing, data-source lookup and global switches."""

from dbutil.db.facade import (
    apply_show_sql,
    apply_show_sql_from_config,
    close,
    get_data_source,
    get_default_data_source,
    lookup_data_source,
    lookup_data_source_or_none,
    remove_show_sql_keys,
    set_case_insensitive,
    set_config_path,
    set_return_generated_key,
)

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
