"""Exceptions shared by the dbutil database layer."""

from __future__ import annotations


class DbRuntimeError(RuntimeError):
    """Base exception raised for database plumbing failures."""


class DataSourceNotFoundError(DbRuntimeError):
    """Raised when no data source is configured for a requested group."""


class DataSourceResolutionError(DbRuntimeError):
    """Raised when a data source cannot be resolved from the naming context."""


class TypeMismatchError(DataSourceResolutionError):
    """Raised when a name resolves to an object that is not a data source."""


__all__ = [
    "DataSourceNotFoundError",
    "DataSourceResolutionError",
    "DbRuntimeError",
    "TypeMismatchError",
]
