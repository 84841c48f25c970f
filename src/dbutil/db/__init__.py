"""Database protocols shared across dbutil modules."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsClose(Protocol):
    """Protocol describing resources that can be closed."""

    def close(self) -> None:
        """Release any acquired resources."""


@runtime_checkable
class DataSource(Protocol):
    """Factory of managed DB-API connections."""

    def connection(self) -> AbstractContextManager[Any]:
        """Return a context manager that produces a live database connection."""

    def close(self) -> None:
        """Release every connection held by the data source."""


__all__ = ["DataSource", "SupportsClose"]
