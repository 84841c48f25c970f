"""Data sources backed by psycopg2 connection pooling."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from psycopg2.extensions import connection as PsycopgConnection
from psycopg2.pool import SimpleConnectionPool

from dbutil.db.errors import DbRuntimeError
from dbutil.utils.convert import to_int

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONNECTIONS = 1
DEFAULT_MAX_CONNECTIONS = 5

URL_KEYS = ("url", "dsn")
USER_KEYS = ("user", "username")
PASSWORD_KEYS = ("pass", "password")


class PooledDataSource:
    """Data source handing out connections from psycopg2's SimpleConnectionPool."""

    def __init__(
        self,
        dsn: str,
        *,
        user: Optional[str] = None,
        password: Optional[str] = None,
        min_connections: int = DEFAULT_MIN_CONNECTIONS,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
        name: str = "",
    ) -> None:
        self.name = name
        self.dsn = dsn
        connect_kwargs = {}
        if user is not None:
            connect_kwargs["user"] = user
        if password is not None:
            connect_kwargs["password"] = password
        self._pool = SimpleConnectionPool(min_connections, max_connections, dsn, **connect_kwargs)

    @classmethod
    def from_setting(cls, setting: Mapping[str, Optional[str]], *, name: str = "") -> "PooledDataSource":
        """Build a data source from a group setting."""

        dsn = _first(setting, URL_KEYS)
        if not dsn:
            raise DbRuntimeError(f"No url configured for data source group [{name}]")

        return cls(
            dsn,
            user=_first(setting, USER_KEYS),
            password=_first(setting, PASSWORD_KEYS),
            min_connections=to_int(setting.get("min-connections"), DEFAULT_MIN_CONNECTIONS),
            max_connections=to_int(setting.get("max-connections"), DEFAULT_MAX_CONNECTIONS),
            name=name,
        )

    @contextmanager
    def connection(self) -> Iterator[PsycopgConnection]:
        """Yield a transactional connection from the pool."""

        conn = self._pool.getconn()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all pooled connections."""

        if not self._pool.closed:
            logger.debug("Closing connection pool for group [%s]", self.name)
            self._pool.closeall()

    def __repr__(self) -> str:
        return f"PooledDataSource(name={self.name!r})"


def _first(setting: Mapping[str, Optional[str]], keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = setting.get(key)
        if value not in (None, ""):
            return value
    return None


__all__ = ["PooledDataSource"]
