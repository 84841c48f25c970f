"""Tests for the psycopg2-backed data source."""

from unittest.mock import MagicMock

import pytest

from dbutil.db import DataSource
from dbutil.db import connection as connection_module
from dbutil.db.connection import PooledDataSource
from dbutil.db.errors import DbRuntimeError


@pytest.fixture
def pool(monkeypatch):
    pool_class = MagicMock(name="SimpleConnectionPool")
    instance = pool_class.return_value
    instance.closed = False
    monkeypatch.setattr(connection_module, "SimpleConnectionPool", pool_class)
    return pool_class


def test_from_setting_reads_group_keys(pool):
    data_source = PooledDataSource.from_setting(
        {"url": "postgresql://db/app", "username": "app", "password": "s3cret", "max-connections": "8"},
        name="app",
    )

    pool.assert_called_once_with(1, 8, "postgresql://db/app", user="app", password="s3cret")
    assert data_source.name == "app"
    assert isinstance(data_source, DataSource)


def test_from_setting_accepts_dsn_alias(pool):
    PooledDataSource.from_setting({"dsn": "dbname=app", "min-connections": "2"})

    pool.assert_called_once_with(2, 5, "dbname=app")


def test_from_setting_requires_url(pool):
    with pytest.raises(DbRuntimeError, match="No url configured"):
        PooledDataSource.from_setting({"user": "app"}, name="broken")
    pool.assert_not_called()


def test_connection_commits_and_returns_to_pool(pool):
    data_source = PooledDataSource("postgresql://db/app")
    conn = pool.return_value.getconn.return_value

    with data_source.connection() as acquired:
        assert acquired is conn

    conn.commit.assert_called_once_with()
    conn.rollback.assert_not_called()
    pool.return_value.putconn.assert_called_once_with(conn)


def test_connection_rolls_back_on_error(pool):
    data_source = PooledDataSource("postgresql://db/app")
    conn = pool.return_value.getconn.return_value

    with pytest.raises(ValueError):
        with data_source.connection():
            raise ValueError("boom")

    conn.rollback.assert_called_once_with()
    conn.commit.assert_not_called()
    pool.return_value.putconn.assert_called_once_with(conn)


def test_close_only_closes_open_pool(pool):
    data_source = PooledDataSource("postgresql://db/app")

    data_source.close()
    pool.return_value.closed = True
    data_source.close()

    pool.return_value.closeall.assert_called_once_with()
