"""Shared fixtures for the dbutil test-suite."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List

import pytest

from dbutil.config.global_config import global_db_config
from dbutil.config.settings import get_settings
from dbutil.db.ds_factory import set_registry


class FakeConnection:
    def __init__(self) -> None:
        self.committed = False


class FakeDataSource:
    """Data source double that records what happened to it."""

    def __init__(self, setting=None, *, name: str = "") -> None:
        self.setting = dict(setting or {})
        self.name = name
        self.closed = 0
        self.connections: List[FakeConnection] = []

    @contextmanager
    def connection(self) -> Iterator[FakeConnection]:
        conn = FakeConnection()
        self.connections.append(conn)
        yield conn
        conn.committed = True

    def close(self) -> None:
        self.closed += 1


@pytest.fixture(autouse=True)
def isolated_global_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("DB_SETTING_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    global_db_config.reset()
    set_registry(None)

    yield

    set_registry(None)
    global_db_config.reset()
    get_settings.cache_clear()
    root = logging.getLogger("dbutil")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def fake_factory():
    created: List[FakeDataSource] = []

    def factory(setting, *, name):
        data_source = FakeDataSource(setting, name=name)
        created.append(data_source)
        return data_source

    factory.created = created
    return factory
