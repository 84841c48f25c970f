"""Tests for the best-effort resource closer."""

import io
import logging

import pytest

from dbutil import close


class Recorder:
    def __init__(self, name, log, *, fail=False):
        self.name = name
        self.log = log
        self.fail = fail

    def close(self):
        self.log.append(self.name)
        if self.fail:
            raise RuntimeError(f"{self.name} exploded")


class NotCloseable:
    pass


def test_closes_in_caller_order():
    log = []
    cursor, statement, connection = (Recorder(n, log) for n in ("cursor", "statement", "connection"))

    close(cursor, statement, connection)

    assert log == ["cursor", "statement", "connection"]


def test_skips_none_and_warns_on_non_closeable(caplog: pytest.LogCaptureFixture):
    log = []
    caplog.set_level(logging.DEBUG, logger="dbutil")

    close(None, Recorder("a", log), NotCloseable(), None, Recorder("b", log), 42)

    assert log == ["a", "b"]
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "NotCloseable" in warnings[0].getMessage()
    assert "int" in warnings[1].getMessage()


def test_failed_close_is_suppressed_and_later_resources_still_close(caplog: pytest.LogCaptureFixture):
    log = []
    caplog.set_level(logging.DEBUG, logger="dbutil")

    close(Recorder("first", log, fail=True), Recorder("second", log))

    assert log == ["first", "second"]
    failures = [record for record in caplog.records if record.levelno == logging.DEBUG and record.exc_info]
    assert len(failures) == 1
    assert "Recorder" in failures[0].getMessage()


def test_each_resource_closed_exactly_once():
    log = []
    resources = [Recorder(str(index), log) for index in range(5)]

    close(*resources)

    assert sorted(log) == sorted(r.name for r in resources)
    assert len(log) == len(set(log))


def test_empty_and_all_none_are_noops(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="dbutil")

    close()
    close(None, None)

    assert caplog.records == []


def test_closes_standard_library_objects():
    stream = io.StringIO("data")

    close(stream)

    assert stream.closed


class Haunted:
    """Resource whose attribute access blows up."""

    def __getattr__(self, name):
        raise RuntimeError(f"no access to {name}")


def test_broken_attribute_access_is_treated_as_non_closeable(caplog: pytest.LogCaptureFixture):
    log = []
    caplog.set_level(logging.DEBUG, logger="dbutil")

    close(Haunted(), Recorder("after", log))

    assert log == ["after"]
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert "Haunted" in warnings[0].getMessage()


def test_non_callable_close_attribute_is_not_called(caplog: pytest.LogCaptureFixture):
    class Flagged:
        close = True

    caplog.set_level(logging.DEBUG, logger="dbutil")

    close(Flagged())

    assert any(record.levelno == logging.WARNING for record in caplog.records)
