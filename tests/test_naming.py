"""Tests for the in-process naming context."""

import pytest

from dbutil.db.naming import InitialContext, NameNotBoundError, NamingError


def test_bind_and_lookup_strip_names():
    ctx = InitialContext()
    ctx.bind(" jdbc/app ", "resource")

    assert ctx.lookup("jdbc/app") == "resource"
    assert ctx.list() == ["jdbc/app"]


def test_bind_refuses_existing_name():
    ctx = InitialContext()
    ctx.bind("jdbc/app", 1)

    with pytest.raises(NamingError, match="already bound"):
        ctx.bind("jdbc/app", 2)


def test_rebind_replaces_and_unbind_removes():
    ctx = InitialContext()
    ctx.bind("jdbc/app", 1)
    ctx.rebind("jdbc/app", 2)
    assert ctx.lookup("jdbc/app") == 2

    ctx.unbind("jdbc/app")
    ctx.unbind("jdbc/app")

    with pytest.raises(NameNotBoundError):
        ctx.lookup("jdbc/app")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_empty_names_are_rejected(name):
    with pytest.raises(NamingError, match="must not be empty"):
        InitialContext().lookup(name)
