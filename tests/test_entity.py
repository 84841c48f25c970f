"""Tests for case-aware result rows."""

import pytest

from dbutil import set_case_insensitive
from dbutil.models.entity import Entity


def test_case_insensitive_lookup_by_default():
    row = Entity({"UserName": "ada"}, table_name="users")

    assert row["username"] == "ada"
    assert row["USERNAME"] == "ada"
    assert "userNAME" in row
    assert list(row) == ["UserName"]


def test_case_sensitive_when_switched_off():
    set_case_insensitive(False)
    row = Entity({"UserName": "ada"})

    assert row["UserName"] == "ada"
    with pytest.raises(KeyError):
        row["username"]


def test_explicit_flag_overrides_global():
    row = Entity({"ID": 1}, case_insensitive=False)

    assert "id" not in row


def test_assignment_and_deletion_share_the_folded_key():
    row = Entity()
    row["Name"] = "first"
    row["NAME"] = "second"

    assert len(row) == 1
    assert dict(row) == {"Name": "second"}

    del row["name"]
    assert len(row) == 0


def test_from_cursor():
    description = [("id", 23, None, None, None, None, None), ("Email", 25, None, None, None, None, None)]

    row = Entity.from_cursor(description, (7, "ada@example.com"))

    assert row["ID"] == 7
    assert row.get("email") == "ada@example.com"
    assert row.get("missing") is None
