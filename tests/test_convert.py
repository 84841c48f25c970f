"""Tests for setting value conversion helpers."""

import pytest

from dbutil.utils.convert import to_bool, to_int


@pytest.mark.parametrize("value", ["true", "TRUE", " yes ", "y", "t", "ok", "1", "on", True])
def test_truthy_values(value):
    assert to_bool(value) is True


@pytest.mark.parametrize("value", ["false", "no", "0", "off", "maybe", "", False])
def test_falsy_values(value):
    assert to_bool(value, default=True) is False


def test_none_uses_default():
    assert to_bool(None) is False
    assert to_bool(None, default=True) is True


def test_to_int():
    assert to_int(None, 5) == 5
    assert to_int(" ", 5) == 5
    assert to_int(" 12 ", 5) == 12
    with pytest.raises(ValueError):
        to_int("many", 5)
