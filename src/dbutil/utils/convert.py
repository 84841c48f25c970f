"""Conversion helpers for string-valued settings."""

from __future__ import annotations

from typing import Optional, Union

_TRUE_VALUES = frozenset({"true", "yes", "y", "t", "ok", "1", "on"})


def to_bool(value: Union[str, bool, None], default: bool = False) -> bool:
    """Interpret a setting value as a boolean.

    ``None`` yields ``default``. Strings are compared case-insensitively against
    the accepted truthy spellings; anything else is ``False``.
    """

    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def to_int(value: Optional[str], default: int) -> int:
    """Interpret a setting value as an integer, falling back to ``default`` when blank."""

    if value is None or str(value).strip() == "":
        return default
    return int(str(value).strip())


__all__ = ["to_bool", "to_int"]
