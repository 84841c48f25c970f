"""Utility helpers shared across dbutil modules."""

from dbutil.utils.convert import to_bool
from dbutil.utils.log import configure_logging

__all__ = ["configure_logging", "to_bool"]
