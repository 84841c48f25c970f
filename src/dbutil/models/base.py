"""Shared base model definitions for dbutil configuration objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DbBaseModel(BaseModel):
    """Base model for immutable dbutil configuration values."""

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = ["DbBaseModel"]
