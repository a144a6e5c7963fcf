"""Shared configuration for records read from the remote store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RemoteModel(BaseModel):
    """Base class for payloads parsed from the remote JSON API.

    Unknown fields are kept, and the camelCase names used on the wire are
    accepted alongside the snake_case attribute names.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


__all__ = ["RemoteModel"]
