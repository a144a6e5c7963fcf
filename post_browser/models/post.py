"""Post and comment definitions."""

from __future__ import annotations

from pydantic import Field

from .base import RemoteModel


class Post(RemoteModel):
    id: int
    user_id: int = Field(alias="userId")
    title: str = ""
    body: str = ""


class Comment(RemoteModel):
    id: int | None = None
    post_id: int | None = Field(default=None, alias="postId")
    name: str = ""
    body: str = ""
    email: str = ""


__all__ = ["Comment", "Post"]
