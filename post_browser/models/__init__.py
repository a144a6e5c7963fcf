"""Typed payloads returned by the remote data gateway."""

from .base import RemoteModel
from .employee import Company, Employee
from .post import Comment, Post

__all__ = ["Comment", "Company", "Employee", "Post", "RemoteModel"]
