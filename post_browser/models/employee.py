"""Employee (selectable owner) definitions."""

from __future__ import annotations

from pydantic import Field

from .base import RemoteModel


class Company(RemoteModel):
    name: str
    catch_phrase: str = Field(default="", alias="catchPhrase")
    bs: str | None = None


class Employee(RemoteModel):
    id: int
    name: str
    username: str | None = None
    email: str | None = None
    company: Company

    @property
    def byline(self) -> str:
        return f"Author: {self.name} with {self.company.name}"


__all__ = ["Company", "Employee"]
