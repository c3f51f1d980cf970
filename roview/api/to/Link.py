"""Hypermedia link."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .Method import Method


class Link(BaseModel):
    """A typed reference embedded in a document, used for navigation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    rel: str
    href: str
    method: Method = Method.GET
    type: str = ""
    title: str = ""
    arguments: dict[str, Any] | None = None

    @property
    def relation(self) -> str:
        return self.rel
