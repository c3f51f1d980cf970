"""Common base of all decoded hypermedia documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .Link import Link

SELF_REL = "self"


class TransferObject(BaseModel):
    """The decoded form of one hypermedia document.

    ``links[0]`` is conventionally the self link, so its title is the
    canonical display title when the document carries no ``title`` field.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    links: list[Link] = Field(default_factory=list)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _default_title(self) -> "TransferObject":
        if not self.title and self.links:
            self.title = self.links[0].title
        return self

    @property
    def self_link(self) -> Link | None:
        for link in self.links:
            if link.rel == SELF_REL:
                return link
        return self.links[0] if self.links else None
