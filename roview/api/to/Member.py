"""Member of a domain object."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .Link import Link
from .MemberType import MemberType
from .Value import Value


class Member(BaseModel):
    """A named, typed field of a domain object (property, collection or action)."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str
    member_type: MemberType
    value: Value | None = None
    links: list[Link] = Field(default_factory=list)
    disabled_reason: str | None = None
    format: str | None = None
    extensions: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_property(self) -> bool:
        return self.member_type == MemberType.PROPERTY
