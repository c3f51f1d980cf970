"""Decoded domain object."""

from typing import Any

from pydantic import Field, PrivateAttr

from .Member import Member
from .MemberType import MemberType
from .TransferObject import TransferObject


class TObject(TransferObject):
    """A domain object: title, links and members keyed by name in document order."""

    domain_type: str | None = None
    instance_id: str | None = None
    service_id: str | None = None
    members: dict[str, Member] = Field(default_factory=dict)

    _properties: list[Member] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        self.add_members_as_properties()

    def get_properties(self) -> list[Member]:
        """Return the members classified as properties, in member order.

        Entries demoted or removed since the last promotion are left out, so
        every returned member is in ``members`` and is a property.
        """
        return [
            m
            for m in self._properties
            if m.member_type == MemberType.PROPERTY and self.members.get(m.name) is m
        ]

    def add_members_as_properties(self) -> None:
        """Re-derive the properties view from the current members.

        Idempotent: the view is rebuilt from scratch on every call, so
        members promoted by external code are picked up and nothing is
        listed twice.
        """
        self._properties = [m for m in self.members.values() if m.member_type == MemberType.PROPERTY]
