"""Decoded class metadata."""

from pydantic import Field

from .Link import Link
from .TransferObject import TransferObject


class DomainType(TransferObject):
    """Metadata of one domain class.

    ``members`` and ``type_actions`` map member ids to the links of their
    descriptions. Two instances are equal when they describe the same class.
    """

    canonical_name: str
    members: dict[str, Link] = Field(default_factory=dict)
    type_actions: dict[str, Link] = Field(default_factory=dict)

    @property
    def simple_name(self) -> str:
        return self.canonical_name.rsplit(".", 1)[-1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainType):
            return NotImplemented
        return self.canonical_name == other.canonical_name

    def __hash__(self) -> int:
        return hash(("DomainType", self.canonical_name))
