"""Decoded property description metadata."""

from .Link import Link
from .TransferObject import TransferObject

RETURN_TYPE_REL_SUFFIX = "/return-type"


class Property(TransferObject):
    """Declared property of a domain class.

    Identity is the self link's href, falling back to ``id`` when the
    description has no links.
    """

    id: str
    optional: bool | None = None

    @property
    def key(self) -> str:
        link = self.self_link
        return link.href if link is not None else self.id

    @property
    def friendly_name(self) -> str:
        return str(self.extensions.get("friendlyName", self.id))

    @property
    def return_type(self) -> Link | None:
        for link in self.links:
            if link.rel.endswith(RETURN_TYPE_REL_SUFFIX):
                return link
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(("Property", self.key))
