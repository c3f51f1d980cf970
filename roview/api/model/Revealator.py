"""Named lookups over a domain object's members."""

from ..to import Member, TObject, Value


class Revealator:
    """Read-only view exposing a TObject's members by name.

    ``get`` distinguishes a missing member (None) from a member whose value
    is null (``Value(content=None)``).
    """

    def __init__(self, tobject: TObject):
        self._tobject = tobject

    @property
    def tobject(self) -> TObject:
        return self._tobject

    @property
    def title(self) -> str:
        return self._tobject.title

    def get(self, name: str) -> Value | None:
        member = self._tobject.members.get(name)
        if member is None:
            return None
        return member.value if member.value is not None else Value(content=None)

    def member(self, name: str) -> Member | None:
        return self._tobject.members.get(name)

    def names(self) -> list[str]:
        return list(self._tobject.members)

    def __contains__(self, name: object) -> bool:
        return name in self._tobject.members

    def __repr__(self):
        return f"Revealator({self._tobject.title!r})"
