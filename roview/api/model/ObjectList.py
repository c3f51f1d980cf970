"""Append-only list of revealed objects."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .NotFound import NotFound
from .Revealator import Revealator


@dataclass
class ObjectList:
    """Ordered sequence of Revealator wrappers."""

    items: list[Revealator] = field(default_factory=list)

    def add(self, item: Revealator) -> None:
        self.items.append(item)

    def last(self) -> Revealator:
        """Return the most recently added element.

        Raises:
            NotFound: If the list is empty.
        """
        if not self.items:
            raise NotFound("ObjectList is empty")
        return self.items[-1]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Revealator]:
        return iter(self.items)
