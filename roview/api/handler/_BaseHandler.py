"""Abstract base handler for hypermedia documents."""

from abc import ABC, abstractmethod

from ..to import DecodedObject


class BaseHandler(ABC):
    """Abstract interface for document handlers."""

    @abstractmethod
    def parse(self, document: str | bytes) -> DecodedObject:
        """Parse a raw document into a transfer object."""
        pass
