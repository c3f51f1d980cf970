"""Abstract base for models handed to the renderer."""

from abc import ABC, abstractmethod

from ..to import TransferObject


class BaseDisplayable(ABC):
    """Collects transfer objects until it has enough to be rendered."""

    def __init__(self, title: str):
        self.title = title

    @abstractmethod
    def can_be_displayed(self) -> bool:
        """Whether all expected data has arrived."""
        pass

    @abstractmethod
    def add_data(self, obj: TransferObject) -> None:
        """Fold one decoded document into the model."""
        pass
