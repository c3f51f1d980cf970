"""Aggregator of classes and properties for one diagram session."""

import logging

from ..to import DomainType, Property, TransferObject
from .BaseDisplayable import BaseDisplayable

logger = logging.getLogger(__name__)


class DiagramDisplay(BaseDisplayable):
    """Accumulates decoded classes and properties across many documents.

    Completeness is derived on every read: the diagram can be displayed once
    the number of distinct classes equals ``number_of_classes``. The expected
    count is pushed in by the session driver; -1 means unknown.

    Property-count parity is not part of the check yet (see DESIGN.md).
    """

    def __init__(self, title: str, number_of_classes: int = -1):
        super().__init__(title)
        self.classes: set[DomainType] = set()
        self.properties: set[Property] = set()
        self.number_of_classes = number_of_classes
        self.number_of_properties = 0

    def inc_number_of_properties(self, inc: int) -> None:
        self.number_of_properties += inc

    def dec_number_of_classes(self) -> None:
        self.number_of_classes -= 1

    def can_be_displayed(self) -> bool:
        logger.debug(
            f"can_be_displayed {self.title!r}: {len(self.classes)}/{self.number_of_classes} classes, "
            f"{len(self.properties)}/{self.number_of_properties} properties"
        )
        return self.number_of_classes == len(self.classes)

    def add_data(self, obj: TransferObject) -> None:
        """Classify ``obj`` into classes or properties; other variants are dropped."""
        if isinstance(obj, DomainType):
            self.classes.add(obj)
        elif isinstance(obj, Property):
            self.properties.add(obj)
        else:
            logger.debug(f"Ignoring {type(obj).__name__} in diagram {self.title!r}")
            return
        logger.debug(f"Added {type(obj).__name__} {obj.title!r} to diagram {self.title!r}")

    def __repr__(self):
        return (
            f"DiagramDisplay({self.title!r}, classes={len(self.classes)}, "
            f"number_of_classes={self.number_of_classes})"
        )
