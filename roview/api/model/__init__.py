"""Models built from decoded transfer objects for the renderer."""

from .BaseDisplayable import BaseDisplayable
from .DiagramDisplay import DiagramDisplay
from .NotFound import NotFound
from .ObjectList import ObjectList
from .Revealator import Revealator

__all__ = ["BaseDisplayable", "DiagramDisplay", "NotFound", "ObjectList", "Revealator"]
