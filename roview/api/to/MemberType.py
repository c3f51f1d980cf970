"""Member kind enum."""

from enum import Enum


class MemberType(str, Enum):
    PROPERTY = "property"
    COLLECTION = "collection"
    ACTION = "action"
