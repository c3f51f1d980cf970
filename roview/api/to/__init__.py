"""Transfer objects: the decoded model of hypermedia documents."""

from typing import Union

from .DecodeError import DecodeError
from .DomainType import DomainType
from .Link import Link
from .Member import Member
from .MemberType import MemberType
from .Method import Method
from .Property import Property
from .TObject import TObject
from .TransferObject import TransferObject
from .Value import Value

# Closed set of variants a handler can produce
DecodedObject = Union[TObject, DomainType, Property]

__all__ = [
    "DecodeError",
    "DecodedObject",
    "DomainType",
    "Link",
    "Member",
    "MemberType",
    "Method",
    "Property",
    "TObject",
    "TransferObject",
    "Value",
]
