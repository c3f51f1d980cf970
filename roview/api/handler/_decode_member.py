"""Decode members of a domain object."""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .._validation_detail import validation_detail
from ..to import DecodeError, Member, MemberType
from ._decode_links import decode_links
from ._decode_value import decode_value

logger = logging.getLogger(__name__)

_MEMBER_TYPES = {t.value for t in MemberType}


def is_member_shape(raw: Any) -> bool:
    """True when ``raw`` is an object carrying a known ``memberType``."""
    if not isinstance(raw, dict):
        return False
    member_type = raw.get("memberType")
    return isinstance(member_type, str) and member_type in _MEMBER_TYPES


def decode_member(name: str, raw: dict[str, Any], field: str, ignore: Callable[[str, str], None]) -> Member:
    """Decode one member.

    ``ignore`` is called for entries that are dropped; a strict handler
    raises from it.
    """
    value = None
    if "value" in raw:
        value = decode_value(raw["value"], f"{field}.value")
        if value is None:
            logger.debug(f"Dropping non-scalar value of member {name!r}")

    links = decode_links(raw["links"], f"{field}.links") if "links" in raw else []

    extensions = raw.get("extensions", {})
    if not isinstance(extensions, dict):
        ignore(f"{field}.extensions", "not an object")
        extensions = {}

    try:
        return Member(
            name=name,
            member_type=MemberType(raw["memberType"]),
            value=value,
            links=links,
            disabled_reason=raw.get("disabledReason"),
            format=raw.get("format"),
            extensions=extensions,
        )
    except ValidationError as e:
        raise DecodeError(validation_detail(e, field)) from e
