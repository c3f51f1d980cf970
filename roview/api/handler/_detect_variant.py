"""Select the decode path from a document's shape."""

from typing import Any

from ._decode_member import is_member_shape

TOBJECT = "tobject"
DOMAIN_TYPE = "domain_type"
PROPERTY = "property"


def detect_variant(raw: dict[str, Any]) -> str:
    # domain-type representation; a member named canonicalName is an object
    if "canonicalName" in raw and not is_member_shape(raw["canonicalName"]):
        return DOMAIN_TYPE
    # property-description representation (an object property would carry a value)
    if raw.get("memberType") == "property" and "id" in raw and "value" not in raw:
        return PROPERTY
    return TOBJECT
