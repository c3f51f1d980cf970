from typing import Any

from ..to import Value
from ._decode_links import decode_link, is_link_shape

_SCALARS = (bool, int, float, str)


def decode_value(raw: Any, field: str) -> Value | None:
    """Decode a member value.

    Scalars and null map onto ``Value.content``. A link object becomes a
    reference value titled by the link. Anything else yields None.
    """
    if raw is None or isinstance(raw, _SCALARS):
        return Value(content=raw)
    if is_link_shape(raw):
        link = decode_link(raw, field)
        return Value(content=link.title, link=link)
    return None
