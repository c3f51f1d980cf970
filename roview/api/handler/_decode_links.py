"""Decode link entries."""

from typing import Any

from pydantic import ValidationError

from ..to import DecodeError, Link
from .._validation_detail import validation_detail


def is_link_shape(raw: Any) -> bool:
    """True when ``raw`` looks like a link object (has string rel and href)."""
    return isinstance(raw, dict) and isinstance(raw.get("rel"), str) and isinstance(raw.get("href"), str)


def decode_link(raw: Any, field: str) -> Link:
    if not isinstance(raw, dict):
        raise DecodeError(f"{field}: link must be an object, got {type(raw).__name__}")
    try:
        return Link.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(validation_detail(e, field)) from e


def decode_links(raw: Any, field: str = "links") -> list[Link]:
    """Decode a ``links`` array, preserving order."""
    if not isinstance(raw, list):
        raise DecodeError(f"{field}: must be an array, got {type(raw).__name__}")
    return [decode_link(entry, f"{field}.{i}") for i, entry in enumerate(raw)]
