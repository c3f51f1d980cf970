"""Handler turning raw hypermedia documents into transfer objects."""

import json
import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ...utils.configure_logging import configure_logging
from .._validation_detail import validation_detail
from ..config.HandlerConfig import HandlerConfig
from ..config.RoConfig import RoConfig
from ..to import DecodedObject, DecodeError, DomainType, Link, Member, Property, TObject
from ._BaseHandler import BaseHandler
from ._decode_links import decode_link, decode_links, is_link_shape
from ._decode_member import decode_member, is_member_shape
from ._detect_variant import DOMAIN_TYPE, PROPERTY, TOBJECT, detect_variant

logger = logging.getLogger(__name__)

# String fields of a domain object, by wire name
_TOBJECT_STR_FIELDS = {
    "title": "title",
    "domainType": "domain_type",
    "instanceId": "instance_id",
    "serviceId": "service_id",
}
_DOMAIN_TYPE_FIELDS = {"links", "canonicalName", "members", "typeActions", "extensions"}
_PROPERTY_FIELDS = {"links", "id", "memberType", "optional", "extensions"}


class TObjectHandler(BaseHandler):
    """Parse a document into a TObject, DomainType or Property.

    The variant is chosen by the document's shape, not by the caller. Fields
    that match no expected shape are ignored unless the handler is strict.
    """

    def __init__(self, config: HandlerConfig | None = None):
        self.config = config or HandlerConfig()
        self._decoders: dict[str, Callable[[dict[str, Any], list[Link]], DecodedObject]] = {
            TOBJECT: self._decode_tobject,
            DOMAIN_TYPE: self._decode_domain_type,
            PROPERTY: self._decode_property,
        }

    @classmethod
    def from_config(cls, config: RoConfig | None = None) -> "TObjectHandler":
        """Build a handler from roview configuration and set up logging.

        Loads ``config.json`` from the home directory when no config is given.

        Raises:
            ValueError: If the configuration cannot be loaded.
        """
        if config is None:
            config = RoConfig.load()
        configure_logging(config.log)
        return cls(config.handler.model_copy())

    def parse(self, document: str | bytes) -> DecodedObject:
        """Parse a JSON document.

        Raises:
            DecodeError: If the document is not a JSON object, lacks ``links``,
                or a recognized entry has an invalid shape.
        """
        try:
            raw = json.loads(document)
        except (json.JSONDecodeError, TypeError, UnicodeDecodeError, RecursionError) as e:
            raise DecodeError(f"Invalid JSON: {e}") from e
        return self.decode(raw)

    def decode(self, raw: Any) -> DecodedObject:
        """Decode an already parsed JSON value."""
        if not isinstance(raw, dict):
            raise DecodeError(f"Document must be an object, got {type(raw).__name__}")
        if "links" not in raw:
            raise DecodeError("links: field required")

        links = decode_links(raw["links"])
        variant = detect_variant(raw)
        obj = self._decoders[variant](raw, links)
        logger.debug(f"Decoded {type(obj).__name__}: {obj.title!r}")
        return obj

    def _ignore(self, field: str, reason: str) -> None:
        if self.config.strict:
            raise DecodeError(f"{field}: {reason}")
        logger.debug(f"Ignoring {field}: {reason}")

    def _extensions(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, dict):
            self._ignore("extensions", "not an object")
            return {}
        return value

    def _optional_str(self, key: str, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        self._ignore(key, "not a string")
        return None

    def _link_map(self, raw: Any, field: str) -> dict[str, Link]:
        if not isinstance(raw, dict):
            self._ignore(field, "not an object")
            return {}
        result: dict[str, Link] = {}
        for name, entry in raw.items():
            if is_link_shape(entry):
                result[name] = decode_link(entry, f"{field}.{name}")
            else:
                self._ignore(f"{field}.{name}", "not a link")
        return result

    def _decode_members_block(self, block: Any, members: dict[str, Member]) -> None:
        if not isinstance(block, dict):
            self._ignore("members", "not an object")
            return
        for name, entry in block.items():
            if is_member_shape(entry):
                members[name] = decode_member(name, entry, f"members.{name}", self._ignore)
            else:
                self._ignore(f"members.{name}", "not a member")

    def _decode_tobject(self, raw: dict[str, Any], links: list[Link]) -> TObject:
        members: dict[str, Member] = {}
        fields: dict[str, Any] = {}
        extensions: dict[str, Any] = {}
        for key, entry in raw.items():
            if key == "links":
                continue
            # a member may use a reserved name; its shape decides
            if is_member_shape(entry):
                members[key] = decode_member(key, entry, key, self._ignore)
            elif key == "members":
                self._decode_members_block(entry, members)
            elif key == "extensions":
                extensions = self._extensions(entry)
            elif key in _TOBJECT_STR_FIELDS:
                fields[_TOBJECT_STR_FIELDS[key]] = self._optional_str(key, entry)
            else:
                self._ignore(key, "unrecognized entry")

        try:
            return TObject(
                title=fields.pop("title", None) or "",
                links=links,
                extensions=extensions,
                members=members,
                **fields,
            )
        except ValidationError as e:
            raise DecodeError(validation_detail(e)) from e

    def _decode_domain_type(self, raw: dict[str, Any], links: list[Link]) -> DomainType:
        for key in raw:
            if key not in _DOMAIN_TYPE_FIELDS:
                self._ignore(key, "unrecognized entry")
        try:
            return DomainType(
                canonical_name=raw["canonicalName"],
                links=links,
                extensions=self._extensions(raw.get("extensions", {})),
                members=self._link_map(raw.get("members", {}), "members"),
                type_actions=self._link_map(raw.get("typeActions", {}), "typeActions"),
            )
        except ValidationError as e:
            raise DecodeError(validation_detail(e)) from e

    def _decode_property(self, raw: dict[str, Any], links: list[Link]) -> Property:
        for key in raw:
            if key not in _PROPERTY_FIELDS:
                self._ignore(key, "unrecognized entry")
        try:
            return Property(
                id=raw["id"],
                links=links,
                extensions=self._extensions(raw.get("extensions", {})),
                optional=raw.get("optional"),
            )
        except ValidationError as e:
            raise DecodeError(validation_detail(e)) from e
