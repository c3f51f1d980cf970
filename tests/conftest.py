"""Shared pytest configuration and fixtures for all tests."""

import json

import pytest

from roview.utils import reset_logging


def pytest_configure(config):
    for marker in ("unit", "handler", "model", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolated_logging():
    yield
    reset_logging()


# =============================================================================
# Document Helpers
# =============================================================================


def _action(name: str, href_base: str) -> dict:
    return {
        "id": name,
        "memberType": "action",
        "links": [
            {
                "rel": "urn:org.restfulobjects:rels/details;action=\"" + name + "\"",
                "href": f"{href_base}/actions/{name}",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/object-action\"",
            }
        ],
    }


def _property(name: str, value, href_base: str, disabled_reason: str | None = None) -> dict:
    entry = {
        "id": name,
        "memberType": "property",
        "links": [
            {
                "rel": "urn:org.restfulobjects:rels/details;property=\"" + name + "\"",
                "href": f"{href_base}/properties/{name}",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/object-property\"",
            }
        ],
        "value": value,
    }
    if disabled_reason is not None:
        entry["disabledReason"] = disabled_reason
    return entry


def so_0_dict() -> dict:
    """A simple domain object with four properties and six actions."""
    href_base = "http://localhost:8080/restful/objects/simple.SimpleObject/0"
    members = {
        "clearHints": _action("clearHints", href_base),
        "datanucleusIdLong": _property("datanucleusIdLong", 0, href_base, "Contributed property"),
        "delete": _action("delete", href_base),
        "openRestApi": _action("openRestApi", href_base),
        "rebuildMetamodel": _action("rebuildMetamodel", href_base),
        "name": _property("name", "Foo", href_base),
        "datanucleusVersionLong": _property("datanucleusVersionLong", 1, href_base, "Contributed property"),
        "downloadLayoutXml": _action("downloadLayoutXml", href_base),
        "datanucleusVersionTimestamp": _property(
            "datanucleusVersionTimestamp", "1514897074953", href_base, "Contributed property"
        ),
        "updateName": _action("updateName", href_base),
    }
    return {
        "links": [
            {
                "rel": "self",
                "href": href_base,
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/object\"",
                "title": "Object: Foo",
            },
            {
                "rel": "describedby",
                "href": "http://localhost:8080/restful/domain-types/simple.SimpleObject",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/domain-type\"",
            },
        ],
        "extensions": {
            "oid": "simple.SimpleObject:0",
            "isService": False,
            "isPersistent": True,
        },
        "domainType": "simple.SimpleObject",
        "instanceId": "0",
        "members": members,
    }


def domain_type_dict(canonical_name: str = "domainapp.dom.simple.SimpleObject") -> dict:
    """A domain-type metadata document."""
    href = f"http://localhost:8080/restful/domain-types/{canonical_name}"
    return {
        "links": [
            {
                "rel": "self",
                "href": href,
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/domain-type\"",
                "title": canonical_name,
            }
        ],
        "canonicalName": canonical_name,
        "members": {
            "name": {
                "rel": "urn:org.restfulobjects:rels/property",
                "href": f"{href}/properties/name",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/property-description\"",
            },
            "updateName": {
                "rel": "urn:org.restfulobjects:rels/action",
                "href": f"{href}/actions/updateName",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/action-description\"",
            },
        },
        "typeActions": {
            "isSubtypeOf": {
                "rel": "urn:org.restfulobjects:rels/invoke;typeaction=\"isSubtypeOf\"",
                "href": f"{href}/type-actions/isSubtypeOf/invoke",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/type-action-result\"",
                "arguments": {"supertype": {"href": None}},
            }
        },
        "extensions": {"friendlyName": canonical_name.rsplit(".", 1)[-1], "isService": False},
    }


def property_dict(prop_id: str = "name", canonical_name: str = "domainapp.dom.simple.SimpleObject") -> dict:
    """A property-description metadata document."""
    href = f"http://localhost:8080/restful/domain-types/{canonical_name}/properties/{prop_id}"
    return {
        "id": prop_id,
        "memberType": "property",
        "links": [
            {
                "rel": "self",
                "href": href,
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/property-description\"",
            },
            {
                "rel": "urn:org.restfulobjects:rels/return-type",
                "href": "http://localhost:8080/restful/domain-types/java.lang.String",
                "method": "GET",
                "type": "application/json;profile=\"urn:org.restfulobjects:repr-types/domain-type\"",
            },
        ],
        "optional": False,
        "extensions": {"friendlyName": prop_id.capitalize(), "memberOrder": 1},
    }


@pytest.fixture
def so_0() -> str:
    return json.dumps(so_0_dict())


@pytest.fixture
def domain_type_doc() -> str:
    return json.dumps(domain_type_dict())


@pytest.fixture
def property_doc() -> str:
    return json.dumps(property_dict())


@pytest.fixture
def make_domain_type_doc():
    """Factory for domain-type documents keyed by canonical name."""

    def _make(canonical_name: str) -> str:
        return json.dumps(domain_type_dict(canonical_name))

    return _make


@pytest.fixture
def make_property_doc():
    """Factory for property-description documents."""

    def _make(prop_id: str, canonical_name: str = "domainapp.dom.simple.SimpleObject") -> str:
        return json.dumps(property_dict(prop_id, canonical_name))

    return _make


@pytest.fixture
def so_0_raw() -> dict:
    return so_0_dict()
