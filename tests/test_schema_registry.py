"""Tests for registry_verifier.schema.registry: loading, lookup, violations."""

from __future__ import annotations

from pathlib import Path

import pytest

from registry_verifier.exceptions import SchemaLoadError
from registry_verifier.schema.registry import SchemaRegistry

from .helpers import CHECKSUMMED_ADDRESS, WIDGET_SCHEMA, write_json


def test_identifiers_match_schema_file_stems(tmp_path: Path):
    write_json(tmp_path / "widget.json", WIDGET_SCHEMA)
    write_json(tmp_path / "token.json", {"type": "object"})
    (tmp_path / "nested").mkdir()
    write_json(tmp_path / "nested" / "ignored.json", {"type": "object"})

    registry = SchemaRegistry.load(tmp_path)

    assert registry.identifiers == ("token", "widget")
    assert len(registry) == 2
    assert "widget" in registry
    assert "ignored" not in registry


def test_lookup_of_unknown_identifier_is_absent(registry):
    assert registry.lookup("gadget") is None
    assert registry.lookup(12) is None
    assert registry.lookup(["widget"]) is None
    assert registry.lookup("widget").identifier == "widget"


def test_invalid_json_schema_file_is_fatal(tmp_path: Path):
    write_json(tmp_path / "widget.json", WIDGET_SCHEMA)
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaLoadError, match="broken.json"):
        SchemaRegistry.load(tmp_path)


def test_schema_that_does_not_compile_is_fatal(tmp_path: Path):
    write_json(tmp_path / "bad.json", {"type": 12})

    with pytest.raises(SchemaLoadError, match="is not a valid schema"):
        SchemaRegistry.load(tmp_path)


def test_non_object_schema_is_fatal(tmp_path: Path):
    write_json(tmp_path / "list.json", [1, 2, 3])

    with pytest.raises(SchemaLoadError):
        SchemaRegistry.load(tmp_path)


def test_duplicate_identifier_is_fatal(tmp_path: Path):
    write_json(tmp_path / "widget.json", WIDGET_SCHEMA)
    write_json(tmp_path / "widget.schema", WIDGET_SCHEMA)

    with pytest.raises(SchemaLoadError, match="Duplicate"):
        SchemaRegistry.load(tmp_path)


def test_missing_schema_directory_is_fatal(tmp_path: Path):
    with pytest.raises(SchemaLoadError):
        SchemaRegistry.load(tmp_path / "does-not-exist")


def test_conforming_document_has_no_violations(registry):
    schema = registry.lookup("widget")
    assert schema.validate({"$schema": "widget", "name": "x"}) == []
    assert schema.is_valid({"$schema": "widget", "name": "x"})


def test_missing_property_violation(registry):
    violations = registry.lookup("widget").validate({"$schema": "widget"})

    assert len(violations) == 1
    assert violations[0].keyword == "required"
    assert violations[0].data_path == ""
    assert "'name' is a required property" in violations[0].message


def test_violation_data_path_is_json_pointer(tmp_path: Path):
    write_json(
        tmp_path / "list.json",
        {
            "type": "object",
            "properties": {"items": {"type": "array", "items": {"type": "string"}}},
        },
    )
    schema = SchemaRegistry.load(tmp_path).lookup("list")

    violations = schema.validate({"items": ["a", 1, "b", 2]})

    assert [v.data_path for v in violations] == ["/items/1", "/items/3"]
    assert {v.keyword for v in violations} == {"type"}


def test_address_format(tmp_path: Path):
    write_json(
        tmp_path / "token.json",
        {
            "type": "object",
            "properties": {"address": {"type": "string", "format": "address"}},
        },
    )
    schema = SchemaRegistry.load(tmp_path).lookup("token")

    assert schema.validate({"address": CHECKSUMMED_ADDRESS}) == []
    assert schema.validate({"address": CHECKSUMMED_ADDRESS.lower()}) == []

    violations = schema.validate({"address": "0x123"})
    assert len(violations) == 1
    assert violations[0].keyword == "format"
    assert violations[0].data_path == "/address"


def test_address_format_rejects_bad_checksum(tmp_path: Path):
    write_json(
        tmp_path / "token.json",
        {"type": "object", "properties": {"address": {"type": "string", "format": "address"}}},
    )
    schema = SchemaRegistry.load(tmp_path).lookup("token")
    # one letter's case flipped relative to the checksummed form
    bad_checksum = "0x5AAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    violations = schema.validate({"address": bad_checksum})

    assert [(v.keyword, v.data_path) for v in violations] == [("format", "/address")]


def test_standard_formats_are_enforced(tmp_path: Path):
    write_json(
        tmp_path / "event.json",
        {
            "type": "object",
            "properties": {
                "when": {"type": "string", "format": "date-time"},
                "logo": {"type": "string", "format": "uri"},
            },
        },
    )
    schema = SchemaRegistry.load(tmp_path).lookup("event")

    assert schema.validate({"when": "2024-05-01T12:00:00Z", "logo": "https://example.com/logo.png"}) == []

    violations = schema.validate({"when": "not-a-date", "logo": "not a uri"})
    assert [(v.keyword, v.data_path) for v in violations] == [("format", "/logo"), ("format", "/when")]
