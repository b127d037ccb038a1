"""Document loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from microschema import microschema
from microschema.document_loading import DocumentError, compile_document, load_document


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_document(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "session.yaml",
        """
title: Session
strict: true
properties:
  identity_id: string:required
  redirect_uri: string:uri
""",
    )

    document = load_document(document_path)

    assert document == {
        "title": "Session",
        "strict": True,
        "properties": {"identity_id": "string:required", "redirect_uri": "string:uri"},
    }


def test_loads_json_document(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "session.json", json.dumps({"properties": {"scope": "string"}})
    )

    assert load_document(document_path) == {"properties": {"scope": "string"}}


def test_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(DocumentError, match="Document file not found"):
        load_document(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "broken.yaml", "properties: [unclosed")

    with pytest.raises(DocumentError, match="Failed to parse document"):
        load_document(document_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "list.yaml", "- string\n- number\n")

    with pytest.raises(DocumentError, match="Document root must be a mapping"):
        load_document(document_path)


def test_compiles_document_like_builder_calls() -> None:
    document = {
        "title": "Session",
        "strict": True,
        "id": "#session",
        "required": ["owner"],
        "properties": {
            "identity_id": "string:required",
            "redirect_uri": "string:uri",
            "tags": ["string"],
            "owner": {"strict": True, "properties": {"name": "string:required"}},
            "score": {"type": "number", "minimum": 0},
        },
    }

    expected = microschema.id("#session").strict_obj(
        {
            "identity_id": "string:required",
            "redirect_uri": "string:uri",
            "tags": microschema.array_of("string"),
            "owner": microschema.strict_obj({"name": "string:required"}),
            "score": microschema.number(min=0),
        },
        title="Session",
        required=["owner"],
    )

    assert compile_document(document) == expected
    assert compile_document(document)["required"] == ["owner", "identity_id"]


def test_compiles_definitions() -> None:
    document = {
        "definitions": {"user": {"properties": {"name": "string"}}},
        "properties": {"author": {"$ref": "#/definitions/user"}},
    }

    assert compile_document(document) == {
        "definitions": {"user": {"type": "object", "properties": {"name": {"type": "string"}}}},
        "type": "object",
        "properties": {"author": {"$ref": "#/definitions/user"}},
    }


def test_rejects_unsupported_property_values() -> None:
    with pytest.raises(DocumentError, match=r"owner\.age must be a shorthand string"):
        compile_document({"properties": {"owner": {"properties": {"age": 42}}}})


def test_rejects_properties_that_are_not_a_mapping() -> None:
    with pytest.raises(DocumentError, match="properties must be a mapping"):
        compile_document({"properties": ["string"]})


def test_wraps_builder_errors() -> None:
    with pytest.raises(DocumentError, match="'required' must be a list"):
        compile_document({"required": "name", "properties": {"name": "string"}})


def test_empty_document_loads_as_empty_mapping(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "empty.yaml", "")

    assert load_document(document_path) == {}
    assert compile_document(load_document(document_path)) == {"type": "object", "properties": {}}


def test_parses_shorthand_definitions() -> None:
    document = {"definitions": {"link": "string:uri"}, "properties": {"home": "string"}}

    assert compile_document(document)["definitions"] == {
        "link": {"type": "string", "format": "uri"}
    }


def test_parses_shorthand_array_items() -> None:
    schema = compile_document({"properties": {"tags": ["string:uri"], "codes": ["string:8"]}})

    assert schema["properties"] == {
        "tags": {"type": "array", "items": {"type": "string", "format": "uri"}},
        "codes": {"type": "array", "items": {"type": "string", "minLength": 1, "maxLength": 8}},
    }


@pytest.mark.parametrize("value", ["false", 1, None])
def test_rejects_strict_values_that_are_not_booleans(value: object) -> None:
    with pytest.raises(DocumentError, match=r"owner\.strict must be a boolean"):
        compile_document({"properties": {"owner": {"strict": value, "properties": {}}}})
