"""Microschema document loading and compilation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from microschema.schema_building import (
    ConfigurationError,
    Fragment,
    PropertyValue,
    Required,
    SchemaBuilder,
)
from microschema.shorthand_parsing import parse_shorthand

_LOGGER = logging.getLogger(__name__)

_OBJECT_OPTIONS = ("title", "description", "default", "dependencies")


class DocumentError(Exception):
    """Raised when a microschema document cannot be loaded or compiled."""


def load_document(document_path: Path | str) -> dict[str, Any]:
    """Read a YAML or JSON microschema document."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"Document file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Failed to parse document {path}: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise DocumentError("Document root must be a mapping.")
    return dict(parsed)


def compile_document(
    document: Mapping[str, Any], builder: SchemaBuilder | None = None
) -> Fragment | Required:
    """Compile a microschema document into a JSON Schema fragment."""
    builder = builder if builder is not None else SchemaBuilder()
    try:
        return _compile_object(document, builder, path="")
    except ConfigurationError as exc:
        raise DocumentError(str(exc)) from exc


def _compile_object(document: Mapping[str, Any], builder: SchemaBuilder, *, path: str) -> Any:
    _LOGGER.debug("Compiling object document at %r", path or "<root>")
    schema_id = _optional_string(document.get("id"), _label(path, "id"))
    if schema_id is not None:
        builder = builder.id(schema_id)

    definitions = document.get("definitions")
    if definitions is not None:
        definitions_map = _require_mapping(definitions, _label(path, "definitions"))
        builder = builder.definitions(
            {
                name: _compile_fragment(value, path=_label(path, f"definitions.{name}"))
                for name, value in definitions_map.items()
            }
        )

    properties = _require_mapping(document.get("properties", {}), _label(path, "properties"))
    compiled: dict[str, PropertyValue] = {
        name: _compile_value(value, path=_label(path, name)) for name, value in properties.items()
    }

    options = {key: document[key] for key in _OBJECT_OPTIONS if key in document}
    if "required" in document:
        options["required"] = document["required"]
    strict = _require_bool(document.get("strict", False), _label(path, "strict"))
    return builder.obj(compiled, strict=strict, **options)


def _compile_value(value: Any, *, path: str) -> PropertyValue:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        if "properties" in value:
            return _compile_object(value, SchemaBuilder(), path=path)
        return dict(value)
    if isinstance(value, Sequence) and len(value) == 1:
        return SchemaBuilder().array_of(_compile_fragment(value[0], path=f"{path}[]"))
    raise DocumentError(
        f"{path} must be a shorthand string, a mapping or a one-item list."
    )


def _compile_fragment(value: Any, *, path: str) -> Any:
    compiled = _compile_value(value, path=path)
    if isinstance(compiled, str):
        return parse_shorthand(compiled).fragment
    return compiled


def _label(path: str, key: str) -> str:
    return key if not path else f"{path}.{key}"


def _require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DocumentError(f"{field_name} must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise DocumentError(f"{field_name} must be a boolean.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise DocumentError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
