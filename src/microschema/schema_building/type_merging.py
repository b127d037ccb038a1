"""Type inference and merge helpers shared by the constructors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def json_type_of(value: Any) -> str:
    """Infer the JSON Schema type name of a literal value."""
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return "object"


def merge_fragments(fragments: list[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge fragments last-wins, accumulating ``type`` into a union list."""
    result: dict[str, Any] = {}
    for fragment in fragments:
        merged_type = None
        if "type" in result and "type" in fragment:
            merged_type = _as_type_list(result["type"]) + _as_type_list(fragment["type"])
        result.update(fragment)
        if merged_type is not None:
            result["type"] = merged_type
    return result


def normalize_dependencies(dependencies: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap single property dependencies in a list."""
    return {
        name: [value] if isinstance(value, str) else value
        for name, value in dependencies.items()
    }


def _as_type_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
