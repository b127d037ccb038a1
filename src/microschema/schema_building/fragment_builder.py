"""Fluent constructors for JSON Schema fragments.

Example::

    microschema.strict_obj({
        "identity_id": "string:required",
        "client_id": "number",
        "redirect_uri": "string:uri",
        "children": microschema.array_of(microschema.strict_obj({"scope": "string"})),
    })
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from microschema.shorthand_parsing import parse_shorthand

from .build_errors import InvalidRequiredList, UnsupportedPatternFlags
from .chain_state import ChainState, Fragment, PropertyValue, Required
from .type_merging import json_type_of, merge_fragments, normalize_dependencies

_LOGGER = logging.getLogger(__name__)

_MISSING: Any = object()


class SchemaBuilder:
    """Builds schema fragments, applying any pending chain state to each result.

    Builders are immutable. ``required``, ``id`` and ``definitions`` return a new
    builder layered over this one; the shared base builder never changes.
    """

    __slots__ = ("_state",)

    def __init__(self, state: ChainState | None = None) -> None:
        self._state = state if state is not None else ChainState()

    @property
    def state(self) -> ChainState:
        return self._state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaBuilder):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash((self._state.required, self._state.schema_id))

    def __repr__(self) -> str:
        return f"SchemaBuilder({self._state!r})"

    # Chaining

    @property
    def required(self) -> SchemaBuilder:
        """Mark the next fragment as required in its parent object."""
        return SchemaBuilder(self._state.merge(required=True))

    def id(self, schema_id: str) -> SchemaBuilder:
        """Set ``$id`` on the next fragment."""
        return SchemaBuilder(self._state.merge(schema_id=schema_id))

    def definitions(self, definitions: Mapping[str, Any]) -> SchemaBuilder:
        """Attach ``definitions`` to the next fragment."""
        return SchemaBuilder(self._state.merge(definitions=definitions))

    # Constructors

    def obj(
        self,
        properties: Mapping[str, PropertyValue] | None = None,
        *,
        title: str | None = None,
        description: str | None = None,
        strict: bool = False,
        dependencies: Mapping[str, Any] | None = None,
        default: Any = _MISSING,
        required: Sequence[str] | None = None,
    ) -> Fragment | Required:
        """Build an object fragment from a property map.

        Property values may be shorthand strings (``"string:required"``), fragments,
        or ``Required`` values such as ``microschema.required.string()``.
        """
        schema: Fragment = {"type": "object", "properties": {}}
        if title:
            schema["title"] = title
        if description:
            schema["description"] = description
        if strict:
            schema["additionalProperties"] = False
        if dependencies:
            schema["dependencies"] = normalize_dependencies(dependencies)
        if default is not _MISSING:
            schema["default"] = default

        required_names: list[str] = []
        if required is not None:
            if isinstance(required, (str, bytes)) or not isinstance(required, Sequence):
                raise InvalidRequiredList(
                    f"'required' must be a list, got {type(required).__name__}"
                )
            required_names.extend(required)

        for name, value in (properties or {}).items():
            fragment, is_required = _resolve_property(value)
            if is_required:
                required_names.append(name)
            schema["properties"][name] = fragment

        if required is not None or required_names:
            schema["required"] = required_names

        return self._state.decorate(schema)

    def strict_obj(
        self, properties: Mapping[str, PropertyValue] | None = None, **options: Any
    ) -> Fragment | Required:
        """Build an object fragment that forbids undeclared properties."""
        options["strict"] = True
        return self.obj(properties, **options)

    def string(
        self,
        *,
        pattern: str | re.Pattern[str] | None = None,
        format: str | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> Fragment | Required:
        schema: Fragment = {"type": "string"}
        if pattern:
            schema["pattern"] = _pattern_source(pattern)
        if format:
            schema["format"] = format
        if min_length is not None:
            schema["minLength"] = min_length
        if max_length is not None:
            schema["maxLength"] = max_length
        return self._state.decorate(schema)

    def number(
        self,
        *,
        min: float | None = None,
        max: float | None = None,
        integer: bool = False,
    ) -> Fragment | Required:
        schema: Fragment = {"type": "integer" if integer else "number"}
        if min is not None:
            schema["minimum"] = min
        if max is not None:
            schema["maximum"] = max
        return self._state.decorate(schema)

    def integer(self, *, min: int | None = None, max: int | None = None) -> Fragment | Required:
        return self.number(min=min, max=max, integer=True)

    def boolean(self) -> Fragment | Required:
        return self._state.decorate({"type": "boolean"})

    def null(self) -> Fragment | Required:
        return self._state.decorate({"type": "null"})

    def enum(self, *values: Any) -> Fragment | Required:
        """Build an enumeration; all values should share one type.

        Accepts either separate arguments or a single list:
        ``enum("error", "warn")`` and ``enum(["error", "warn"])`` are equivalent.
        """
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])
        schema: Fragment = {
            "type": json_type_of(values[0] if values else None),
            "enum": list(values),
        }
        return self._state.decorate(schema)

    def const(self, value: Any) -> Fragment | Required:
        return self._state.decorate({"type": json_type_of(value), "const": value})

    def array_of(
        self,
        item: PropertyValue,
        *,
        min_items: int | None = None,
        max_items: int | None = None,
        unique_items: bool = False,
    ) -> Fragment | Required:
        """Build an array fragment; ``item`` is a type name or a fragment."""
        schema: Fragment = {"type": "array", "items": _to_fragment(item)}
        if min_items is not None:
            schema["minItems"] = min_items
        if max_items is not None:
            schema["maxItems"] = max_items
        if unique_items:
            schema["uniqueItems"] = unique_items
        return self._state.decorate(schema)

    def types(self, *items: PropertyValue) -> Fragment | Required:
        """Merge several fragments into one with a ``type`` union.

        ``types("string", "null")`` gives ``{"type": ["string", "null"]}``. Keys other
        than ``type`` are overwritten by later arguments.
        """
        fragments = [
            parse_shorthand(item).fragment if isinstance(item, str) else _to_fragment(item)
            for item in items
        ]
        return self._state.decorate(merge_fragments(fragments))

    def ref(self, reference: str) -> Fragment | Required:
        return self._state.decorate({"$ref": reference})

    def any_of(self, *items: Any) -> Fragment | Required:
        return self._state.decorate({"anyOf": [_to_fragment(item) for item in _unpack(items)]})

    def one_of(self, *items: Any) -> Fragment | Required:
        return self._state.decorate({"oneOf": [_to_fragment(item) for item in _unpack(items)]})

    def all_of(self, *items: Any) -> Fragment | Required:
        # Shorthand strings are embedded as given.
        return self._state.decorate(
            {"allOf": [_unwrap_required(item) for item in _unpack(items)]}
        )


def _resolve_property(value: PropertyValue) -> tuple[Mapping[str, Any], bool]:
    if isinstance(value, Required):
        fragment, _ = _resolve_property(value.value)
        return fragment, True
    if isinstance(value, str):
        parsed = parse_shorthand(value)
        return parsed.fragment, parsed.required
    return value, False


def _to_fragment(value: Any) -> Any:
    if isinstance(value, Required):
        return value.fragment
    if isinstance(value, str):
        return {"type": value}
    return value


def _unwrap_required(value: Any) -> Any:
    return value.fragment if isinstance(value, Required) else value


def _unpack(items: tuple[Any, ...]) -> Sequence[Any]:
    if items and isinstance(items[0], (list, tuple)):
        return items[0]
    return items


def _pattern_source(pattern: str | re.Pattern[str]) -> str:
    if isinstance(pattern, str):
        return pattern
    # Compiled str patterns always carry re.UNICODE; anything else has no JSON form.
    if pattern.flags & ~re.UNICODE:
        _LOGGER.debug("Rejecting flagged pattern %r", pattern)
        raise UnsupportedPatternFlags(
            f"JSON schema does not support regexp flags: {pattern.pattern!r}"
        )
    return pattern.pattern
