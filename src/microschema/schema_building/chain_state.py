"""Pending chain state carried by derived builders."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any

from microschema.shorthand_parsing import parse_shorthand

Fragment = dict[str, Any]


@dataclass(frozen=True)
class ChainState:
    """Annotations applied to the next fragment a builder produces."""

    required: bool = False
    schema_id: str | None = None
    definitions: Mapping[str, Any] | None = None

    def merge(self, **changes: Any) -> ChainState:
        """Return a new state with the given fields replaced."""
        return replace(self, **changes)

    def decorate(self, fragment: Fragment) -> Fragment | Required:
        """Merge pending annotations into a freshly built fragment."""
        if self.schema_id is not None:
            fragment["$id"] = self.schema_id
        if self.definitions is not None:
            fragment["definitions"] = {
                name: value.fragment if isinstance(value, Required) else value
                for name, value in self.definitions.items()
            }
        if self.required:
            return Required(fragment)
        return fragment


class Required(Mapping[str, Any]):
    """Property value that must be listed in the parent object's ``required``.

    Wraps a shorthand string, a fragment or another ``Required``. Reading it as a
    mapping exposes the wrapped fragment unchanged.
    """

    __slots__ = ("value",)

    def __init__(self, value: PropertyValue) -> None:
        self.value = value

    @property
    def fragment(self) -> Mapping[str, Any]:
        inner = self.value
        while isinstance(inner, Required):
            inner = inner.value
        if isinstance(inner, str):
            return parse_shorthand(inner).fragment
        return inner

    def __getitem__(self, key: str) -> Any:
        return self.fragment[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fragment)

    def __len__(self) -> int:
        return len(self.fragment)

    def __repr__(self) -> str:
        return f"Required({self.value!r})"


PropertyValue = str | Mapping[str, Any] | Required
