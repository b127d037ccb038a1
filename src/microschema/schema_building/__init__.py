"""Schema building exports."""

from .build_errors import ConfigurationError, InvalidRequiredList, UnsupportedPatternFlags
from .chain_state import ChainState, Fragment, PropertyValue, Required
from .fragment_builder import SchemaBuilder
from .type_merging import json_type_of, merge_fragments, normalize_dependencies

__all__ = [
    "ChainState",
    "ConfigurationError",
    "Fragment",
    "InvalidRequiredList",
    "PropertyValue",
    "Required",
    "SchemaBuilder",
    "UnsupportedPatternFlags",
    "json_type_of",
    "merge_fragments",
    "normalize_dependencies",
]
