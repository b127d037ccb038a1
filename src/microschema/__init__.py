"""Concise builders for JSON Schema documents."""

import logging

from .schema_building import (
    ChainState,
    ConfigurationError,
    InvalidRequiredList,
    Required,
    SchemaBuilder,
    UnsupportedPatternFlags,
)
from .shorthand_parsing import ParsedShorthand, parse_shorthand

logging.getLogger(__name__).addHandler(logging.NullHandler())

microschema = SchemaBuilder()

__all__ = [
    "ChainState",
    "ConfigurationError",
    "InvalidRequiredList",
    "ParsedShorthand",
    "Required",
    "SchemaBuilder",
    "UnsupportedPatternFlags",
    "microschema",
    "parse_shorthand",
]
