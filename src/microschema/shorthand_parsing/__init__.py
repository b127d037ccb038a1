"""Shorthand parsing exports."""

from .shorthand_parser import ParsedShorthand, parse_shorthand

__all__ = [
    "ParsedShorthand",
    "parse_shorthand",
]
