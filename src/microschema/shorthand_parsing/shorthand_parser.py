"""Shorthand type description parsing."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)

_LENGTH_OPTION = re.compile(r"^\d+$")


@dataclass(frozen=True)
class ParsedShorthand:
    """Fragment described by a shorthand string and whether it was marked required."""

    fragment: dict[str, Any]
    required: bool


def parse_shorthand(text: str) -> ParsedShorthand:
    """Parse ``"type[:option]*"`` into a fragment.

    Supported options are ``required``, ``uri`` (``format: uri``) and a positive
    integer ``n`` (``minLength: 1`` and ``maxLength: n``). Unknown options are
    ignored.
    """
    schema_type, *options = text.split(":")
    fragment: dict[str, Any] = {"type": schema_type}
    required = False

    for option in options:
        if option == "required":
            required = True
        elif option == "uri":
            fragment["format"] = "uri"
        elif _LENGTH_OPTION.match(option) and int(option) > 0:
            fragment["minLength"] = 1
            fragment["maxLength"] = int(option)
        else:
            _LOGGER.debug("Ignoring unknown shorthand option %r in %r", option, text)

    return ParsedShorthand(fragment=fragment, required=required)
