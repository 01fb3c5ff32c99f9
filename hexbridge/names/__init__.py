# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Named-color lookups.

Forward lookups are case-insensitive and fail loudly on unknown keywords.
Reverse lookups fall back to the canonical hex string, since most of the
16.7M hex values have no name.
"""

from __future__ import annotations

from hexbridge.names.table import NAMED_COLORS, reverse_name_table
from hexbridge.schema import HexColor, MissingInputError, UnrecognizedNotationError


def name_to_hex(name: str | None) -> str:
    """
    Look up a CSS color keyword.

    Args:
        name: Keyword in any case, e.g. "RebeccaPurple"

    Returns:
        Canonical hex string like "#663399"

    Raises:
        MissingInputError: If name is empty or None.
        UnrecognizedNotationError: If the keyword is not a CSS color name.
    """
    if name is None or not name.strip():
        raise MissingInputError("No color name to look up")
    try:
        return NAMED_COLORS[name.strip().lower()]
    except KeyError:
        raise UnrecognizedNotationError(f"Unknown color name: {name!r}") from None


def hex_to_name(hex_value: str | HexColor) -> str:
    """
    Find the CSS keyword for a hex color.

    3-digit shorthand is expanded before lookup. Returns the canonical hex
    string itself when no keyword matches.
    """
    color = hex_value if isinstance(hex_value, HexColor) else HexColor.parse(hex_value)
    return reverse_name_table().get(color.hex, color.hex)


__all__ = [
    "NAMED_COLORS",
    "name_to_hex",
    "hex_to_name",
    "reverse_name_table",
]
