# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Schema definitions for color conversion.

HexColor is immutable (frozen dataclass). Notation is a closed enum:
every member has exactly one parser and one serializer.
"""

from hexbridge.schema.color import CHANNEL_MAX, HexColor, Notation
from hexbridge.schema.errors import (
    ColorConversionError,
    MalformedNumericPayloadError,
    MissingInputError,
    UnknownTargetFormatError,
    UnrecognizedNotationError,
)

__all__ = [
    # Core types
    "HexColor",
    "Notation",
    "CHANNEL_MAX",
    # Errors
    "ColorConversionError",
    "MissingInputError",
    "UnrecognizedNotationError",
    "MalformedNumericPayloadError",
    "UnknownTargetFormatError",
]
