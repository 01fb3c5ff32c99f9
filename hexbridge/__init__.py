# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Hexbridge -- CSS color notation converter.

Converts color strings between hex, rgb(), hsl(), hwb(), CIE lch(),
oklch() and CSS named colors, with canonical hex as the interchange form.

Quick start::

    from hexbridge import to_hex, from_hex

    to_hex("rebeccapurple")        # "#663399"
    from_hex("#ff0000", "hsl")     # "hsl(0, 100%, 50%)"
    from_hex("#ff0000", "oklch")   # "oklch(0.628 0.258 29.23)"
"""

from __future__ import annotations

__version__ = "1.0.0"

from hexbridge.convert import (
    convert,
    detect_notation,
    format_notation,
    from_hex,
    parse_notation,
    resolve_target,
    to_hex,
)
from hexbridge.names import NAMED_COLORS, hex_to_name, name_to_hex, reverse_name_table
from hexbridge.schema import (
    ColorConversionError,
    HexColor,
    MalformedNumericPayloadError,
    MissingInputError,
    Notation,
    UnknownTargetFormatError,
    UnrecognizedNotationError,
)

__all__ = [
    # Core API
    "to_hex",
    "from_hex",
    "convert",
    "detect_notation",
    "resolve_target",
    "parse_notation",
    "format_notation",
    # Named colors
    "NAMED_COLORS",
    "name_to_hex",
    "hex_to_name",
    "reverse_name_table",
    # Types
    "HexColor",
    "Notation",
    # Errors
    "ColorConversionError",
    "MissingInputError",
    "UnrecognizedNotationError",
    "MalformedNumericPayloadError",
    "UnknownTargetFormatError",
    # Version
    "__version__",
]
