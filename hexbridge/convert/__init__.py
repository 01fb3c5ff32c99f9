# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Conversion core for Hexbridge.

Parsers and serializers for each notation, built on pure NumPy color
space transforms. Canonical hex is the interchange form.
"""

from hexbridge.convert.detect import detect_notation
from hexbridge.convert.engine import (
    convert,
    format_notation,
    from_hex,
    parse_notation,
    resolve_target,
    to_hex,
)

__all__ = [
    "to_hex",
    "from_hex",
    "convert",
    "detect_notation",
    "resolve_target",
    "parse_notation",
    "format_notation",
]
