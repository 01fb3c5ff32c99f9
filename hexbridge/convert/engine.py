# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Conversion engine.

Every request is normalized to canonical hex first, then expanded into
the requested notation. The engine is stateless; failures are raised as
ColorConversionError subclasses and never logged.
"""

from __future__ import annotations

from typing import Callable

from hexbridge.convert import parsers, serializers
from hexbridge.convert.detect import detect_notation
from hexbridge.schema import (
    HexColor,
    MissingInputError,
    Notation,
    UnknownTargetFormatError,
)


PARSERS: dict[Notation, Callable[[str], HexColor]] = {
    Notation.HEX: parsers.parse_hex,
    Notation.RGB: parsers.parse_rgb,
    Notation.HSL: parsers.parse_hsl,
    Notation.HWB: parsers.parse_hwb,
    Notation.LCH: parsers.parse_lch,
    Notation.OKLCH: parsers.parse_oklch,
    Notation.NAME: parsers.parse_name,
}

SERIALIZERS: dict[Notation, Callable[[HexColor], str]] = {
    Notation.HEX: serializers.format_hex,
    Notation.RGB: serializers.format_rgb,
    Notation.HSL: serializers.format_hsl,
    Notation.HWB: serializers.format_hwb,
    Notation.LCH: serializers.format_lch,
    Notation.OKLCH: serializers.format_oklch,
    Notation.NAME: serializers.format_name,
}


def _target_notation(target: Notation | str) -> Notation:
    try:
        return Notation.coerce(target)
    except ValueError:
        raise UnknownTargetFormatError(f"Unknown target format: {target!r}") from None


def parse_notation(text: str, notation: Notation | str) -> HexColor:
    """Parse text with the parser for one notation, skipping detection."""
    return PARSERS[_target_notation(notation)](text)


def format_notation(color: HexColor, notation: Notation | str) -> str:
    """Render a color with the serializer for one notation."""
    return SERIALIZERS[_target_notation(notation)](color)


def to_hex(text: str | None) -> str:
    """
    Convert any supported color string to canonical hex.

    Args:
        text: e.g. "red", "#ABC", "rgb(0, 255, 0)", "oklch(0.6 0.15 180)"

    Returns:
        Lowercase ``#rrggbb``

    Raises:
        MissingInputError: If text is empty or None.
        UnrecognizedNotationError: If text is not hex, a known function,
            or a color name.
        MalformedNumericPayloadError: If a function has too few numbers or
            a non-numeric token.
    """
    if text is None or not text.strip():
        raise MissingInputError("No color value to convert")
    return PARSERS[detect_notation(text)](text.strip()).hex


def from_hex(hex_value: str | None, target: Notation | str | None = None) -> str:
    """
    Convert a hex color to the target notation.

    The hex value is always validated; when ``target`` is absent it is
    returned unchanged.

    Raises:
        MissingInputError: If hex_value is empty or None.
        UnrecognizedNotationError: If hex_value is not 3 or 6 hex digits.
        UnknownTargetFormatError: If target names no supported notation.
    """
    if hex_value is None or not hex_value.strip():
        raise MissingInputError("No hex value to convert")
    color = HexColor.parse(hex_value)
    if target is None or (isinstance(target, str) and not target.strip()):
        return hex_value
    return SERIALIZERS[_target_notation(target)](color)


def convert(text: str | None, target: Notation | str | None) -> str:
    """Re-express any supported color string in another notation."""
    return from_hex(to_hex(text), target)


def resolve_target(colorspace: Notation | str | None, previous: str | None = None) -> Notation:
    """
    Choose the notation for a value coming back from a hex color picker.

    An explicit colorspace wins; otherwise the notation of the previously
    shown value is kept (hex when there is none).
    """
    if colorspace is not None and not (isinstance(colorspace, str) and not colorspace.strip()):
        return _target_notation(colorspace)
    return detect_notation(previous)
