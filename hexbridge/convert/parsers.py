# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Parsers: one per notation, each producing a canonical HexColor.

Functional notations share the numeric tokenizer and need at least three
numbers; any extra numbers (a legacy alpha, say) are ignored.
"""

from __future__ import annotations

import numpy as np

from hexbridge.convert.colorspace import (
    cielch_to_srgb,
    hsl_to_srgb,
    hwb_to_srgb,
    oklch_to_srgb,
)
from hexbridge.convert.detect import FUNCTION_NOTATIONS, split_function
from hexbridge.convert.tokenize import NumericToken, tokenize
from hexbridge.names import name_to_hex
from hexbridge.schema import (
    CHANNEL_MAX,
    HexColor,
    MalformedNumericPayloadError,
    MissingInputError,
    Notation,
    UnrecognizedNotationError,
)


REQUIRED_COMPONENTS = 3


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _components(text: str, notation: Notation) -> list[NumericToken]:
    """Tokenize the payload of a functional notation and check its arity."""
    if text is None or not text.strip():
        raise MissingInputError(f"No {notation.value} value to parse")
    parts = split_function(text)
    if parts is None or FUNCTION_NOTATIONS.get(parts[0]) is not notation:
        raise UnrecognizedNotationError(f"Not an {notation.value}() value: {text!r}")
    tokens = tokenize(parts[1])
    if len(tokens) < REQUIRED_COMPONENTS:
        raise MalformedNumericPayloadError(
            f"{notation.value}() needs {REQUIRED_COMPONENTS} numbers, "
            f"got {len(tokens)} in {text!r}"
        )
    return tokens[:REQUIRED_COMPONENTS]


def _fraction(token: NumericToken) -> float:
    """A percentage-valued component as a fraction in [0, 1]; ``%`` is optional."""
    return _clamp(token.value / 100.0, 0.0, 1.0)


def parse_hex(text: str) -> HexColor:
    """Parse ``#rgb`` / ``#rrggbb`` (``#`` optional)."""
    return HexColor.parse(text)


def parse_rgb(text: str) -> HexColor:
    """
    Parse ``rgb(R, G, B)``.

    Channels are in the 0-255 range; a channel written with ``%`` is scaled
    from 0-100. Out-of-range values saturate.
    """
    channels = [
        t.value / 100.0 * CHANNEL_MAX if t.percent else t.value
        for t in _components(text, Notation.RGB)
    ]
    return HexColor.from_channels(channels)


def parse_hsl(text: str) -> HexColor:
    """Parse ``hsl(H, S%, L%)``; H in degrees, S and L in percent."""
    h, s, l = _components(text, Notation.HSL)
    return HexColor.from_unit(hsl_to_srgb(h.value, _fraction(s), _fraction(l)))


def parse_hwb(text: str) -> HexColor:
    """Parse ``hwb(H W% B%)``; H in degrees, W and B in percent."""
    h, w, b = _components(text, Notation.HWB)
    return HexColor.from_unit(hwb_to_srgb(h.value, _fraction(w), _fraction(b)))


def parse_lch(text: str) -> HexColor:
    """
    Parse CIE ``lch(L% C H)``.

    L is on the 0-100 scale with or without ``%``; negative chroma is
    treated as zero.
    """
    L, C, H = _components(text, Notation.LCH)
    lch = np.array([
        _clamp(L.value, 0.0, 100.0),
        max(C.value, 0.0),
        H.value,
    ], dtype=np.float64)
    return HexColor.from_unit(cielch_to_srgb(lch))


def parse_oklch(text: str) -> HexColor:
    """
    Parse ``oklch(L C H)``.

    A bare L is already in [0, 1]; an L written with ``%`` is divided by
    100, so ``oklch(60% 0.15 180)`` and ``oklch(0.6 0.15 180)`` agree.
    """
    L, C, H = _components(text, Notation.OKLCH)
    lightness = L.value / 100.0 if L.percent else L.value
    lch = np.array([
        _clamp(lightness, 0.0, 1.0),
        max(C.value, 0.0),
        H.value,
    ], dtype=np.float64)
    return HexColor.from_unit(oklch_to_srgb(lch))


def parse_name(text: str) -> HexColor:
    """
    Parse a CSS color keyword.

    A bare 3- or 6-digit hex string that is not a keyword is also
    accepted, since the ``#`` is optional on hex input.
    """
    try:
        return HexColor.parse(name_to_hex(text))
    except UnrecognizedNotationError:
        try:
            return HexColor.parse(text)
        except UnrecognizedNotationError:
            raise UnrecognizedNotationError(
                f"Not a color name, hex value, or supported color function: {text!r}"
            ) from None
