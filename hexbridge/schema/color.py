# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Canonical color types.

Design principles:
- Immutable: HexColor is a frozen dataclass
- Canonical: every conversion passes through 24-bit sRGB hex
- Quantized once: hex is the only lossy boundary (8 bits per channel)

Notation tags:
    hex    #rrggbb / #rgb
    rgb    rgb(R, G, B)
    hsl    hsl(H, S%, L%)
    hwb    hwb(H W% B%)
    lch    lch(L% C H)       CIELCH, D65
    oklch  oklch(L C H)      OKLCH
    name   CSS color keyword
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from hexbridge.schema.errors import MissingInputError, UnrecognizedNotationError


# =============================================================================
# Notation
# =============================================================================


class Notation(Enum):
    """Textual grammar a color string follows."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    LCH = "lch"
    OKLCH = "oklch"
    NAME = "name"

    @classmethod
    def coerce(cls, value: Notation | str) -> Notation:
        """Accept a Notation or its case-insensitive string value.

        Raises:
            ValueError: If the string names no notation.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# =============================================================================
# HexColor
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)

CHANNEL_MAX = 255


def _quantize(value: float) -> int:
    """Round half up and saturate into [0, 255]."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return CHANNEL_MAX if value > 0 else 0
    return max(0, min(CHANNEL_MAX, math.floor(value + 0.5)))


@dataclass(frozen=True, slots=True)
class HexColor:
    """
    A 24-bit sRGB color, the canonical interchange value.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are 8-bit integers."""
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= CHANNEL_MAX:
                raise ValueError(f"Channel must be an integer 0-255, got {channel!r}")

    @property
    def hex(self) -> str:
        """Canonical lowercase ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.hex

    def to_unit(self) -> np.ndarray:
        """sRGB channels normalized to [0, 1] as a float64 array of shape (3,)."""
        return np.array([self.r, self.g, self.b], dtype=np.float64) / CHANNEL_MAX

    @classmethod
    def parse(cls, text: str | None) -> HexColor:
        """
        Parse a 3- or 6-digit hex string; the leading ``#`` is optional.

        Shorthand is expanded by digit duplication (``#abc`` -> ``#aabbcc``).

        Raises:
            MissingInputError: If text is empty or None.
            UnrecognizedNotationError: If text is not 3 or 6 hex digits.
        """
        if text is None or not text.strip():
            raise MissingInputError("No hex value to parse")
        m = _HEX_RE.fullmatch(text.strip())
        if not m:
            raise UnrecognizedNotationError(f"Not a 3- or 6-digit hex color: {text!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    @classmethod
    def from_channels(cls, rgb: ArrayLike) -> HexColor:
        """Build from channels in the 0-255 display range, rounding and clamping."""
        r, g, b = (float(v) for v in np.asarray(rgb, dtype=np.float64))
        return cls(r=_quantize(r), g=_quantize(g), b=_quantize(b))

    @classmethod
    def from_unit(cls, srgb: ArrayLike) -> HexColor:
        """Build from normalized sRGB channels in [0, 1], rounding and clamping."""
        return cls.from_channels(np.asarray(srgb, dtype=np.float64) * CHANNEL_MAX)
