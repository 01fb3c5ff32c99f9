# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Serializers: one per notation, each rendering a HexColor as text.

Output formats:
    hex    #rrggbb
    rgb    rgb(R, G, B)            integers
    hsl    hsl(H, S%, L%)          integers
    hwb    hwb(H W% B%)            integers, space-separated
    lch    lch(L% C H)             L 2 dp, C 3 dp, H 2 dp
    oklch  oklch(L C H)            L 3 dp, C 3 dp, H 2 dp
    name   keyword, or #rrggbb when the color has no name
"""

from __future__ import annotations

import math

from hexbridge.convert.colorspace import (
    srgb_to_cielch,
    srgb_to_hsl,
    srgb_to_hwb,
    srgb_to_oklch,
)
from hexbridge.names import hex_to_name
from hexbridge.schema import HexColor


# Decimal places for (L, C, H)
LCH_PRECISION = (2, 3, 2)
OKLCH_PRECISION = (3, 3, 2)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _degrees(value: float) -> int:
    """Round a hue to whole degrees in [0, 360)."""
    return _round_half_up(value) % 360


def _percent(fraction: float) -> int:
    return _round_half_up(fraction * 100.0)


def _hue_fixed(value: float, places: int) -> str:
    """Fixed-point hue wrapped into [0, 360) after rounding."""
    return _fixed(round(value, places) % 360.0, places)


def _fixed(value: float, places: int) -> str:
    """Fixed-point text without a negative zero (``-0.00``)."""
    return f"{round(value, places) + 0.0:.{places}f}"


def format_hex(color: HexColor) -> str:
    return color.hex


def format_rgb(color: HexColor) -> str:
    return f"rgb({color.r}, {color.g}, {color.b})"


def format_hsl(color: HexColor) -> str:
    h, s, l = srgb_to_hsl(color.to_unit())
    return f"hsl({_degrees(h)}, {_percent(s)}%, {_percent(l)}%)"


def format_hwb(color: HexColor) -> str:
    h, w, b = srgb_to_hwb(color.to_unit())
    return f"hwb({_degrees(h)} {_percent(w)}% {_percent(b)}%)"


def format_lch(color: HexColor) -> str:
    L, C, H = (float(v) for v in srgb_to_cielch(color.to_unit()))
    pl, pc, ph = LCH_PRECISION
    return f"lch({_fixed(L, pl)}% {_fixed(C, pc)} {_hue_fixed(H, ph)})"


def format_oklch(color: HexColor) -> str:
    L, C, H = (float(v) for v in srgb_to_oklch(color.to_unit()))
    pl, pc, ph = OKLCH_PRECISION
    return f"oklch({_fixed(L, pl)} {_fixed(C, pc)} {_hue_fixed(H, ph)})"


def format_name(color: HexColor) -> str:
    return hex_to_name(color)
