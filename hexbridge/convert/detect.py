# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""Notation detection for color strings."""

from __future__ import annotations

import re

from hexbridge.schema import Notation


# Leading function name followed by an opening parenthesis
_FUNCTION_RE = re.compile(r"([a-z]+)\s*\(", re.IGNORECASE | re.ASCII)

# Whole-name match, so "oklch(" can never be read as "lch("
FUNCTION_NOTATIONS: dict[str, Notation] = {
    "rgb": Notation.RGB,
    "rgba": Notation.RGB,
    "hsl": Notation.HSL,
    "hsla": Notation.HSL,
    "hwb": Notation.HWB,
    "lch": Notation.LCH,
    "oklch": Notation.OKLCH,
}


def split_function(text: str) -> tuple[str, str] | None:
    """Split ``"name(payload)"`` into (lowercase name, payload) or return None."""
    stripped = text.strip()
    m = _FUNCTION_RE.match(stripped)
    if not m:
        return None
    return m.group(1).lower(), stripped[m.end() - 1:]


def detect_notation(text: str | None) -> Notation:
    """
    Decide which grammar a color string follows.

    ``#...`` is hex; a known function name followed by ``(`` selects that
    function's notation; everything else is treated as a color name.
    Empty input detects as hex.
    """
    if not text or not text.strip():
        return Notation.HEX
    if text.strip().startswith("#"):
        return Notation.HEX
    parts = split_function(text)
    if parts is not None and parts[0] in FUNCTION_NOTATIONS:
        return FUNCTION_NOTATIONS[parts[0]]
    return Notation.NAME
