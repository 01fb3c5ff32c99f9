# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Numeric tokenizer for functional color notations.

Scans the payload of ``rgb(...)``, ``hsl(...)`` and friends once, left to
right, and emits each number it finds. Separators (whitespace, ``,``,
``/``, parentheses) and the ``deg`` angle unit are skipped; a ``%`` sign
directly after a number is recorded on the token. Anything else is a
malformed payload.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexbridge.schema.errors import MalformedNumericPayloadError


_SEPARATORS = frozenset(" \t\r\n\f\v,/()")
_ANGLE_UNIT = "deg"


@dataclass(frozen=True, slots=True)
class NumericToken:
    """
    A number read from a color payload.

    Attributes:
        value: The parsed number (sign included)
        percent: True if the number was written with a trailing ``%``
    """
    value: float
    percent: bool = False


def _starts_number(payload: str, i: int) -> bool:
    """True if a number (optionally signed, optionally ``.5`` style) begins at i."""
    n = len(payload)
    if i < n and payload[i] in "+-":
        i += 1
    if i < n and payload[i].isdigit():
        return True
    return i + 1 < n and payload[i] == "." and payload[i + 1].isdigit()


def tokenize(payload: str) -> list[NumericToken]:
    """
    Extract every numeric token from a functional-notation payload.

    Args:
        payload: Text after the function name, e.g. ``"(255, 0, 0)"``

    Returns:
        Tokens in left-to-right order (may be empty)

    Raises:
        MalformedNumericPayloadError: On any character that is not part of
            a number, a separator, or the ``deg`` unit.
    """
    tokens: list[NumericToken] = []
    n = len(payload)
    i = 0
    while i < n:
        ch = payload[i]
        if ch in _SEPARATORS:
            i += 1
            continue
        if payload[i:i + len(_ANGLE_UNIT)].lower() == _ANGLE_UNIT:
            i += len(_ANGLE_UNIT)
            continue
        if not _starts_number(payload, i):
            raise MalformedNumericPayloadError(
                f"Unexpected character {ch!r} at position {i} in {payload!r}"
            )

        start = i
        if payload[i] in "+-":
            i += 1
        while i < n and payload[i].isdigit():
            i += 1
        if i < n and payload[i] == ".":
            i += 1
            while i < n and payload[i].isdigit():
                i += 1
        text = payload[start:i]
        if i < n and payload[i] == ".":
            raise MalformedNumericPayloadError(
                f"Number {text!r} followed by a second decimal point in {payload!r}"
            )

        percent = i < n and payload[i] == "%"
        if percent:
            i += 1
        value = float(text)
        if not math.isfinite(value):
            raise MalformedNumericPayloadError(
                f"Number starting {text[:20]!r} is out of range"
            )
        tokens.append(NumericToken(value=value, percent=percent))

    return tokens
