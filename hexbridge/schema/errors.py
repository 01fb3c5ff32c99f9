# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Error taxonomy for color conversion.

Every failure is raised to the caller; the engine never substitutes a
default value and never logs. All errors are ``ValueError`` subclasses so
callers that only care about "bad color input" can catch one type.
"""

from __future__ import annotations


class ColorConversionError(ValueError):
    """Base class for every conversion failure."""


class MissingInputError(ColorConversionError):
    """An empty or absent string was given where a color value is required."""


class UnrecognizedNotationError(ColorConversionError):
    """Input is not hex, not a known function, and not a named color."""


class MalformedNumericPayloadError(ColorConversionError):
    """A functional notation has too few numbers or a non-numeric token."""


class UnknownTargetFormatError(ColorConversionError):
    """Serialization was requested into a notation the engine does not implement."""
