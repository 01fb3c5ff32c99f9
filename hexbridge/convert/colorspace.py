# Copyright (c) 2026 Hexbridge
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains (all start or end at sRGB in [0, 1]):
    sRGB → HSL / HWB                          (cylindrical, no linearization)
    sRGB → Linear RGB → XYZ (D65) → CIELAB → CIELCH
    sRGB → Linear RGB → LMS → OKLab → OKLCH

References:
- sRGB transfer function: IEC 61966-2-1
- CIELAB: CIE 15:2004
- OKLab: https://bottosson.github.io/posts/oklab/

All functions accept arrays of shape (..., 3) and are pure NumPy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_GAMMA = 2.4


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= SRGB_DECODE_THRESHOLD,
        srgb / SRGB_SLOPE,
        np.power((srgb + 0.055) / 1.055, SRGB_GAMMA)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut input is clipped to [0, 1]
    before the power function and again after.
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        linear <= SRGB_ENCODE_THRESHOLD,
        linear * SRGB_SLOPE,
        1.055 * np.power(linear, 1.0 / SRGB_GAMMA) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Cylindrical sRGB models (HSL, HWB)
# =============================================================================

# Channel offsets (in twelfths of a turn) for R, G, B
_HSL_CHANNEL_OFFSETS = np.array([0.0, 8.0, 4.0], dtype=np.float64)


def _hue_degrees(srgb: NDArray[np.float64]) -> float:
    """Hue of a single sRGB triple in degrees [0, 360); 0 for grays."""
    r, g, b = (float(v) for v in srgb)
    cmax = max(r, g, b)
    delta = cmax - min(r, g, b)
    if delta == 0.0:
        return 0.0
    if cmax == r:
        sixth = (g - b) / delta + (6.0 if g < b else 0.0)
    elif cmax == g:
        sixth = (b - r) / delta + 2.0
    else:
        sixth = (r - g) / delta + 4.0
    return sixth / 6.0 * 360.0


def hsl_to_srgb(h: float, s: float, l: float) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Args:
        h: Hue in degrees (any real; wrapped by the formula)
        s: Saturation [0, 1]
        l: Lightness [0, 1]

    Returns:
        Array of shape (3,) with sRGB values
    """
    k = (_HSL_CHANNEL_OFFSETS + h / 30.0) % 12.0
    a = s * min(l, 1.0 - l)
    srgb = l - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))
    return np.clip(srgb, 0.0, 1.0)


def srgb_to_hsl(srgb: NDArray[np.float64]) -> tuple[float, float, float]:
    """
    Convert a single sRGB triple [0,1] to HSL.

    Returns:
        (H, S, L) with H in degrees [0, 360), S and L in [0, 1]
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    cmax = float(srgb.max())
    cmin = float(srgb.min())
    l = (cmax + cmin) / 2.0
    delta = cmax - cmin
    if delta == 0.0:
        return 0.0, 0.0, l
    s = delta / (2.0 - cmax - cmin) if l > 0.5 else delta / (cmax + cmin)
    return _hue_degrees(srgb), s, l


def hwb_to_srgb(h: float, w: float, b: float) -> NDArray[np.float64]:
    """
    Convert HWB to sRGB [0,1].

    When whiteness + blackness >= 1 the result is the gray
    ``w / (w + b)``; otherwise the pure hue is mixed toward white and black.
    """
    if w + b >= 1.0:
        gray = w / (w + b)
        return np.full(3, gray, dtype=np.float64)
    pure = hsl_to_srgb(h, 1.0, 0.5)
    return pure * (1.0 - w - b) + w


def srgb_to_hwb(srgb: NDArray[np.float64]) -> tuple[float, float, float]:
    """
    Convert a single sRGB triple [0,1] to HWB.

    Returns:
        (H, W, B) with H in degrees [0, 360), W and B in [0, 1]
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return _hue_degrees(srgb), float(srgb.min()), 1.0 - float(srgb.max())


# =============================================================================
# Linear RGB ↔ CIE XYZ ↔ CIELAB
# =============================================================================

# Linear sRGB to XYZ, D65 (IEC 61966-2-1, full precision)
_M_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.07219231536073],
    [0.01933081871559, 0.11919477979462, 0.95053215224966],
], dtype=np.float64)

_M_XYZ_INV = np.linalg.inv(_M_XYZ)

# XYZ is reported with Y normalized to 100
XYZ_SCALE = 100.0

# D65 reference white is the image of linear white (1, 1, 1)
D65_WHITE = _M_XYZ.sum(axis=1) * XYZ_SCALE

CIE_EPSILON = 216.0 / 24389.0   # (6/29)^3
CIE_KAPPA = 24389.0 / 27.0      # (29/3)^3


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65, Y in [0, 100]).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _M_XYZ) * XYZ_SCALE


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65, Y in [0, 100]) to linear RGB."""
    xyz = np.asarray(xyz, dtype=np.float64) / XYZ_SCALE
    return np.einsum('...j,ij->...i', xyz, _M_XYZ_INV)


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > CIE_EPSILON, np.cbrt(t), (CIE_KAPPA * t + 16.0) / 116.0)


def _lab_f_inv(t: NDArray[np.float64]) -> NDArray[np.float64]:
    t3 = t ** 3
    return np.where(t3 > CIE_EPSILON, t3, (116.0 * t - 16.0) / CIE_KAPPA)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIELAB (D65 reference white).

    Args:
        xyz: Array of shape (..., 3) with XYZ values (Y in [0, 100])

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIELAB (D65) to CIE XYZ with Y in [0, 100]."""
    lab = np.asarray(lab, dtype=np.float64)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    return _lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * D65_WHITE


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (signed, for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    lab = np.einsum('...j,ij->...i', lms_cbrt, _M2)

    return lab


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    rgb = np.einsum('...j,ij->...i', lms, _M1_INV)

    return rgb


# =============================================================================
# Cartesian ↔ polar (shared by CIELAB/CIELCH and OKLab/OKLCH)
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a Lab-like triple to cylindrical coordinates.

    Works for both CIELAB and OKLab.

    Args:
        lab: Array of shape (..., 3) with (L, a, b)

    Returns:
        Array of shape (..., 3) with (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a))
    H = np.where(H < 0.0, H + 360.0, H)

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert cylindrical (L, C, H) to a Lab-like triple.

    Args:
        lch: Array of shape (..., 3) with (L, C, H), H in degrees

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ CIELCH / OKLCH (full chains)
# =============================================================================


def srgb_to_cielch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIELCH.

    Full chain: sRGB → Linear RGB → XYZ → CIELAB → CIELCH

    Returns:
        Array of shape (..., 3) with (L, C, H)
        - L: Lightness [0, 100]
        - C: Chroma [0, ~134 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    xyz = linear_rgb_to_xyz(srgb_to_linear(srgb))
    return lab_to_lch(xyz_to_lab(xyz))


def cielch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELCH to sRGB [0,1].

    Full chain: CIELCH → CIELAB → XYZ → Linear RGB → sRGB
    Values are clipped to [0, 1] (gamut mapped).
    """
    xyz = lab_to_xyz(lch_to_lab(lch))
    return linear_to_srgb(xyz_to_linear_rgb(xyz))


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return lab_to_lch(lab)


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)

    Returns:
        Array of shape (..., 3) with sRGB values [0, 1]
        Values are clipped to [0, 1] (gamut mapped)
    """
    lab = lch_to_lab(lch)
    linear = oklab_to_linear_rgb(lab)
    return linear_to_srgb(linear)
