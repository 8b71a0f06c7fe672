# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Color codec: hex ↔ RGB ↔ OKLCH.

Conversion chain: sRGB → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

The array functions accept shape (..., 3) and are pure NumPy.
The hex/RGB/HSL functions are the scalar boundary used by callers.
"""

from __future__ import annotations

import colorsys
import re
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tonewheel.errors import InvalidColorFormat
from tonewheel.schema import ACHROMATIC_CHROMA, HSLColor, OKLCHColor, RGBColor


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-range input is clipped, so callers
    that care about gamut must compress chroma before getting here.
    """
    linear = np.asarray(linear, dtype=np.float64)
    linear_safe = np.clip(linear, 0.0, 1.0)
    return np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )


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

    # Cube root (signed, so out-of-gamut input stays finite)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB (unclipped).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values, possibly outside [0, 1]
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H), H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # Float modulo of a tiny negative angle lands on 360.0
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H), H in degrees
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH
    """
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return oklab_to_oklch(lab)


def oklch_to_linear_rgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLCH to linear RGB without clipping (used for gamut tests)."""
    return oklab_to_linear_rgb(oklch_to_oklab(lch))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB.
    Values are clipped to [0, 1]; use gamut_compress first to keep hue.
    """
    return linear_to_srgb(oklch_to_linear_rgb(lch))


def srgb_uint8_to_oklch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB values [0,255] to OKLCH.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values [0, 255]
    """
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return srgb_to_oklch(srgb_float)


def wrap_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    hue = float(hue) % 360.0
    return 0.0 if hue >= 360.0 else hue


# =============================================================================
# Hex ↔ RGB (interchange)
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a hex color string.

    Accepts exactly six hex digits with an optional leading ``#``,
    case-insensitive. Anything else raises InvalidColorFormat.
    """
    m = _HEX_RE.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if m is None:
        raise InvalidColorFormat(f"Invalid hex color: {hex_color!r}")
    return RGBColor(
        r=int(m.group(1), 16),
        g=int(m.group(2), 16),
        b=int(m.group(3), 16),
    )


def rgb_to_hex(rgb: Union[RGBColor, Sequence[float]]) -> str:
    """
    Encode an RGB triple as lowercase ``#rrggbb``.

    Channels are rounded to the nearest integer and clamped to [0, 255],
    so float triples from legacy callers encode safely.
    """
    if isinstance(rgb, RGBColor):
        channels = rgb.to_tuple()
    else:
        channels = tuple(rgb)
        if len(channels) != 3:
            raise ValueError(f"RGB triple must have 3 channels, got {len(channels)}")
    r, g, b = (min(255, max(0, int(round(float(v))))) for v in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(hex_color: str) -> str:
    """Validate a hex color and return its canonical ``#rrggbb`` form."""
    return rgb_to_hex(hex_to_rgb(hex_color))


# =============================================================================
# Hex ↔ OKLCH (perceptual)
# =============================================================================


def hex_to_oklch(hex_color: str) -> OKLCHColor:
    """
    Convert a hex color string to OKLCH.

    Args:
        hex_color: Hex string like "#3b82f6" or "3B82F6"

    Returns:
        OKLCHColor, with H=None when chroma is below ACHROMATIC_CHROMA

    Raises:
        InvalidColorFormat: If the string is not a 6-digit hex color
    """
    rgb = hex_to_rgb(hex_color)
    lch = srgb_uint8_to_oklch(np.array(rgb.to_tuple(), dtype=np.uint8))

    L, C, H = float(lch[0]), float(lch[1]), float(lch[2])
    # White decodes a hair above 1.0
    L = min(max(L, 0.0), 1.0)

    if C < ACHROMATIC_CHROMA:
        return OKLCHColor(L=L, C=C, H=None)
    return OKLCHColor(L=L, C=C, H=H)


def oklch_to_hex(L: float, C: float, H: Optional[float]) -> str:
    """
    Convert OKLCH values to a hex color string.

    Colors outside the sRGB gamut are gamut-mapped by reducing chroma at
    constant lightness and hue, never by wrapping or per-channel overflow.

    Args:
        L: Lightness [0, 1]
        C: Chroma [0, ~0.4]
        H: Hue in degrees, or None for achromatic

    Returns:
        Lowercase hex string like "#3b82f6"
    """
    from tonewheel.generate.gamut import gamut_compress

    L, C, H = gamut_compress(L, C, H)
    lch = np.array([L, C, 0.0 if H is None else H], dtype=np.float64)
    srgb = oklch_to_srgb(lch)

    r, g, b = np.clip((srgb * 255).round(), 0, 255).astype(int)
    return f"#{r:02x}{g:02x}{b:02x}"


# =============================================================================
# Legacy HSL (interchange only)
# =============================================================================


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """
    Convert RGB to legacy HSL (h in degrees, s and l in percent).

    Not used by the generators: equal steps in HSL are not equal
    perceived steps.
    """
    h, l, s = colorsys.rgb_to_hls(rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0)
    return HSLColor(h=h * 360.0, s=min(100.0, s * 100.0), l=min(100.0, l * 100.0))


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert legacy HSL back to 8-bit RGB."""
    r, g, b = colorsys.hls_to_rgb((hsl.h % 360.0) / 360.0, hsl.l / 100.0, hsl.s / 100.0)
    return RGBColor(
        r=min(255, max(0, round(r * 255))),
        g=min(255, max(0, round(g * 255))),
        b=min(255, max(0, round(b * 255))),
    )
