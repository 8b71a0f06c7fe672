# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
sRGB gamut estimation in OKLCH.

For a given lightness and hue, only chroma up to some bound stays
displayable. The bound is largest in the mid-lightness band and
shrinks to zero at black and white.

The bound is found by bisection against the linear-RGB cube, so it
follows the true sRGB boundary rather than a fitted curve. Every
generator clamps every new chroma through clamp_chroma().
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from tonewheel.generate.colorspace import oklch_to_linear_rgb, wrap_hue


# Linear-RGB slack accepted as "inside" (covers float error on exact primaries)
GAMUT_EPSILON = 1e-6

# Bisection bracket: no sRGB color has OKLCH chroma above ~0.33
_CHROMA_CEILING = 0.5
_BISECTION_STEPS = 24


def _in_gamut_mask(lch: NDArray[np.float64], tol: float) -> NDArray[np.bool_]:
    rgb = oklch_to_linear_rgb(lch)
    return np.all((rgb >= -tol) & (rgb <= 1.0 + tol), axis=-1)


def max_chroma_for_lh(
    L: NDArray[np.float64],
    H: NDArray[np.float64],
    *,
    steps: int = _BISECTION_STEPS,
) -> NDArray[np.float64]:
    """
    Vectorized maximum in-gamut chroma for arrays of lightness and hue.

    Args:
        L: Lightness values [0, 1] (broadcast against H)
        H: Hue values in degrees
        steps: Bisection iterations (24 gives ~3e-8 precision)

    Returns:
        Array of chroma bounds; 0.0 where L is at or beyond black/white
    """
    L, H = np.broadcast_arrays(
        np.asarray(L, dtype=np.float64),
        np.asarray(H, dtype=np.float64),
    )
    lo = np.zeros(L.shape, dtype=np.float64)
    hi = np.full(L.shape, _CHROMA_CEILING, dtype=np.float64)

    for _ in range(steps):
        mid = (lo + hi) / 2.0
        inside = _in_gamut_mask(np.stack([L, mid, H], axis=-1), GAMUT_EPSILON)
        lo = np.where(inside, mid, lo)
        hi = np.where(inside, hi, mid)

    return np.where((L <= 0.0) | (L >= 1.0), 0.0, lo)


def max_chroma(lightness: float, hue: Optional[float]) -> float:
    """
    Upper bound on chroma that stays inside sRGB at this lightness and hue.

    Args:
        lightness: OKLCH lightness [0, 1]
        hue: Hue in degrees, or None for achromatic colors

    Returns:
        Chroma bound; 0.0 for an undefined hue
    """
    if hue is None:
        return 0.0
    return float(max_chroma_for_lh(np.float64(lightness), np.float64(hue)))


def clamp_chroma(lightness: float, hue: Optional[float], candidate: float) -> float:
    """Clamp a candidate chroma into [0, max_chroma(lightness, hue)]."""
    return min(max_chroma(lightness, hue), max(float(candidate), 0.0))


def is_in_gamut(L: float, C: float, H: Optional[float], tol: float = GAMUT_EPSILON) -> bool:
    """True if the OKLCH color maps into the sRGB cube (within tol)."""
    lch = np.array([L, C if H is not None else 0.0, H or 0.0], dtype=np.float64)
    return bool(_in_gamut_mask(lch, tol))


def gamut_compress(
    L: float,
    C: float,
    H: Optional[float],
) -> tuple[float, float, Optional[float]]:
    """
    Map an OKLCH color into sRGB by reducing chroma.

    Lightness is clamped to [0, 1] and hue is kept; in-gamut colors pass
    through unchanged. A missing hue means a gray, so chroma becomes 0.

    Returns:
        (L, C, H) tuple that encodes without channel clipping
    """
    L = min(max(float(L), 0.0), 1.0)
    C = max(float(C), 0.0)
    if H is None:
        return L, 0.0, None

    H = wrap_hue(H)
    if is_in_gamut(L, C, H):
        return L, C, H
    return L, max_chroma(L, H), H
