# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Palette generation from a single seed color.

Each color-theory scheme is a small rule mapping the requested palette
size to a list of hue offsets. Offsets are applied to the seed hue in
OKLCH, keeping the seed lightness and clamping chroma to the gamut at
the new hue. Monochromatic palettes vary lightness and chroma instead.

The seed string is always returned as element 0 untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from tonewheel.errors import InvalidParameter, ensure_int
from tonewheel.schema import ColorScheme, OKLCHColor
from tonewheel.generate.colorspace import hex_to_oklch, wrap_hue
from tonewheel.generate.gamut import clamp_chroma, max_chroma

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteConfig:
    """Tunable constants for palette generation."""

    # Hue advance used when a scheme runs out of offsets
    fill_hue_step: float = 30.0

    # Spacing between neighbours in an analogous fan
    analogous_step: float = 30.0

    # Monochromatic lightness band: full width at mid-gray, narrower
    # toward black/white, always inside [min, max]
    mono_lightness_width: float = 0.6
    mono_lightness_min: float = 0.15
    mono_lightness_max: float = 0.95

    # Monochromatic chroma band as multiples of the seed chroma
    mono_chroma_low: float = 0.3
    mono_chroma_high: float = 1.5

    # extend_palette() keeps added colors inside these bounds
    extend_lightness_min: float = 0.2
    extend_lightness_max: float = 0.9
    extend_chroma_max: float = 0.3


# =============================================================================
# Scheme Rules
# =============================================================================

_OffsetRule = Callable[[int, PaletteConfig], tuple[float, ...]]


def _complementary(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    return (180.0,)


def _dichromatic(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    return (180.0,) if count > 1 else ()


def _split_complementary(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    return (150.0, 210.0)


def _triadic(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    if count >= 3:
        return (120.0, 240.0)
    if count == 2:
        return (120.0,)
    return ()


def _tetradic(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    return (90.0, 180.0, 270.0)[:max(0, min(3, count - 1))]


def _analogous(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    """
    Fan of count-1 neighbours 30° apart around the seed.

    Offsets start at -floor((count-1)/2) steps and climb one step at a
    time. count=5 gives (-60, -30, 0, +30).
    """
    n = max(0, count - 1)
    return tuple((k - n // 2) * cfg.analogous_step for k in range(n))


def _monochromatic(count: int, cfg: PaletteConfig) -> tuple[float, ...]:
    return ()


_SCHEME_RULES: dict[ColorScheme, _OffsetRule] = {
    ColorScheme.DICHROMATIC: _dichromatic,
    ColorScheme.COMPLEMENTARY: _complementary,
    ColorScheme.SPLIT_COMPLEMENTARY: _split_complementary,
    ColorScheme.TRIADIC: _triadic,
    ColorScheme.TETRADIC: _tetradic,
    ColorScheme.ANALOGOUS: _analogous,
    ColorScheme.MONOCHROMATIC: _monochromatic,
}


def scheme_offsets(
    scheme: Union[ColorScheme, str],
    count: int,
    config: Optional[PaletteConfig] = None,
) -> tuple[float, ...]:
    """
    Hue offsets (degrees) a scheme contributes for a palette of `count`.

    Unrecognised scheme tags resolve to the triadic rule.
    """
    cfg = config or PaletteConfig()
    return _SCHEME_RULES[ColorScheme.parse(scheme)](ensure_int(count, "count"), cfg)


# =============================================================================
# Color Derivation
# =============================================================================


def _rotate(color: OKLCHColor, offset: float) -> OKLCHColor:
    """Rotate hue by `offset`, keep lightness, clamp chroma at the new hue."""
    if color.H is None:
        return OKLCHColor(L=color.L, C=0.0, H=None)
    hue = wrap_hue(color.H + offset)
    return OKLCHColor(L=color.L, C=clamp_chroma(color.L, hue, color.C), H=hue)


def _hue_rotations(
    base: OKLCHColor,
    offsets: Sequence[float],
    n: int,
    cfg: PaletteConfig,
) -> list[OKLCHColor]:
    """Apply scheme offsets, then keep advancing the last hue until n colors."""
    derived = [_rotate(base, offset) for offset in offsets[:n]]

    last = derived[-1] if derived else base
    while len(derived) < n:
        last = _rotate(last, cfg.fill_hue_step)
        derived.append(last)

    return derived


def _tonal_variants(base: OKLCHColor, n: int, cfg: PaletteConfig) -> list[OKLCHColor]:
    """
    Monochromatic variants: lightness sweeps up, chroma rises then falls.

    The lightness band is centred on the seed and narrows as the seed
    approaches black or white. Chroma peaks at the middle of the sweep.
    """
    if n <= 0:
        return []

    half_width = cfg.mono_lightness_width * (1.0 - abs(base.L - 0.5)) / 2.0
    l_min = max(cfg.mono_lightness_min, base.L - half_width)
    l_max = min(cfg.mono_lightness_max, base.L + half_width)

    if base.H is None:
        c_min = c_max = 0.0
    else:
        c_min = cfg.mono_chroma_low * base.C
        c_max = min(cfg.mono_chroma_high * base.C, max_chroma(base.L, base.H))

    variants = []
    for i in range(1, n + 1):
        progress = i / n
        lightness = l_min + (l_max - l_min) * progress
        curve = 1.0 - 2.0 * abs(progress - 0.5)
        chroma = c_min + (c_max - c_min) * curve
        if base.H is None:
            variants.append(OKLCHColor(L=lightness, C=0.0, H=None))
        else:
            variants.append(OKLCHColor(
                L=lightness,
                C=clamp_chroma(lightness, base.H, chroma),
                H=base.H,
            ))
    return variants


# =============================================================================
# Public API
# =============================================================================


def generate_palette(
    seed: str,
    scheme: Union[ColorScheme, str] = ColorScheme.TRIADIC,
    count: int = 5,
    *,
    config: Optional[PaletteConfig] = None,
) -> tuple[str, ...]:
    """
    Generate a palette of `count` hex colors from a seed color.

    Args:
        seed: Seed hex color; returned unchanged as element 0
        scheme: ColorScheme or its string tag; unknown tags act as triadic
        count: Palette size. Values below 1 are clamped to 1 (seed only)
        config: Palette constants (uses defaults if None)

    Returns:
        Tuple of exactly max(count, 1) hex strings, seed first

    Raises:
        InvalidColorFormat: If seed is not a 6-digit hex color
        InvalidParameter: If count is not an integer

    Example:
        >>> palette = generate_palette("#3b82f6", "triadic", 5)
        >>> palette[0], len(palette)
        ('#3b82f6', 5)
    """
    cfg = config or PaletteConfig()
    count = ensure_int(count, "count")
    base = hex_to_oklch(seed)

    if count < 1:
        logger.warning("Palette count %d is below 1, returning the seed only", count)
        count = 1

    resolved = ColorScheme.parse(scheme)
    n = count - 1

    if resolved is ColorScheme.MONOCHROMATIC:
        derived = _tonal_variants(base, n, cfg)
    else:
        offsets = _SCHEME_RULES[resolved](count, cfg)
        derived = _hue_rotations(base, offsets, n, cfg)

    palette = (seed,) + tuple(color.hex for color in derived)
    return palette[:count]


def extend_palette(
    palette: Sequence[str],
    count: int = 1,
    *,
    config: Optional[PaletteConfig] = None,
) -> tuple[str, ...]:
    """
    Append `count` colors, each a +30° hue step from the previous last color.

    Added colors keep lightness inside [0.2, 0.9] and chroma below 0.3
    (then clamped to the gamut), so repeated extension of an extreme
    color still yields usable swatches. Existing entries are kept as-is.

    Raises:
        InvalidParameter: If palette is empty or count is negative
        InvalidColorFormat: If the last palette entry is not a hex color
    """
    cfg = config or PaletteConfig()
    count = ensure_int(count, "count")
    if not palette:
        raise InvalidParameter("Cannot extend an empty palette")
    if count < 0:
        raise InvalidParameter(f"count must be >= 0, got {count}")

    last = hex_to_oklch(palette[-1])
    added = []
    for _ in range(count):
        lightness = min(max(last.L, cfg.extend_lightness_min), cfg.extend_lightness_max)
        if last.H is None:
            last = OKLCHColor(L=lightness, C=0.0, H=None)
        else:
            hue = wrap_hue(last.H + cfg.fill_hue_step)
            chroma = min(last.C, cfg.extend_chroma_max)
            last = OKLCHColor(L=lightness, C=clamp_chroma(lightness, hue, chroma), H=hue)
        added.append(last.hex)

    return tuple(palette) + tuple(added)
