# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Tonal gradients around a single source color.

Three kinds:
1. Value: lightness sweeps a band around the source lightness
2. Saturation: chroma sweeps from near-gray up to the gamut limit
3. Both: lightness and chroma sweep together

Every range is centred on the source color's own tone rather than on
black/white, so mid-tone sources never wash out.

Stepped gradients and the continuous sampler share one evaluation
function, so sampling at i/(N-1) reproduces step i of an N-step
gradient exactly.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

from tonewheel.errors import InvalidParameter, ensure_int
from tonewheel.schema import GradientKind, GradientStop, OKLCHColor
from tonewheel.generate.colorspace import hex_to_oklch
from tonewheel.generate.gamut import clamp_chroma, max_chroma

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradientConfig:
    """Tunable constants for gradient generation."""

    # Value gradient: ±band around source lightness, hard limits
    value_band: float = 0.3
    value_lightness_min: float = 0.1
    value_lightness_max: float = 0.98
    # Chroma shrinks by up to this fraction toward the ends of the sweep
    value_chroma_falloff: float = 0.4

    # Saturation gradient: start at this fraction of source chroma
    saturation_floor: float = 0.1
    saturation_min_span: float = 0.15

    # Combined gradient
    combined_band: float = 0.25
    combined_lightness_min: float = 0.15
    combined_lightness_max: float = 0.95
    combined_chroma_floor: float = 0.2
    combined_min_span: float = 0.1

    # Stops per smooth gradient when the renderer does not say
    default_resolution: int = 100


@dataclass(frozen=True)
class _ToneRange:
    """Resolved sweep bounds for one source color and gradient kind."""
    l_min: float
    l_max: float
    c_min: float
    c_max: float


def _lerp(lo: float, hi: float, t: float) -> float:
    return lo + (hi - lo) * t


def _chroma_span(c_min: float, c_max: float, min_span: float) -> tuple[float, float]:
    """Widen a narrow chroma span downward, never below zero or above gamut."""
    if c_max - c_min < min_span:
        c_min = max(0.0, c_max - min_span)
    return c_min, c_max


def _tone_range(source: OKLCHColor, kind: GradientKind, cfg: GradientConfig) -> _ToneRange:
    L, C, H = source.L, source.C, source.H

    if kind is GradientKind.VALUE:
        return _ToneRange(
            l_min=max(cfg.value_lightness_min, L - cfg.value_band),
            l_max=min(cfg.value_lightness_max, L + cfg.value_band),
            c_min=C,
            c_max=C,
        )

    if kind is GradientKind.SATURATION:
        c_min, c_max = _chroma_span(
            max(0.0, cfg.saturation_floor * C),
            max_chroma(L, H),
            cfg.saturation_min_span,
        )
        return _ToneRange(l_min=L, l_max=L, c_min=c_min, c_max=c_max)

    c_min, c_max = _chroma_span(
        cfg.combined_chroma_floor * C,
        max_chroma(L, H),
        cfg.combined_min_span,
    )
    return _ToneRange(
        l_min=max(cfg.combined_lightness_min, L - cfg.combined_band),
        l_max=min(cfg.combined_lightness_max, L + cfg.combined_band),
        c_min=c_min,
        c_max=c_max,
    )


def _tone_at(
    source: OKLCHColor,
    kind: GradientKind,
    tone: _ToneRange,
    progress: float,
    cfg: GradientConfig,
) -> str:
    """Evaluate one gradient position to hex. Shared by steps and sampler."""
    lightness = _lerp(tone.l_min, tone.l_max, progress)

    if source.H is None:
        return OKLCHColor(L=lightness, C=0.0, H=None).hex

    if kind is GradientKind.VALUE:
        chroma = source.C * (1.0 - cfg.value_chroma_falloff * abs(progress - 0.5))
    else:
        chroma = _lerp(tone.c_min, tone.c_max, progress)

    return OKLCHColor(
        L=lightness,
        C=clamp_chroma(lightness, source.H, chroma),
        H=source.H,
    ).hex


def _check_steps(steps: int) -> int:
    steps = ensure_int(steps, "steps")
    if steps < 2:
        raise InvalidParameter(f"steps must be >= 2, got {steps}")
    return steps


def _stepped(
    color: str,
    kind: GradientKind,
    steps: int,
    config: Optional[GradientConfig],
) -> tuple[str, ...]:
    cfg = config or GradientConfig()
    steps = _check_steps(steps)
    source = hex_to_oklch(color)
    tone = _tone_range(source, kind, cfg)
    return tuple(
        _tone_at(source, kind, tone, i / (steps - 1), cfg)
        for i in range(steps)
    )


# =============================================================================
# Stepped Gradients
# =============================================================================


def generate_value_gradient(
    color: str,
    steps: int = 5,
    *,
    config: Optional[GradientConfig] = None,
) -> tuple[str, ...]:
    """
    Lightness gradient, dark to light, centred on the source lightness.

    Lightness spans source L ± 0.3 clamped to [0.1, 0.98]. Chroma dips by
    up to 20% toward both ends and is clamped to the gamut at each step.

    Raises:
        InvalidColorFormat: If color is not a 6-digit hex color
        InvalidParameter: If steps < 2
    """
    return _stepped(color, GradientKind.VALUE, steps, config)


def generate_saturation_gradient(
    color: str,
    steps: int = 5,
    *,
    config: Optional[GradientConfig] = None,
) -> tuple[str, ...]:
    """
    Chroma gradient at constant lightness and hue.

    Chroma runs from 10% of the source chroma up to the gamut limit,
    spanning at least 0.15 where the gamut allows.
    """
    return _stepped(color, GradientKind.SATURATION, steps, config)


def generate_combined_gradient(
    color: str,
    steps: int = 5,
    *,
    config: Optional[GradientConfig] = None,
) -> tuple[str, ...]:
    """Lightness (±0.25) and chroma (20% of source → gamut limit) together."""
    return _stepped(color, GradientKind.BOTH, steps, config)


def generate_gradient(
    color: str,
    kind: Union[GradientKind, str] = GradientKind.VALUE,
    steps: int = 5,
    *,
    config: Optional[GradientConfig] = None,
) -> tuple[str, ...]:
    """Stepped gradient of the given kind ("value", "saturation" or "both")."""
    return _stepped(color, GradientKind.parse(kind), steps, config)


# =============================================================================
# Smooth Gradients
# =============================================================================


def gradient_sampler(
    color: str,
    kind: Union[GradientKind, str] = GradientKind.VALUE,
    *,
    config: Optional[GradientConfig] = None,
) -> Callable[[float], str]:
    """
    Build a continuous gradient: a function from position [0, 1] to hex.

    The source color and sweep bounds are resolved once here; each call
    of the returned function is independent. Positions outside [0, 1]
    are clamped.

    Raises:
        InvalidColorFormat: If color is not a 6-digit hex color
        InvalidParameter: If kind is not a known gradient kind
    """
    cfg = config or GradientConfig()
    resolved = GradientKind.parse(kind)
    source = hex_to_oklch(color)
    tone = _tone_range(source, resolved, cfg)

    def sample(position: float) -> str:
        position = float(position)
        if math.isnan(position):
            raise InvalidParameter("position must be a number in [0, 1], got nan")
        if not 0.0 <= position <= 1.0:
            logger.debug("Gradient position %r clamped to [0, 1]", position)
            position = min(max(position, 0.0), 1.0)
        return _tone_at(source, resolved, tone, position, cfg)

    return sample


def sample_gradient(
    color: str,
    position: float,
    kind: Union[GradientKind, str] = GradientKind.VALUE,
    *,
    config: Optional[GradientConfig] = None,
) -> str:
    """
    Color at `position` along a smooth gradient of the given kind.

    Uses the same formulas as the stepped gradients, so
    ``sample_gradient(c, i / (n - 1), k)`` equals step i of an n-step
    gradient of kind k.
    """
    return gradient_sampler(color, kind, config=config)(position)


def gradient_stops(
    color: str,
    kind: Union[GradientKind, str] = GradientKind.VALUE,
    resolution: Optional[int] = None,
    *,
    config: Optional[GradientConfig] = None,
) -> tuple[GradientStop, ...]:
    """
    Evenly spaced stops for drawing a smooth gradient.

    Args:
        color: Source hex color
        kind: Gradient kind
        resolution: Number of intervals; resolution + 1 stops are returned,
            positions i / resolution (default: 100)
        config: Gradient constants (uses defaults if None)

    Raises:
        InvalidParameter: If resolution < 1
    """
    cfg = config or GradientConfig()
    resolution = ensure_int(
        cfg.default_resolution if resolution is None else resolution,
        "resolution",
    )
    if resolution < 1:
        raise InvalidParameter(f"resolution must be >= 1, got {resolution}")

    sample = gradient_sampler(color, kind, config=cfg)
    return tuple(
        GradientStop(position=i / resolution, hex=sample(i / resolution))
        for i in range(resolution + 1)
    )
