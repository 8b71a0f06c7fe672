# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Tonewheel -- Palette and gradient generation in OKLCH.

Derives harmonious palettes from a single seed color using classical
color-theory schemes, and tonal gradients for each palette color that
a renderer can draw stepped or smooth.

Quick start::

    from tonewheel import generate_palette, generate_value_gradient

    palette = generate_palette("#3b82f6", "triadic", 5)
    steps = generate_value_gradient(palette[1], 7)
"""

from __future__ import annotations

__version__ = "1.0.0"

from tonewheel.errors import InvalidColorFormat, InvalidParameter, TonewheelError
from tonewheel.generate import (
    extend_palette,
    generate_combined_gradient,
    generate_gradient,
    generate_palette,
    generate_saturation_gradient,
    generate_value_gradient,
    gradient_sampler,
    gradient_stops,
    hex_to_oklch,
    hex_to_rgb,
    max_chroma,
    oklch_to_hex,
    rgb_to_hex,
    sample_gradient,
)
from tonewheel.schema import (
    ColorScheme,
    GradientKind,
    GradientStop,
    OKLCHColor,
    RGBColor,
)

__all__ = [
    # Core API
    "generate_palette",
    "extend_palette",
    "generate_value_gradient",
    "generate_saturation_gradient",
    "generate_combined_gradient",
    "generate_gradient",
    "sample_gradient",
    "gradient_sampler",
    "gradient_stops",
    # Codec
    "hex_to_oklch",
    "oklch_to_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "max_chroma",
    # Types (commonly needed)
    "OKLCHColor",
    "RGBColor",
    "ColorScheme",
    "GradientKind",
    "GradientStop",
    # Errors
    "TonewheelError",
    "InvalidColorFormat",
    "InvalidParameter",
    # Version
    "__version__",
]
