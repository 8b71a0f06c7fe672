# Copyright (c) 2026 Tonewheel
# SPDX-License-Identifier: MIT

"""
Generation core for Tonewheel.

Color codec, gamut estimation, palettes and gradients.
Every operation is a pure function of its arguments.
"""

from tonewheel.generate.colorspace import (
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    oklch_to_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from tonewheel.generate.gamut import max_chroma
from tonewheel.generate.gradient import (
    GradientConfig,
    generate_combined_gradient,
    generate_gradient,
    generate_saturation_gradient,
    generate_value_gradient,
    gradient_sampler,
    gradient_stops,
    sample_gradient,
)
from tonewheel.generate.palette import (
    PaletteConfig,
    extend_palette,
    generate_palette,
    scheme_offsets,
)

__all__ = [
    # Codec
    "hex_to_oklch",
    "oklch_to_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "rgb_to_hsl",  # Legacy
    "hsl_to_rgb",  # Legacy
    # Gamut
    "max_chroma",
    # Palettes
    "PaletteConfig",
    "generate_palette",
    "extend_palette",
    "scheme_offsets",
    # Gradients
    "GradientConfig",
    "generate_value_gradient",
    "generate_saturation_gradient",
    "generate_combined_gradient",
    "generate_gradient",
    "sample_gradient",
    "gradient_sampler",
    "gradient_stops",
]
